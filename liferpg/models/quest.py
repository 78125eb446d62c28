from enum import StrEnum
from typing import List
from pydantic import BaseModel, Field


class QuestType(StrEnum):
    MAIN = "main"
    SIDE = "side"
    DAILY = "daily"
    WEEKLY = "weekly"
    EPIC = "epic"

class Difficulty(StrEnum):
    TRIVIAL = "trivial"
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"
    LEGENDARY = "legendary"


class QuestObjective(BaseModel):
    objective_text: str
    objective_order: int = Field(ge=1)
    is_required: bool = True
    xp_reward: int = Field(default=10, ge=0)

class QuestDraft(BaseModel):
    """
    A quest proposed from a classified brain dump.
    Not persisted: the character/quest ledger decides whether to accept it.
    """
    quest_name: str = Field(..., min_length=1)
    quest_description: str
    quest_type: QuestType = QuestType.SIDE
    difficulty: Difficulty = Difficulty.NORMAL
    xp_reward: int = Field(default=50, ge=0)
    skill_tree_rewards: List[str] = Field(default_factory=list)
    objectives: List[QuestObjective] = Field(default_factory=list)
    confidence_score: float = Field(ge=0, le=1.0)
