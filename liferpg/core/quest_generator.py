"""
Quest Generator
Proposes a QuestDraft from a classified brain dump.
"""
from types import MappingProxyType
from typing import Optional

from liferpg.models.classification import ClassificationResult, Priority, SuggestedQuestType
from liferpg.models.quest import Difficulty, QuestDraft, QuestObjective, QuestType


DEFAULT_QUEST_NAME = "Address brain dump concern"
MAX_QUEST_NAME_LENGTH = 60
OBJECTIVE_XP_REWARD = 10

# Processing a dump is worth a flat reward plus a bonus per generated quest
BRAIN_DUMP_BASE_XP = 25
BRAIN_DUMP_XP_PER_QUEST = 10

QUEST_TYPE_BY_SUGGESTION = MappingProxyType({
    SuggestedQuestType.URGENT: QuestType.MAIN,
    SuggestedQuestType.MULTI_STEP: QuestType.EPIC,
    SuggestedQuestType.DAILY: QuestType.DAILY,
    SuggestedQuestType.WEEKLY: QuestType.WEEKLY,
    SuggestedQuestType.STANDARD: QuestType.SIDE,
})

DIFFICULTY_BY_PRIORITY = MappingProxyType({
    Priority.CRITICAL: Difficulty.HARD,
    Priority.HIGH: Difficulty.NORMAL,
    Priority.MEDIUM: Difficulty.NORMAL,
    Priority.LOW: Difficulty.EASY,
})

BASE_XP_BY_DIFFICULTY = MappingProxyType({
    Difficulty.TRIVIAL: 10,
    Difficulty.EASY: 25,
    Difficulty.NORMAL: 50,
    Difficulty.HARD: 100,
    Difficulty.LEGENDARY: 200,
})


def _quest_name(result: ClassificationResult) -> str:
    if not result.extracted_tasks:
        return DEFAULT_QUEST_NAME

    name = result.extracted_tasks[0].text
    if len(name) > MAX_QUEST_NAME_LENGTH:
        name = name[:MAX_QUEST_NAME_LENGTH - 3].rstrip() + "..."
    return name[0].upper() + name[1:]


def generate_quest_draft(
    result: ClassificationResult,
    quest_name: Optional[str] = None,
    quest_type: Optional[QuestType] = None,
    difficulty: Optional[Difficulty] = None,
) -> QuestDraft:
    """
    Build a quest proposal from a classification.

    Explicit arguments override what the classification suggests.

    Args:
        result: Classifier output for the brain dump
        quest_name: Custom name (default: first extracted task)
        quest_type: Custom quest type (default: from suggested quest type)
        difficulty: Custom difficulty (default: from priority)

    Returns:
        QuestDraft with one objective per extracted task
    """
    quest_type = quest_type or QUEST_TYPE_BY_SUGGESTION[result.suggested_quest_type]
    difficulty = difficulty or DIFFICULTY_BY_PRIORITY[result.priority]

    objectives = [
        QuestObjective(
            objective_text=task.text,
            objective_order=order,
            xp_reward=OBJECTIVE_XP_REWARD,
        )
        for order, task in enumerate(result.extracted_tasks, start=1)
    ]

    xp_reward = BASE_XP_BY_DIFFICULTY[difficulty] + sum(obj.xp_reward for obj in objectives)

    return QuestDraft(
        quest_name=quest_name or _quest_name(result),
        quest_description=result.interpretation,
        quest_type=quest_type,
        difficulty=difficulty,
        xp_reward=xp_reward,
        skill_tree_rewards=list(result.suggested_skill_trees),
        objectives=objectives,
        confidence_score=result.confidence_score,
    )


def brain_dump_xp_reward(quests_generated: int) -> int:
    """XP granted to the character for processing a brain dump."""
    if quests_generated < 0:
        raise ValueError("quests_generated cannot be negative")
    return BRAIN_DUMP_BASE_XP + BRAIN_DUMP_XP_PER_QUEST * quests_generated
