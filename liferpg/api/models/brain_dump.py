"""
Pydantic models for brain dump API payloads.
"""
from pydantic import BaseModel, Field
from typing import Optional

from liferpg.config import settings
from liferpg.models.brain_dump import DumpCategory, InputMethod
from liferpg.models.quest import Difficulty, QuestType


class ClassifyRequest(BaseModel):
    """Stateless classification request. Empty text is allowed."""
    text: str = Field(..., description="Free-text brain dump to classify")


class CreateBrainDumpRequest(BaseModel):
    content: str = Field(
        ...,
        min_length=settings.brain_dump_min_length,
        max_length=settings.brain_dump_max_length,
        description="The captured thoughts"
    )
    input_method: InputMethod = Field(default=InputMethod.TEXT)
    dump_category: Optional[DumpCategory] = Field(None, description="User-chosen label")
    process_immediately: Optional[bool] = Field(
        None,
        description="Classify right away (defaults to server setting)"
    )


class GenerateQuestRequest(BaseModel):
    quest_name: Optional[str] = Field(None, min_length=1, max_length=120)
    quest_type: Optional[QuestType] = None
    difficulty: Optional[Difficulty] = None
