from enum import StrEnum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class SuggestedAction(StrEnum):
    CREATE_QUEST = "create_quest"
    CREATE_TASK = "create_task"
    ADD_NOTE = "add_note"
    CREATE_REMINDER = "create_reminder"
    ADD_TO_REFLECTION = "add_to_reflection"
    IGNORE = "ignore"

class Urgency(StrEnum):
    NOW = "now"
    TODAY = "today"
    THIS_WEEK = "this_week"
    SOMEDAY = "someday"
    UNKNOWN = "unknown"

class Emotion(StrEnum):
    ANXIETY = "anxiety"
    EXCITEMENT = "excitement"
    FRUSTRATION = "frustration"
    SADNESS = "sadness"
    CONFUSION = "confusion"
    MOTIVATION = "motivation"
    FATIGUE = "fatigue"

class Mood(StrEnum):
    TERRIBLE = "terrible"
    BAD = "bad"
    OKAY = "okay"
    GOOD = "good"
    AMAZING = "amazing"

class Category(StrEnum):
    WORK = "work"
    PERSONAL = "personal"
    HEALTH = "health"
    FINANCE = "finance"
    LEARNING = "learning"
    CREATIVE = "creative"
    MAINTENANCE = "maintenance"
    SOCIAL = "social"
    GENERAL = "general"

class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

class SuggestedQuestType(StrEnum):
    URGENT = "urgent"
    MULTI_STEP = "multi-step"
    DAILY = "daily"
    WEEKLY = "weekly"
    STANDARD = "standard"

class PatternFrequency(StrEnum):
    FIRST_TIME = "first_time"
    OCCASIONAL = "occasional"
    RECURRING = "recurring"
    PERSISTENT = "persistent"


class ExtractedTask(BaseModel):
    """An action item pulled out of the brain dump by a task phrase or list marker."""
    model_config = ConfigDict(frozen=True)

    text: str
    urgency: Urgency
    category: Category

class DetectedPattern(BaseModel):
    """A recurring behavioural signal (memory issues, overwhelm, procrastination)."""
    model_config = ConfigDict(frozen=True)

    pattern: str
    confidence: float = Field(ge=0, le=1.0)
    frequency: PatternFrequency
    suggestion: Optional[str] = None

class ExtractedEntities(BaseModel):
    """Formatting metadata computed directly from the raw input."""
    model_config = ConfigDict(frozen=True)

    word_count: int = Field(ge=0)
    has_exclamation: bool
    has_question: bool
    has_capital_words: bool
    text_length: int = Field(ge=0)


class ClassificationResult(BaseModel):
    """The formal output contract of the brain dump classifier."""
    model_config = ConfigDict(frozen=True)

    interpretation: str
    suggested_action: SuggestedAction
    detected_urgency: Urgency

    # Multi-valued labels keep detection order and contain no duplicates
    detected_emotions: List[Emotion] = Field(default_factory=list)
    detected_mood: Mood = Mood.OKAY
    categories: List[Category] = Field(..., min_length=1)

    extracted_tasks: List[ExtractedTask] = Field(default_factory=list)
    patterns: List[DetectedPattern] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)

    suggested_skill_trees: List[str] = Field(default_factory=list)
    suggested_quest_type: SuggestedQuestType
    extracted_entities: ExtractedEntities

    confidence_score: float = Field(ge=0, le=1.0)
    requires_human_review: bool
    priority: Priority
