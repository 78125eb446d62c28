import datetime as dt
from enum import StrEnum
from typing import Optional
from pydantic import Field
from liferpg.models.base import MongoBaseModel
from liferpg.models.classification import ClassificationResult


class InputMethod(StrEnum):
    TEXT = "text"
    VOICE = "voice"
    SCREENSHOT = "screenshot"
    EMAIL = "email"

class DumpCategory(StrEnum):
    URGENT = "urgent"
    RANDOM = "random"
    IDEA = "idea"
    WORRY = "worry"
    TASK = "task"
    MEMORY = "memory"

class ProcessingStatus(StrEnum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    NEEDS_REVIEW = "needs_review"
    FAILED = "failed"


class BrainDump(MongoBaseModel):
    """
    A raw capture of unstructured thoughts, waiting to be structured.
    The classification itself lives in ProcessingRecord; only the
    headline numbers are copied here for cheap listing.
    """
    raw_text: str
    input_method: InputMethod = InputMethod.TEXT
    dump_category: Optional[DumpCategory] = None

    processed: bool = False
    processing_status: ProcessingStatus = ProcessingStatus.PENDING
    confidence_score: Optional[float] = Field(default=None, ge=0, le=1.0)
    requires_human_review: bool = False


class ProcessingRecord(MongoBaseModel):
    """One classifier run over a brain dump."""
    brain_dump_id: str = Field(..., description="Linked to BrainDump.id")
    result: ClassificationResult
    processed_at: dt.datetime = Field(default_factory=lambda: dt.datetime.now(dt.UTC))
