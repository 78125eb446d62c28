"""
Brain Dump Processor
Coordinates submission, classification and persistence of brain dumps.

Flow:
    submit → BrainDump(pending) → process → classify → ProcessingRecord
           → BrainDump(completed | needs_review)
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from loguru import logger

from liferpg.config import settings
from liferpg.core.classifier import BrainDumpClassifier
from liferpg.models.brain_dump import (
    BrainDump,
    DumpCategory,
    InputMethod,
    ProcessingRecord,
    ProcessingStatus,
)
from liferpg.models.classification import ClassificationResult
from liferpg.repositories import db_manager, BrainDumpRepository, ProcessingRecordRepository
from liferpg.utils.observability import log_business_event


class BrainDumpNotFoundError(Exception):
    """Raised when a brain dump id does not resolve to a stored dump."""
    pass


class BrainDumpAlreadyProcessedError(Exception):
    """Raised when processing is requested for a dump that was already processed."""
    pass


class ProcessorNotInitializedError(Exception):
    """Raised when persistence is used before initialize()."""
    pass


@dataclass
class ProcessingOutcome:
    """Result of processing one brain dump."""
    brain_dump: BrainDump
    record: ProcessingRecord


@dataclass
class BrainDumpResults:
    """A brain dump together with every classifier run stored for it."""
    brain_dump: BrainDump
    records: List[ProcessingRecord] = field(default_factory=list)

    @property
    def is_processed(self) -> bool:
        return self.brain_dump.processed

    @property
    def latest(self) -> Optional[ProcessingRecord]:
        return self.records[0] if self.records else None


class BrainDumpProcessor:
    """
    Owns the brain dump lifecycle.

    Usage:
        >>> processor = BrainDumpProcessor()
        >>> await processor.initialize()
        >>> dump, outcome = await processor.submit("Need to call the bank today")
        >>> outcome = await processor.process(dump.id)
    """

    def __init__(
        self,
        classifier: BrainDumpClassifier | None = None,
        brain_dump_repo: BrainDumpRepository | None = None,
        record_repo: ProcessingRecordRepository | None = None,
    ):
        """
        Args:
            classifier: Classifier instance (creates new if None)
            brain_dump_repo: Repository override for testing
            record_repo: Repository override for testing
        """
        self.classifier = classifier or BrainDumpClassifier()
        self.brain_dump_repo: Optional[BrainDumpRepository] = brain_dump_repo
        self.record_repo: Optional[ProcessingRecordRepository] = record_repo

        logger.info("BrainDumpProcessor created")

    async def initialize(self) -> None:
        """
        Connect to MongoDB, create indexes and build repositories.
        Not needed for stateless classify().
        """
        logger.info("Initializing BrainDumpProcessor with MongoDB persistence")

        await db_manager.connect()
        await db_manager.create_indexes()

        db = db_manager.database
        self.brain_dump_repo = BrainDumpRepository(db)
        self.record_repo = ProcessingRecordRepository(db)

        logger.info("BrainDumpProcessor initialized with persistence layer")

    async def shutdown(self) -> None:
        logger.info("Shutting down BrainDumpProcessor")
        await db_manager.disconnect()

    @property
    def is_ready(self) -> bool:
        return self.brain_dump_repo is not None and self.record_repo is not None

    def _require_repositories(self) -> tuple[BrainDumpRepository, ProcessingRecordRepository]:
        if not self.is_ready:
            raise ProcessorNotInitializedError(
                "Repositories not initialized. Call await processor.initialize() first."
            )
        return self.brain_dump_repo, self.record_repo

    def classify(self, raw_text: str) -> ClassificationResult:
        """Stateless classification; nothing is persisted."""
        return self.classifier.classify(raw_text)

    async def submit(
        self,
        raw_text: str,
        input_method: InputMethod = InputMethod.TEXT,
        dump_category: Optional[DumpCategory] = None,
        process_immediately: Optional[bool] = None,
    ) -> tuple[BrainDump, Optional[ProcessingOutcome]]:
        """
        Store a new brain dump and optionally process it straight away.

        Args:
            raw_text: The captured text
            input_method: How it was captured
            dump_category: The user's own label, if any
            process_immediately: Defaults to settings.process_immediately_default

        Returns:
            (stored dump, processing outcome or None)
        """
        brain_dump_repo, _ = self._require_repositories()

        if process_immediately is None:
            process_immediately = settings.process_immediately_default

        brain_dump = await brain_dump_repo.create(BrainDump(
            raw_text=raw_text,
            input_method=input_method,
            dump_category=dump_category,
        ))

        log_business_event(
            "brain_dump_submitted",
            brain_dump.id,
            input_method=input_method.value,
            text_length=len(raw_text),
        )

        if not process_immediately:
            return brain_dump, None

        outcome = await self.process(brain_dump.id)
        return outcome.brain_dump, outcome

    async def process(self, brain_dump_id: str) -> ProcessingOutcome:
        """
        Classify a stored brain dump and persist the result.
        On failure the dump is marked FAILED and no processing record is kept.

        Raises:
            BrainDumpNotFoundError: Unknown id
            BrainDumpAlreadyProcessedError: Dump was processed before
        """
        brain_dump_repo, record_repo = self._require_repositories()

        brain_dump = await brain_dump_repo.find_by_id(brain_dump_id)
        if brain_dump is None:
            raise BrainDumpNotFoundError(f"Brain dump {brain_dump_id} not found")

        if brain_dump.processed:
            raise BrainDumpAlreadyProcessedError(f"Brain dump {brain_dump_id} already processed")

        await brain_dump_repo.set_status(brain_dump_id, ProcessingStatus.PROCESSING)
        brain_dump.processing_status = ProcessingStatus.PROCESSING

        record: Optional[ProcessingRecord] = None
        try:
            result = self.classifier.classify(brain_dump.raw_text, brain_dump_id=brain_dump_id)

            record = await record_repo.create(ProcessingRecord(
                brain_dump_id=brain_dump_id,
                result=result,
            ))

            brain_dump = await brain_dump_repo.mark_processed(
                brain_dump,
                confidence_score=result.confidence_score,
                requires_human_review=result.requires_human_review,
            )

        except Exception as e:
            logger.error(f"Brain dump processing failed for {brain_dump_id}: {e}")
            # A failed dump has no results
            if record is not None:
                await record_repo.delete(record.id)
            await brain_dump_repo.set_status(brain_dump_id, ProcessingStatus.FAILED)
            raise

        log_business_event(
            "brain_dump_processed",
            brain_dump_id,
            status=brain_dump.processing_status.value,
            suggested_action=result.suggested_action.value,
            task_count=len(result.extracted_tasks),
        )

        return ProcessingOutcome(brain_dump=brain_dump, record=record)

    async def get_results(self, brain_dump_id: str) -> BrainDumpResults:
        """
        Raises:
            BrainDumpNotFoundError: Unknown id
        """
        brain_dump_repo, record_repo = self._require_repositories()

        brain_dump = await brain_dump_repo.find_by_id(brain_dump_id)
        if brain_dump is None:
            raise BrainDumpNotFoundError(f"Brain dump {brain_dump_id} not found")

        records = await record_repo.list_for_brain_dump(brain_dump_id)
        return BrainDumpResults(brain_dump=brain_dump, records=records)

    async def list_brain_dumps(
        self,
        processed: Optional[bool] = None,
        limit: Optional[int] = None,
    ) -> List[BrainDump]:
        brain_dump_repo, _ = self._require_repositories()
        return await brain_dump_repo.list_recent(
            processed=processed,
            limit=limit or settings.recent_dumps_limit,
        )

    async def stats(self) -> Dict[str, object]:
        """Totals for the brain dump dashboard."""
        brain_dump_repo, _ = self._require_repositories()

        by_status = await brain_dump_repo.count_by_status()
        total = sum(by_status.values())
        processed = by_status[ProcessingStatus.COMPLETED] + by_status[ProcessingStatus.NEEDS_REVIEW]

        return {
            "total_dumps": total,
            "processed_dumps": processed,
            "by_status": {status.value: count for status, count in by_status.items()},
        }
