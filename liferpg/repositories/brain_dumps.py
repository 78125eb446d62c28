"""
Brain Dump Repositories
Persistence for raw brain dumps and their classifier results.
"""
from typing import Optional, List
from motor.motor_asyncio import AsyncIOMotorDatabase
import datetime as dt

from .base import BaseRepository, to_object_id
from ..models.brain_dump import BrainDump, ProcessingRecord, ProcessingStatus
from ..utils.observability import logger


class BrainDumpRepository(BaseRepository[BrainDump]):
    """
    Repository for BrainDump persistence and status tracking.
    """

    def __init__(self, database: AsyncIOMotorDatabase):
        super().__init__(database, "brain_dumps", BrainDump)

    async def list_recent(
        self,
        processed: Optional[bool] = None,
        limit: int = 50,
        skip: int = 0
    ) -> List[BrainDump]:
        """
        Retrieve brain dumps, newest first.

        Args:
            processed: Filter by processed flag (None for all)
            limit: Maximum number of dumps to return
            skip: Number of dumps to skip (pagination)
        """
        filter_dict = {} if processed is None else {"processed": processed}

        return await self.find_many(
            filter_dict=filter_dict,
            limit=limit,
            skip=skip,
            sort=[("created_at", -1)]
        )

    async def set_status(self, brain_dump_id: str, status: ProcessingStatus) -> bool:
        """
        Update only the processing status of a dump.

        Returns:
            True if updated, False if the dump was not found
        """
        object_id = to_object_id(brain_dump_id)
        if object_id is None:
            return False

        result = await self.collection.update_one(
            {"_id": object_id},
            {
                "$set": {
                    "processing_status": status.value,
                    "updated_at": dt.datetime.now(dt.UTC)
                }
            }
        )

        if result.matched_count > 0:
            logger.debug(
                f"Brain dump status: {brain_dump_id} -> {status}",
                extra={"brain_dump_id": brain_dump_id, "status": status.value}
            )
            return True

        return False

    async def mark_processed(
        self,
        brain_dump: BrainDump,
        confidence_score: float,
        requires_human_review: bool,
    ) -> BrainDump:
        """
        Record the headline classification numbers on the dump.
        Flagged dumps end in NEEDS_REVIEW, the rest in COMPLETED.
        """
        brain_dump.processed = True
        brain_dump.confidence_score = confidence_score
        brain_dump.requires_human_review = requires_human_review
        brain_dump.processing_status = (
            ProcessingStatus.NEEDS_REVIEW if requires_human_review
            else ProcessingStatus.COMPLETED
        )
        return await self.update(brain_dump)

    async def count_by_status(self) -> dict[ProcessingStatus, int]:
        """
        Get dump count for each processing status (analytics).
        """
        pipeline = [
            {
                "$group": {
                    "_id": "$processing_status",
                    "count": {"$sum": 1}
                }
            }
        ]

        results = await self.collection.aggregate(pipeline).to_list(length=None)

        status_counts = {status: 0 for status in ProcessingStatus}

        for result in results:
            try:
                status_counts[ProcessingStatus(result["_id"])] = result["count"]
            except ValueError:
                logger.warning(f"Unknown processing status in database: {result['_id']}")

        return status_counts


class ProcessingRecordRepository(BaseRepository[ProcessingRecord]):
    """
    Repository for classifier results, one document per processing run.
    """

    def __init__(self, database: AsyncIOMotorDatabase):
        super().__init__(database, "processing_records", ProcessingRecord)

    async def list_for_brain_dump(self, brain_dump_id: str, limit: int = 20) -> List[ProcessingRecord]:
        """All processing runs for a dump, newest first."""
        return await self.find_many(
            filter_dict={"brain_dump_id": brain_dump_id},
            limit=limit,
            sort=[("processed_at", -1)]
        )

    async def latest_for_brain_dump(self, brain_dump_id: str) -> Optional[ProcessingRecord]:
        records = await self.list_for_brain_dump(brain_dump_id, limit=1)
        return records[0] if records else None
