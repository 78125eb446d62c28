"""
Brain Dump Repository Tests
CRUD and query behaviour against the in-memory Motor fakes.
"""
import datetime as dt
import pytest

from liferpg.core.classifier import classify_brain_dump
from liferpg.models.brain_dump import BrainDump, ProcessingRecord, ProcessingStatus
from liferpg.repositories import BrainDumpRepository, ProcessingRecordRepository
from liferpg.repositories.base import BaseRepository, to_object_id


pytestmark = pytest.mark.asyncio


class TestBaseRepositoryCRUD:
    """Test basic CRUD operations."""

    async def test_public_operations(self):
        """The repository exposes exactly the CRUD operations callers use."""
        public = {name for name in vars(BaseRepository) if not name.startswith("_")}
        assert public == {"create", "find_by_id", "find_many", "update", "delete", "count"}

    async def test_create_populates_id(self, brain_dump_repo: BrainDumpRepository, sample_brain_dump: BrainDump):
        """Should create a dump and return it with _id populated."""
        created = await brain_dump_repo.create(sample_brain_dump)

        assert created.id is not None
        assert to_object_id(created.id) is not None
        assert created.created_at == created.updated_at

    async def test_find_by_id(self, brain_dump_repo, sample_brain_dump):
        created = await brain_dump_repo.create(sample_brain_dump)

        found = await brain_dump_repo.find_by_id(created.id)

        assert found is not None
        assert found.id == created.id
        assert found.raw_text == sample_brain_dump.raw_text

    async def test_find_by_id_missing_or_malformed(self, brain_dump_repo):
        """Unknown and malformed ids both resolve to None."""
        assert await brain_dump_repo.find_by_id("507f1f77bcf86cd799439011") is None
        assert await brain_dump_repo.find_by_id("nope") is None

    async def test_update(self, brain_dump_repo, sample_brain_dump):
        created = await brain_dump_repo.create(sample_brain_dump)
        created.requires_human_review = True

        await brain_dump_repo.update(created)
        found = await brain_dump_repo.find_by_id(created.id)

        assert found.requires_human_review is True

    async def test_update_without_id_raises(self, brain_dump_repo, sample_brain_dump):
        with pytest.raises(ValueError):
            await brain_dump_repo.update(sample_brain_dump)

    async def test_update_missing_document_raises(self, brain_dump_repo):
        dump = BrainDump(id="507f1f77bcf86cd799439011", raw_text="ghost")

        with pytest.raises(RuntimeError):
            await brain_dump_repo.update(dump)

    async def test_delete(self, brain_dump_repo, sample_brain_dump):
        created = await brain_dump_repo.create(sample_brain_dump)

        assert await brain_dump_repo.delete(created.id) is True
        assert await brain_dump_repo.delete(created.id) is False
        assert await brain_dump_repo.delete("nope") is False
        assert await brain_dump_repo.count() == 0

    async def test_unknown_stored_fields_ignored(self, brain_dump_repo, fake_db):
        """Documents written by older versions still load."""
        await fake_db["brain_dumps"].insert_one({"raw_text": "legacy", "legacy_flag": True})

        dumps = await brain_dump_repo.list_recent()

        assert [d.raw_text for d in dumps] == ["legacy"]


async def _insert_dated_dumps(fake_db, *texts):
    base = dt.datetime(2024, 1, 1, tzinfo=dt.UTC)
    for offset, text in enumerate(texts):
        created = base + dt.timedelta(minutes=offset)
        await fake_db["brain_dumps"].insert_one({
            "raw_text": text,
            "processed": False,
            "processing_status": "pending",
            "created_at": created,
            "updated_at": created,
        })


class TestBrainDumpQueries:

    async def test_list_recent_newest_first(self, brain_dump_repo, fake_db):
        await _insert_dated_dumps(fake_db, "first", "second", "third")

        dumps = await brain_dump_repo.list_recent()

        assert [d.raw_text for d in dumps] == ["third", "second", "first"]

    async def test_list_recent_pagination(self, brain_dump_repo, fake_db):
        await _insert_dated_dumps(fake_db, "first", "second", "third")

        page = await brain_dump_repo.list_recent(limit=1, skip=1)

        assert [d.raw_text for d in page] == ["second"]

    async def test_set_status(self, brain_dump_repo, sample_brain_dump):
        created = await brain_dump_repo.create(sample_brain_dump)

        assert await brain_dump_repo.set_status(created.id, ProcessingStatus.PROCESSING) is True
        found = await brain_dump_repo.find_by_id(created.id)
        assert found.processing_status == ProcessingStatus.PROCESSING

    async def test_set_status_unknown_id(self, brain_dump_repo):
        assert await brain_dump_repo.set_status("507f1f77bcf86cd799439011", ProcessingStatus.FAILED) is False
        assert await brain_dump_repo.set_status("nope", ProcessingStatus.FAILED) is False

    @pytest.mark.parametrize("review,expected", [
        (True, ProcessingStatus.NEEDS_REVIEW),
        (False, ProcessingStatus.COMPLETED),
    ])
    async def test_mark_processed(self, brain_dump_repo, sample_brain_dump, review, expected):
        created = await brain_dump_repo.create(sample_brain_dump)

        updated = await brain_dump_repo.mark_processed(
            created, confidence_score=0.75, requires_human_review=review
        )
        found = await brain_dump_repo.find_by_id(created.id)

        assert updated.processing_status == expected
        assert found.processed is True
        assert found.processing_status == expected
        assert found.confidence_score == 0.75

    async def test_count_by_status(self, brain_dump_repo):
        first = await brain_dump_repo.create(BrainDump(raw_text="first"))
        await brain_dump_repo.create(BrainDump(raw_text="second"))
        await brain_dump_repo.set_status(first.id, ProcessingStatus.FAILED)

        counts = await brain_dump_repo.count_by_status()

        assert counts[ProcessingStatus.PENDING] == 1
        assert counts[ProcessingStatus.FAILED] == 1
        assert counts[ProcessingStatus.COMPLETED] == 0
        assert set(counts) == set(ProcessingStatus)


class TestProcessingRecordQueries:

    async def test_records_for_dump(self, record_repo: ProcessingRecordRepository):
        result = classify_brain_dump("xyz abc qqq")
        await record_repo.create(ProcessingRecord(brain_dump_id="a" * 24, result=result))
        await record_repo.create(ProcessingRecord(brain_dump_id="b" * 24, result=result))

        records = await record_repo.list_for_brain_dump("a" * 24)

        assert len(records) == 1
        assert records[0].brain_dump_id == "a" * 24
        assert records[0].result == result

    async def test_latest_for_dump(self, record_repo):
        first = classify_brain_dump("xyz abc qqq")
        second = classify_brain_dump("I need to pay the bill")
        earlier = dt.datetime(2024, 1, 1, tzinfo=dt.UTC)
        await record_repo.create(ProcessingRecord(
            brain_dump_id="a" * 24, result=first, processed_at=earlier
        ))
        await record_repo.create(ProcessingRecord(
            brain_dump_id="a" * 24, result=second, processed_at=earlier + dt.timedelta(hours=1)
        ))

        latest = await record_repo.latest_for_brain_dump("a" * 24)

        assert latest.result == second

    async def test_latest_for_dump_none(self, record_repo):
        assert await record_repo.latest_for_brain_dump("a" * 24) is None
