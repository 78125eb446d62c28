import copy
import pytest
from types import SimpleNamespace
from bson import ObjectId

from liferpg.core.brain_dump_processor import BrainDumpProcessor
from liferpg.core.classifier import BrainDumpClassifier
from liferpg.models.brain_dump import BrainDump
from liferpg.repositories import BrainDumpRepository, ProcessingRecordRepository


def _matches(doc: dict, filter_dict: dict) -> bool:
    return all(doc.get(key) == value for key, value in filter_dict.items())


class FakeCursor:
    """Chainable stand-in for a Motor cursor."""

    def __init__(self, docs):
        self._docs = docs
        self._skip = 0
        self._limit = None
        self._sort = []

    def skip(self, n):
        self._skip = n
        return self

    def limit(self, n):
        self._limit = n
        return self

    def sort(self, keys):
        self._sort = keys
        return self

    async def to_list(self, length=None):
        docs = list(self._docs)
        for key, direction in reversed(self._sort):
            docs.sort(key=lambda d: d.get(key), reverse=direction < 0)
        docs = docs[self._skip:]
        if self._limit:
            docs = docs[:self._limit]
        return [copy.deepcopy(d) for d in docs]


class FakeCollection:
    """In-memory subset of AsyncIOMotorCollection used by the repositories."""

    def __init__(self):
        self.docs = []

    async def insert_one(self, doc):
        stored = copy.deepcopy(doc)
        stored["_id"] = ObjectId()
        self.docs.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    async def find_one(self, filter_dict):
        for doc in self.docs:
            if _matches(doc, filter_dict):
                return copy.deepcopy(doc)
        return None

    def find(self, filter_dict):
        return FakeCursor([d for d in self.docs if _matches(d, filter_dict)])

    async def update_one(self, filter_dict, update):
        for doc in self.docs:
            if _matches(doc, filter_dict):
                doc.update(copy.deepcopy(update["$set"]))
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    async def delete_one(self, filter_dict):
        for index, doc in enumerate(self.docs):
            if _matches(doc, filter_dict):
                del self.docs[index]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    async def count_documents(self, filter_dict):
        return sum(1 for d in self.docs if _matches(d, filter_dict))

    def aggregate(self, pipeline):
        # Only the single {"$group": {"_id": "$field", "count": {"$sum": 1}}} stage
        field = pipeline[0]["$group"]["_id"].lstrip("$")
        counts = {}
        for doc in self.docs:
            counts[doc.get(field)] = counts.get(doc.get(field), 0) + 1
        return FakeCursor([{"_id": key, "count": value} for key, value in counts.items()])


class FakeDatabase:
    def __init__(self):
        self._collections = {}

    def __getitem__(self, name):
        return self._collections.setdefault(name, FakeCollection())

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        return self[name]


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def brain_dump_repo(fake_db):
    return BrainDumpRepository(fake_db)


@pytest.fixture
def record_repo(fake_db):
    return ProcessingRecordRepository(fake_db)


@pytest.fixture
def processor(brain_dump_repo, record_repo):
    """Processor wired to the in-memory database."""
    return BrainDumpProcessor(
        classifier=BrainDumpClassifier(),
        brain_dump_repo=brain_dump_repo,
        record_repo=record_repo,
    )


@pytest.fixture
def sample_brain_dump() -> BrainDump:
    return BrainDump(raw_text="I need to call the doctor today, it's urgent!")
