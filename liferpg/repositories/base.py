"""
Generic Repository Base Class
Async CRUD operations on MongoDB collections.
"""
from typing import Generic, TypeVar, Type, Optional, List, Dict, Any
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from bson import ObjectId
from bson.errors import InvalidId
import datetime as dt

from ..models.base import MongoBaseModel
from ..utils.observability import logger

T = TypeVar("T", bound=MongoBaseModel)


def to_object_id(document_id: str) -> Optional[ObjectId]:
    """Parse a string id, returning None for anything that is not an ObjectId."""
    try:
        return ObjectId(document_id)
    except (InvalidId, TypeError):
        return None


class BaseRepository(Generic[T]):
    """
    Generic async repository for MongoDB collections.
    Provides type-safe CRUD operations for domain models.

    Usage:
        class BrainDumpRepository(BaseRepository[BrainDump]):
            def __init__(self, database: AsyncIOMotorDatabase):
                super().__init__(database, "brain_dumps", BrainDump)
    """

    def __init__(
        self,
        database: AsyncIOMotorDatabase,
        collection_name: str,
        model_class: Type[T]
    ):
        self.database = database
        self.collection: AsyncIOMotorCollection = database[collection_name]
        self.model_class = model_class
        self.collection_name = collection_name

    async def create(self, document: T) -> T:
        """
        Insert a new document into the collection.

        Args:
            document: Domain model instance to persist

        Returns:
            The created document with `_id` populated
        """
        now = dt.datetime.now(dt.UTC)
        document.created_at = now
        document.updated_at = now

        doc_dict = document.model_dump(
            by_alias=True,
            exclude={"id"},
            exclude_none=True,
            mode="python",
        )

        result = await self.collection.insert_one(doc_dict)

        logger.debug(
            f"Created document in {self.collection_name}",
            extra={"document_id": str(result.inserted_id)}
        )

        document.id = str(result.inserted_id)
        return document

    async def find_by_id(self, document_id: str) -> Optional[T]:
        """
        Retrieve a document by its ObjectId.

        Returns:
            Domain model instance or None if not found or the id is malformed
        """
        object_id = to_object_id(document_id)
        if object_id is None:
            return None

        doc = await self.collection.find_one({"_id": object_id})

        if doc is None:
            return None

        return self._to_model(doc)

    async def find_many(
        self,
        filter_dict: Dict[str, Any],
        limit: int = 100,
        skip: int = 0,
        sort: Optional[List[tuple]] = None
    ) -> List[T]:
        """
        Retrieve multiple documents matching the filter.

        Args:
            filter_dict: MongoDB query filter
            limit: Maximum number of documents to return
            skip: Number of documents to skip (pagination)
            sort: List of (field, direction) tuples for sorting

        Returns:
            List of domain model instances
        """
        cursor = self.collection.find(filter_dict).skip(skip).limit(limit)

        if sort:
            cursor = cursor.sort(sort)

        docs = await cursor.to_list(length=limit)

        return [self._to_model(doc) for doc in docs]

    async def update(self, document: T) -> T:
        """
        Update an existing document by its _id.

        Raises:
            ValueError: If document has no `id` field
            RuntimeError: If document not found
        """
        if not document.id:
            raise ValueError("Cannot update document without an id")

        document.updated_at = dt.datetime.now(dt.UTC)

        doc_dict = document.model_dump(by_alias=True, exclude={"id"}, mode="python")

        result = await self.collection.update_one(
            {"_id": ObjectId(document.id)},
            {"$set": doc_dict}
        )

        if result.matched_count == 0:
            raise RuntimeError(f"Document with id {document.id} not found")

        logger.debug(
            f"Updated document in {self.collection_name}",
            extra={"document_id": document.id}
        )

        return document

    async def delete(self, document_id: str) -> bool:
        """
        Delete a document by its ObjectId.

        Returns:
            True if document was deleted, False if not found
        """
        object_id = to_object_id(document_id)
        if object_id is None:
            return False

        result = await self.collection.delete_one({"_id": object_id})

        if result.deleted_count > 0:
            logger.debug(
                f"Deleted document from {self.collection_name}",
                extra={"document_id": document_id}
            )
            return True

        return False

    async def count(self, filter_dict: Optional[Dict[str, Any]] = None) -> int:
        filter_dict = filter_dict or {}
        return await self.collection.count_documents(filter_dict)

    def _to_model(self, doc: Dict[str, Any]) -> T:
        """
        Convert MongoDB document to Pydantic model instance.
        Unknown keys are dropped so older documents still validate.
        """
        if "_id" in doc:
            doc["_id"] = str(doc["_id"])

        model_fields = self.model_class.model_fields.keys()

        cleaned_doc = {
            k: v for k, v in doc.items()
            if k in model_fields or k == "_id"
        }

        return self.model_class.model_validate(cleaned_doc)
