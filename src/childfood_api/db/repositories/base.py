"""Base repository class with common database operations."""

import logging
from typing import Any, Generic, TypeVar

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection
import pydantic
from pydantic import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """
    Base repository providing common CRUD operations.

    Subclasses should set the `model_class` attribute to enable
    automatic document-to-model conversion.
    """

    model_class: type[T] | None = None

    def __init__(self, collection: AsyncIOMotorCollection):
        """
        Initialize repository with a MongoDB collection.

        Args:
            collection: Motor collection instance
        """
        self.collection = collection

    def _to_model(self, doc: dict[str, Any] | None) -> T | dict[str, Any] | None:
        """Convert MongoDB document to Pydantic model if model_class is set."""
        if doc is None:
            return None
        if self.model_class is not None:
            # Convert ObjectId to string for id field
            if "_id" in doc:
                doc["id"] = str(doc.pop("_id"))
            return self.model_class.model_validate(doc)
        return doc

    def _to_models(self, docs: list[dict[str, Any]]) -> list[T | dict[str, Any]]:
        """
        Convert list of MongoDB documents to models.

        Documents that no longer fit the model are logged and skipped.
        """
        models = []
        for doc in docs:
            if doc is None:
                continue
            doc_id = doc.get("_id")
            try:
                models.append(self._to_model(doc))
            except pydantic.ValidationError as e:
                logger.warning(
                    f"Skipping invalid {self.collection.name} document {doc_id}: "
                    f"{e.error_count()} validation errors"
                )
        return models

    async def find_many(
        self,
        filter: dict[str, Any] | None = None,
        sort: list[tuple[str, int]] | None = None,
        limit: int = 100,
        skip: int = 0,
    ) -> list[T | dict[str, Any]]:
        """
        Find multiple documents matching filter.

        Args:
            filter: MongoDB query filter
            sort: List of (field, direction) tuples
            limit: Maximum documents to return
            skip: Number of documents to skip

        Returns:
            List of documents as models or dicts
        """
        cursor = self.collection.find(filter or {})

        if sort:
            cursor = cursor.sort(sort)

        cursor = cursor.skip(skip).limit(limit)
        docs = await cursor.to_list(length=limit)
        return self._to_models(docs)

    async def insert_one(self, document: dict[str, Any]) -> str:
        """
        Insert a single document.

        Args:
            document: Document to insert

        Returns:
            Inserted document ID as string
        """
        result = await self.collection.insert_one(document)
        return str(result.inserted_id)

    async def delete_one(self, id: str) -> bool:
        """
        Delete a single document by ID.

        Args:
            id: Document ObjectId as string

        Returns:
            True if document was deleted
        """
        try:
            object_id = ObjectId(id)
        except InvalidId:
            return False
        result = await self.collection.delete_one({"_id": object_id})
        return result.deleted_count > 0
