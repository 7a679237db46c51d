"""MongoDB-backed KeyValueStore."""

from datetime import UTC, datetime
from typing import Any

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from childfood_api.core.exceptions import DatabaseError
from childfood_api.db.ports import KeyValueStore


class MongoKeyValueStore(KeyValueStore):
    """
    Stores each key as one document: {_id: key, value: ..., updated_at}.

    Optionally namespaced so several users can share a collection.
    Driver errors are raised as DatabaseError.
    """

    def __init__(self, collection: AsyncIOMotorCollection, namespace: str = ""):
        """
        Initialize the store.

        Args:
            collection: Motor collection instance
            namespace: Prefix applied to every key
        """
        self.collection = collection
        self.namespace = namespace

    def _id(self, key: str) -> str:
        return f"{self.namespace}:{key}" if self.namespace else key

    async def get(self, key: str, default: Any = None) -> Any:
        try:
            doc = await self.collection.find_one({"_id": self._id(key)})
        except PyMongoError as e:
            raise DatabaseError(f"Failed to read '{key}'", details=str(e)) from e
        if doc is None:
            return default
        return doc.get("value", default)

    async def set(self, key: str, value: Any) -> None:
        try:
            await self.collection.update_one(
                {"_id": self._id(key)},
                {"$set": {"value": value, "updated_at": datetime.now(UTC)}},
                upsert=True,
            )
        except PyMongoError as e:
            raise DatabaseError(f"Failed to write '{key}'", details=str(e)) from e

    async def delete(self, key: str) -> bool:
        try:
            result = await self.collection.delete_one({"_id": self._id(key)})
        except PyMongoError as e:
            raise DatabaseError(f"Failed to delete '{key}'", details=str(e)) from e
        return result.deleted_count > 0
