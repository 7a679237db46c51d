"""Repository for the AnalysisHistory collection."""

import time
from typing import Any

from motor.motor_asyncio import AsyncIOMotorCollection

from childfood_api.models.analysis import AnalysisResult
from childfood_api.models.history import AnalysisRecord

from .base import BaseRepository


class AnalysisHistoryRepository(BaseRepository[AnalysisRecord]):
    """
    Repository for saved product analyses.

    Each document is the camelCase AnalysisResult plus `childId`,
    `childName` and an epoch-millisecond `timestamp`.
    """

    model_class = AnalysisRecord

    def __init__(self, collection: AsyncIOMotorCollection):
        super().__init__(collection)

    async def ensure_indexes(self) -> None:
        """Create the child/timestamp index used by history listings."""
        await self.collection.create_index([("childId", 1), ("timestamp", -1)])

    async def save(
        self,
        child_id: str,
        child_name: str,
        result: AnalysisResult,
    ) -> AnalysisRecord:
        """
        Store an analysis for a child.

        Args:
            child_id: Child identifier
            child_name: Child display name
            result: The analysis to store

        Returns:
            The stored record
        """
        document: dict[str, Any] = {
            **result.to_document(),
            "childId": child_id,
            "childName": child_name,
            "timestamp": int(time.time() * 1000),
        }
        document["id"] = await self.insert_one(document)
        document.pop("_id", None)
        return AnalysisRecord.model_validate(document)

    async def list_for_child(self, child_id: str, limit: int = 100) -> list[AnalysisRecord]:
        """
        Get a child's saved analyses, newest first.

        Args:
            child_id: Child identifier
            limit: Maximum records to return

        Returns:
            List of AnalysisRecord objects
        """
        return await self.find_many(
            filter={"childId": child_id},
            sort=[("timestamp", -1)],
            limit=limit,
        )

    async def delete_for_child(self, child_id: str) -> int:
        """
        Delete all analyses for a child.

        Returns:
            Number of deleted documents
        """
        result = await self.collection.delete_many({"childId": child_id})
        return result.deleted_count
