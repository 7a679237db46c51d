"""Analysis history service."""

import logging

from pymongo.errors import PyMongoError

from childfood_api.db.repositories.analyses import AnalysisHistoryRepository
from childfood_api.models.analysis import AnalysisResult
from childfood_api.models.history import AnalysisRecord

logger = logging.getLogger(__name__)


class HistoryService:
    """
    Saves and lists analyses per child.

    Every operation is a single attempt. Failures are logged and reported
    as None / empty results instead of raising, so a broken database never
    affects an analysis the caller already has.
    """

    def __init__(self, repository: AnalysisHistoryRepository | None):
        """
        Initialize history service.

        Args:
            repository: History repository, or None when MongoDB is not connected
        """
        self.repository = repository

    async def save(
        self,
        child_id: str,
        child_name: str,
        result: AnalysisResult,
    ) -> AnalysisRecord | None:
        """
        Save an analysis for a child.

        Returns:
            The stored record, or None if it could not be saved
        """
        if self.repository is None:
            logger.warning("MongoDB not connected. Analysis will not be saved.")
            return None

        try:
            record = await self.repository.save(child_id, child_name, result)
        except PyMongoError as e:
            logger.error(f"Error saving analysis for child {child_id}: {e}")
            return None

        logger.info(f"Saved analysis {record.id} for child {child_id}")
        return record

    async def list(self, child_id: str, limit: int = 100) -> list[AnalysisRecord]:
        """
        Get a child's analyses, newest first.

        Returns:
            Records, or an empty list if history is unavailable
        """
        if self.repository is None:
            logger.warning("MongoDB not connected. Cannot retrieve analysis history.")
            return []

        try:
            return await self.repository.list_for_child(child_id, limit=limit)
        except PyMongoError as e:
            logger.error(f"Error getting analysis history for child {child_id}: {e}")
            return []

    async def delete(self, record_id: str) -> bool:
        """Delete one saved analysis. Returns True if it existed."""
        if self.repository is None:
            return False
        try:
            return await self.repository.delete_one(record_id)
        except PyMongoError as e:
            logger.error(f"Error deleting analysis {record_id}: {e}")
            return False

    async def clear(self, child_id: str) -> int:
        """Delete all analyses for a child. Returns the number removed."""
        if self.repository is None:
            return 0
        try:
            return await self.repository.delete_for_child(child_id)
        except PyMongoError as e:
            logger.error(f"Error clearing history for child {child_id}: {e}")
            return 0
