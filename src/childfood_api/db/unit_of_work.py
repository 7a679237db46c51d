"""Unit of Work pattern for managing repository access."""

from motor.motor_asyncio import AsyncIOMotorDatabase

from .repositories.analyses import AnalysisHistoryRepository
from .repositories.key_value import MongoKeyValueStore


class UnitOfWork:
    """
    Unit of Work pattern implementation.

    Groups repository access and provides a single injection point for services.

    Usage:
        uow = UnitOfWork(db)
        records = await uow.analyses.list_for_child(child_id)
        profile = await uow.key_value.get("userProfile")
    """

    ANALYSES_COLLECTION = "AnalysisHistory"
    KEY_VALUE_COLLECTION = "KeyValueStore"

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize Unit of Work with database instance.

        Args:
            db: Motor database instance
        """
        self._db = db
        self._analyses: AnalysisHistoryRepository | None = None
        self._key_value: MongoKeyValueStore | None = None

    @property
    def analyses(self) -> AnalysisHistoryRepository:
        """
        Get AnalysisHistory repository (lazy loaded).

        Returns:
            AnalysisHistoryRepository instance
        """
        if self._analyses is None:
            self._analyses = AnalysisHistoryRepository(self._db[self.ANALYSES_COLLECTION])
        return self._analyses

    @property
    def key_value(self) -> MongoKeyValueStore:
        """
        Get the key-value store used for profiles and meal plans (lazy loaded).

        Returns:
            MongoKeyValueStore instance
        """
        if self._key_value is None:
            self._key_value = MongoKeyValueStore(self._db[self.KEY_VALUE_COLLECTION])
        return self._key_value
