"""Repository classes for MongoDB collections."""

from .analyses import AnalysisHistoryRepository
from .base import BaseRepository
from .key_value import MongoKeyValueStore

__all__ = ["AnalysisHistoryRepository", "BaseRepository", "MongoKeyValueStore"]
