"""Database module - MongoDB connection, repositories, and Unit of Work."""

from .memory import InMemoryKeyValueStore
from .mongo import MongoDB
from .ports import KeyValueStore
from .unit_of_work import UnitOfWork

__all__ = ["InMemoryKeyValueStore", "KeyValueStore", "MongoDB", "UnitOfWork"]
