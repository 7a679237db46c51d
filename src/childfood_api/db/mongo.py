"""MongoDB connection for analysis history and profile storage."""

import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from childfood_api.core.config import Settings

logger = logging.getLogger(__name__)

SERVER_SELECTION_TIMEOUT_MS = 5000


class MongoDB:
    """
    Process-wide Motor client.

    The service also runs without a database. When no server answers at
    startup the client is discarded: history saves are skipped and
    profiles live in process memory.
    """

    client: AsyncIOMotorClient | None = None
    db_name: str = "childfood_db"

    @classmethod
    async def connect(cls, settings: Settings) -> bool:
        """
        Connect and check that the server answers a ping.

        Args:
            settings: Application settings (`mongo_uri`, `db_name`)

        Returns:
            True if MongoDB is usable
        """
        if not settings.mongo_uri:
            logger.warning("MONGO_URI not set, analysis history disabled")
            return False

        logger.info(f"Connecting to MongoDB at {settings.mongo_uri[:20]}...")
        client = AsyncIOMotorClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS,
        )
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            logger.warning(f"MongoDB unavailable, analysis history disabled: {e}")
            client.close()
            return False

        cls.client = client
        cls.db_name = settings.db_name
        logger.info(f"MongoDB connected, using database {cls.db_name}")
        return True

    @classmethod
    def close(cls) -> None:
        if cls.client is not None:
            cls.client.close()
            cls.client = None

    @classmethod
    def get_database(cls) -> AsyncIOMotorDatabase:
        """
        Get the application database.

        Raises:
            RuntimeError: If MongoDB is not connected
        """
        if cls.client is None:
            raise RuntimeError("MongoDB not connected. Call MongoDB.connect() first.")
        return cls.client[cls.db_name]

    @classmethod
    def is_connected(cls) -> bool:
        return cls.client is not None
