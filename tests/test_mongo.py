"""Unit tests for the MongoDB connection manager."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from childfood_api.core.config import Settings
from childfood_api.db.mongo import MongoDB


@pytest.fixture(autouse=True)
def reset_client():
    yield
    MongoDB.client = None


@pytest.fixture
def motor_client():
    with patch("childfood_api.db.mongo.AsyncIOMotorClient") as client_cls:
        client = client_cls.return_value
        client.admin.command = AsyncMock(return_value={"ok": 1})
        yield client_cls


class TestMongoDB:
    """Tests for MongoDB.connect and friends."""

    @pytest.mark.asyncio
    async def test_empty_uri_skips_connection(self, motor_client):
        connected = await MongoDB.connect(Settings(mongo_uri="", _env_file=None))

        assert connected is False
        assert MongoDB.is_connected() is False
        motor_client.assert_not_called()

    @pytest.mark.asyncio
    async def test_connect(self, motor_client):
        settings = Settings(mongo_uri="mongodb://db:27017", db_name="kids", _env_file=None)

        connected = await MongoDB.connect(settings)

        assert connected is True
        assert MongoDB.is_connected() is True
        motor_client.assert_called_once_with(
            "mongodb://db:27017", serverSelectionTimeoutMS=5000
        )
        motor_client.return_value.admin.command.assert_awaited_once_with("ping")
        assert MongoDB.get_database() is motor_client.return_value.__getitem__.return_value
        motor_client.return_value.__getitem__.assert_called_with("kids")

    @pytest.mark.asyncio
    async def test_unreachable_server(self, motor_client):
        client = motor_client.return_value
        client.admin.command.side_effect = ServerSelectionTimeoutError("no servers")

        connected = await MongoDB.connect(Settings(mongo_uri="mongodb://db", _env_file=None))

        assert connected is False
        assert MongoDB.is_connected() is False
        client.close.assert_called_once()

    def test_get_database_without_connection(self):
        with pytest.raises(RuntimeError):
            MongoDB.get_database()

    def test_close(self):
        client = MagicMock()
        MongoDB.client = client

        MongoDB.close()

        client.close.assert_called_once()
        assert MongoDB.client is None
