"""Unit tests for analysis history storage."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from childfood_api.db.repositories.analyses import AnalysisHistoryRepository
from childfood_api.models.analysis import AnalysisResult
from childfood_api.services.history import HistoryService


@pytest.fixture
def analysis_result(model_analysis) -> AnalysisResult:
    return AnalysisResult.model_validate(model_analysis)


@pytest.fixture
def collection():
    """Mock Motor collection."""
    return MagicMock()


class TestAnalysisHistoryRepository:
    """Tests for AnalysisHistoryRepository."""

    @pytest.mark.asyncio
    async def test_save(self, collection, analysis_result):
        inserted_id = ObjectId()
        collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=inserted_id))
        repo = AnalysisHistoryRepository(collection)

        record = await repo.save("child-1", "Ava", analysis_result)

        assert record.id == str(inserted_id)
        assert record.child_id == "child-1"
        assert record.child_name == "Ava"
        assert record.timestamp > 0
        assert record.product_name == analysis_result.product_name

        document = collection.insert_one.call_args.args[0]
        assert document["childId"] == "child-1"
        assert document["productName"] == "Banana Puree Pouch"
        assert "suitabilityRating" in document

    @pytest.mark.asyncio
    async def test_list_for_child_newest_first(self, collection, model_analysis):
        docs = [
            {**model_analysis, "_id": ObjectId(), "childId": "child-1",
             "childName": "Ava", "timestamp": 2000},
            {**model_analysis, "_id": ObjectId(), "childId": "child-1",
             "childName": "Ava", "timestamp": 1000},
        ]
        cursor = collection.find.return_value.sort.return_value.skip.return_value.limit.return_value
        cursor.to_list = AsyncMock(return_value=docs)
        repo = AnalysisHistoryRepository(collection)

        records = await repo.list_for_child("child-1")

        assert [r.timestamp for r in records] == [2000, 1000]
        collection.find.assert_called_once_with({"childId": "child-1"})
        collection.find.return_value.sort.assert_called_once_with([("timestamp", -1)])

    @pytest.mark.asyncio
    async def test_list_for_child_skips_invalid_documents(self, collection, model_analysis):
        good_id = ObjectId()
        docs = [
            {**model_analysis, "_id": ObjectId(), "childId": "child-1",
             "childName": "Ava", "timestamp": 3000, "suitability": "Terrible"},
            {**model_analysis, "_id": good_id, "childId": "child-1",
             "childName": "Ava", "timestamp": 2000},
            {"_id": ObjectId(), "childId": "child-1", "timestamp": 1000},
        ]
        cursor = collection.find.return_value.sort.return_value.skip.return_value.limit.return_value
        cursor.to_list = AsyncMock(return_value=docs)
        repo = AnalysisHistoryRepository(collection)

        records = await repo.list_for_child("child-1")

        assert [r.id for r in records] == [str(good_id)]

    @pytest.mark.asyncio
    async def test_delete_invalid_id(self, collection):
        repo = AnalysisHistoryRepository(collection)

        assert await repo.delete_one("not-an-object-id") is False


class TestHistoryService:
    """Tests for HistoryService."""

    @pytest.mark.asyncio
    async def test_save_without_database(self, analysis_result):
        service = HistoryService(None)

        assert await service.save("child-1", "Ava", analysis_result) is None
        assert await service.list("child-1") == []
        assert await service.delete("abc") is False
        assert await service.clear("child-1") == 0

    @pytest.mark.asyncio
    async def test_save_failure_returns_none(self, analysis_result):
        repo = MagicMock()
        repo.save = AsyncMock(side_effect=ServerSelectionTimeoutError("no servers"))
        service = HistoryService(repo)

        assert await service.save("child-1", "Ava", analysis_result) is None
        repo.save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_list_failure_returns_empty(self):
        repo = MagicMock()
        repo.list_for_child = AsyncMock(side_effect=ServerSelectionTimeoutError("no servers"))
        service = HistoryService(repo)

        assert await service.list("child-1") == []

    @pytest.mark.asyncio
    async def test_save_returns_record(self, collection, analysis_result):
        collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=ObjectId()))
        service = HistoryService(AnalysisHistoryRepository(collection))

        record = await service.save("child-1", "Ava", analysis_result)

        assert record is not None
        assert record.child_id == "child-1"
