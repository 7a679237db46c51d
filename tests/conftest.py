"""Pytest configuration and fixtures."""

import json
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from langchain_core.messages import AIMessage

from childfood_api.db.memory import InMemoryKeyValueStore
from childfood_api.main import app


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """
    Create async test client.

    Usage:
        async def test_endpoint(client: AsyncClient):
            response = await client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def analysis_payload() -> dict:
    """Analysis request body as the web client sends it."""
    return {
        "ageGroup": "0-2",
        "healthConditions": ["Eczema"],
        "additionalConditions": "",
        "healthNotes": "Sensitive skin",
        "extractedText": "Organic banana puree, water, sugar, ascorbic acid",
    }


@pytest.fixture
def model_analysis() -> dict:
    """A well-formed analysis object as the model returns it."""
    return {
        "productName": "Banana Puree Pouch",
        "productCategory": "Baby Food",
        "suitability": "Good",
        "suitabilityRating": 82,
        "ingredients": [
            {
                "name": "Banana",
                "description": "Fruit base, rich in potassium",
                "safety": "Safe",
            },
            {
                "name": "Sugar",
                "description": "Added sweetener",
                "safety": "Caution",
                "concerns": "Not recommended under 2 years",
            },
        ],
        "specialWarnings": [
            {"title": "Added Sugar", "description": "Contains added sugar."}
        ],
        "alternatives": [
            {
                "name": "Plum Organics Banana",
                "description": "Single-ingredient puree",
                "rating": "Excellent",
                "benefits": ["No added sugar"],
            }
        ],
        "comparisonTable": [
            {
                "product": "Banana Puree Pouch",
                "suitability": "Good",
                "keyBenefits": "Convenient",
                "freeFrom": "Preservatives",
            }
        ],
        "recommendations": ["Offer as an occasional snack"],
    }


@pytest.fixture
def make_llm():
    """
    Build a fake chat model.

    Usage:
        llm = make_llm(content="...")          # answers with content
        llm = make_llm(side_effect=Exception)  # ainvoke raises
    """

    def _make(content=None, side_effect=None) -> MagicMock:
        llm = MagicMock()
        if side_effect is not None:
            llm.ainvoke = AsyncMock(side_effect=side_effect)
        else:
            llm.ainvoke = AsyncMock(return_value=AIMessage(content=content))
        return llm

    return _make


@pytest.fixture
def model_json(model_analysis) -> str:
    return json.dumps(model_analysis)


@pytest.fixture
def memory_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()
