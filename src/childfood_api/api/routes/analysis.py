"""Product analysis API routes."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Response

from childfood_api.api.dependencies import EngineDep
from childfood_api.models.analysis import AnalysisResult

router = APIRouter()
logger = logging.getLogger(__name__)

SOURCE_HEADER = "X-Analysis-Source"


@router.post(
    "/analyze",
    response_model=AnalysisResult,
    responses={422: {"description": "Invalid analysis request"}},
    summary="Analyze a product label for a child",
)
async def analyze_product(
    engine: EngineDep,
    response: Response,
    payload: Annotated[Any, Body()],
) -> AnalysisResult:
    """
    Analyze extracted label text for an age group and health conditions.

    Always returns a complete analysis. When the model is unavailable or
    answers with unusable output a deterministic fallback is returned and
    the `X-Analysis-Source` header says which one.

    - **ageGroup**: "0-2", "3-6" or "7-10"
    - **healthConditions**: Selected condition names
    - **additionalConditions**: Free-text conditions
    - **healthNotes**: Free-text notes
    - **extractedText**: Ingredient list text
    """
    outcome = await engine.analyze_with_status(payload)
    response.headers[SOURCE_HEADER] = outcome.source.value
    return outcome.result
