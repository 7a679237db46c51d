"""Analysis history API routes."""

from typing import Annotated

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from childfood_api.api.dependencies import HistoryServiceDep
from childfood_api.core.exceptions import NotFoundError
from childfood_api.models.history import (
    AnalysisHistoryResponse,
    SaveAnalysisRequest,
    SaveAnalysisResponse,
)

router = APIRouter()


@router.post(
    "/save",
    response_model=SaveAnalysisResponse,
    status_code=status.HTTP_201_CREATED,
    responses={500: {"model": SaveAnalysisResponse, "description": "Save failed"}},
)
async def save_analysis(request: SaveAnalysisRequest, service: HistoryServiceDep):
    """
    Save an analysis to a child's history.

    - **childId**: Child identifier
    - **childName**: Child display name
    - **analysis**: The analysis result to store
    """
    record = await service.save(request.child_id, request.child_name, request.analysis)
    if record is None:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=SaveAnalysisResponse(
                success=False, error="Failed to save analysis"
            ).model_dump(exclude_none=True),
        )
    return SaveAnalysisResponse(success=True, data=record)


@router.get("/{child_id}", response_model=AnalysisHistoryResponse)
async def get_history(
    child_id: str,
    service: HistoryServiceDep,
    limit: Annotated[
        int,
        Query(ge=1, le=500, description="Maximum number of records to return"),
    ] = 100,
):
    """
    Get a child's saved analyses, newest first.

    - **child_id**: Child identifier
    - **limit**: Maximum number of records, 1-500 (default: 100)
    """
    records = await service.list(child_id, limit=limit)
    return AnalysisHistoryResponse(data=records)


@router.delete("/records/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_record(record_id: str, service: HistoryServiceDep):
    """Delete one saved analysis."""
    if not await service.delete(record_id):
        raise NotFoundError("Analysis", record_id)


@router.delete("/{child_id}")
async def clear_history(child_id: str, service: HistoryServiceDep):
    """Delete every saved analysis for a child."""
    deleted = await service.clear(child_id)
    return {"success": True, "deleted": deleted}
