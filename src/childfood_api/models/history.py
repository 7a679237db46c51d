"""Pydantic models for saved analysis history."""

from pydantic import BaseModel, ConfigDict, Field

from .analysis import AnalysisResult


class AnalysisRecord(AnalysisResult):
    """An analysis result as stored for a child."""

    id: str
    child_id: str = Field(..., alias="childId")
    child_name: str = Field(..., alias="childName")
    timestamp: int = Field(..., description="Epoch milliseconds when saved")


class SaveAnalysisRequest(BaseModel):
    """Request body for saving an analysis to a child's history."""

    model_config = ConfigDict(populate_by_name=True)

    child_id: str = Field(..., alias="childId", min_length=1)
    child_name: str = Field(..., alias="childName")
    analysis: AnalysisResult


class SaveAnalysisResponse(BaseModel):
    """Response for a save request."""

    success: bool
    data: AnalysisRecord | None = None
    error: str | None = None


class AnalysisHistoryResponse(BaseModel):
    """History listing for a child, newest first."""

    success: bool = True
    data: list[AnalysisRecord] = Field(default_factory=list)
