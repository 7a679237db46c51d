"""Analysis report download routes."""

from fastapi import APIRouter, Response
from pydantic import BaseModel, ConfigDict, Field

from childfood_api.api.dependencies import ReportRendererDep
from childfood_api.models.analysis import AgeGroup, AnalysisResult
from childfood_api.services.report import report_filename

router = APIRouter()


class ReportRequest(BaseModel):
    """Analysis plus the child context it was produced for."""

    model_config = ConfigDict(populate_by_name=True)

    analysis: AnalysisResult
    age_group: AgeGroup = Field(..., alias="ageGroup")
    health_conditions: list[str] = Field(default_factory=list, alias="healthConditions")


@router.post(
    "/report",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}, "description": "PDF report"}},
)
async def download_report(request: ReportRequest, renderer: ReportRendererDep):
    """Render an analysis as a downloadable PDF report."""
    content = renderer.render(request.analysis, request.age_group, request.health_conditions)
    filename = report_filename(request.analysis)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
