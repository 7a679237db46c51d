"""Label OCR API routes."""

import logging
from typing import Annotated

from fastapi import APIRouter, File, UploadFile, status
from pydantic import BaseModel, Field

from childfood_api.api.dependencies import SettingsDep, TextExtractionDep
from childfood_api.core.exceptions import APIError
from childfood_api.services.text_extraction import TextExtractionError

router = APIRouter()
logger = logging.getLogger(__name__)


class OCRResponse(BaseModel):
    """Text read from an ingredient label."""

    text: str
    confidence: float = Field(ge=0, le=100)


@router.post(
    "/ocr",
    response_model=OCRResponse,
    responses={
        400: {"description": "No image provided or not an image"},
        413: {"description": "Image too large"},
        500: {"description": "Text extraction failed"},
    },
    summary="Extract text from an ingredient label photo",
)
async def extract_text(
    settings: SettingsDep,
    extractor: TextExtractionDep,
    image: Annotated[UploadFile | None, File(description="Label photo")] = None,
) -> OCRResponse:
    """
    Run OCR on an uploaded label image.

    **Request format:** multipart/form-data with an `image` file (max 5 MB).
    """
    if image is None:
        raise APIError("No image file provided")

    if not (image.content_type or "").startswith("image/"):
        raise APIError(
            "Only image files are allowed",
            details={"received_type": image.content_type},
        )

    data = await image.read()
    if len(data) > settings.max_upload_bytes:
        raise APIError(
            f"Image exceeds maximum size of {settings.max_upload_bytes // (1024 * 1024)} MB",
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            details={"size": len(data), "max_size": settings.max_upload_bytes},
        )

    try:
        result = await extractor.extract(data)
    except TextExtractionError as e:
        logger.error(f"OCR failed ({e.error_code}): {e.message}")
        raise APIError(
            "Failed to process image",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"error_code": e.error_code},
        ) from e

    return OCRResponse(text=result.text, confidence=result.confidence)
