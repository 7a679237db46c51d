"""
Base classes and models for the text extraction service.

Defines the abstract interface that OCR providers implement,
plus the standardized result model.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field


class TextExtractionResult(BaseModel):
    """Text read from a product label image."""

    text: str = Field("", description="Extracted text")
    confidence: float = Field(
        0.0, ge=0.0, le=100.0, description="Mean word confidence 0-100"
    )


class TextExtractionError(Exception):
    """Error during text extraction."""

    def __init__(
        self,
        message: str,
        error_code: str = "EXTRACTION_ERROR",
        provider: str = "unknown",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.provider = provider
        self.details = details or {}


class TextExtractionService(ABC):
    """
    Abstract base class for OCR providers.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the name of this provider."""
        ...

    @abstractmethod
    async def extract(self, image_data: bytes) -> TextExtractionResult:
        """
        Extract text from an image.

        Args:
            image_data: Raw image bytes (JPEG or PNG)

        Returns:
            TextExtractionResult with text and confidence

        Raises:
            TextExtractionError: If the image cannot be processed
        """
        ...
