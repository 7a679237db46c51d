"""
Factory for creating text extraction service instances.

Reads configuration from settings and returns the appropriate provider.
"""

import logging
from functools import lru_cache

from childfood_api.core.config import get_settings

from .base import TextExtractionService
from .tesseract_provider import TesseractTextExtraction

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_text_extraction_service() -> TextExtractionService:
    """
    Get the configured text extraction service.

    Configuration is read from settings:
    - OCR_LANGUAGE: Tesseract language (default: "eng")
    - TESSERACT_CMD: Path to the tesseract binary (default: from PATH)

    Returns:
        Configured TextExtractionService instance
    """
    settings = get_settings()

    logger.info(f"Configuring tesseract text extraction: lang={settings.ocr_language}")

    return TesseractTextExtraction(
        language=settings.ocr_language,
        tesseract_cmd=settings.tesseract_cmd or None,
    )


def clear_service_cache():
    """Clear the cached service instance (useful for testing)."""
    get_text_extraction_service.cache_clear()
