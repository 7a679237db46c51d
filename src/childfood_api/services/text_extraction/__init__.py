"""
Text Extraction Service - OCR for ingredient labels.
"""

from .base import TextExtractionError, TextExtractionResult, TextExtractionService
from .factory import clear_service_cache, get_text_extraction_service
from .tesseract_provider import TesseractTextExtraction

__all__ = [
    "TextExtractionError",
    "TextExtractionResult",
    "TextExtractionService",
    "TesseractTextExtraction",
    "clear_service_cache",
    "get_text_extraction_service",
]
