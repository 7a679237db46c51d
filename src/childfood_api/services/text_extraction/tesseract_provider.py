"""
Tesseract provider for text extraction.

Uses pytesseract (a wrapper around the tesseract binary) with light Pillow
preprocessing to read ingredient labels.
"""

import asyncio
import io
import logging

import pytesseract
from PIL import Image, ImageOps, UnidentifiedImageError

from .base import TextExtractionError, TextExtractionResult, TextExtractionService

logger = logging.getLogger(__name__)


def _preprocess(image: Image.Image) -> Image.Image:
    """Upright, grayscale and contrast-stretched copy of the photo."""
    image = ImageOps.exif_transpose(image)
    gray = ImageOps.grayscale(image)
    return ImageOps.autocontrast(gray)


def _mean_confidence(data: dict) -> float:
    """Average word confidence, ignoring tesseract's -1 for non-words."""
    confidences = []
    for conf, word in zip(data.get("conf", []), data.get("text", [])):
        try:
            value = float(conf)
        except (TypeError, ValueError):
            continue
        if value >= 0 and str(word).strip():
            confidences.append(value)
    if not confidences:
        return 0.0
    return round(sum(confidences) / len(confidences), 2)


class TesseractTextExtraction(TextExtractionService):
    """
    Text extraction using the local tesseract OCR engine.
    """

    def __init__(self, language: str = "eng", tesseract_cmd: str | None = None):
        """
        Initialize Tesseract provider.

        Args:
            language: Tesseract language code(s), e.g. "eng" or "eng+fra"
            tesseract_cmd: Path to the tesseract binary (default: from PATH)
        """
        self.language = language
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    @property
    def provider_name(self) -> str:
        return f"tesseract/{self.language}"

    async def extract(self, image_data: bytes) -> TextExtractionResult:
        """Extract text in a worker thread; tesseract is blocking."""
        return await asyncio.to_thread(self._extract_sync, image_data)

    def _extract_sync(self, image_data: bytes) -> TextExtractionResult:
        try:
            image = Image.open(io.BytesIO(image_data))
            image.load()
        except (UnidentifiedImageError, OSError) as e:
            raise TextExtractionError(
                message="Could not decode image",
                error_code="INVALID_IMAGE",
                provider=self.provider_name,
                details={"error": str(e)},
            ) from e

        processed = _preprocess(image)

        try:
            text = pytesseract.image_to_string(processed, lang=self.language)
            data = pytesseract.image_to_data(
                processed,
                lang=self.language,
                output_type=pytesseract.Output.DICT,
            )
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError) as e:
            raise TextExtractionError(
                message=f"OCR failed: {e}",
                error_code="PROVIDER_ERROR",
                provider=self.provider_name,
            ) from e

        confidence = _mean_confidence(data)
        logger.info(f"Extracted {len(text)} chars (confidence {confidence})")

        return TextExtractionResult(text=text.strip(), confidence=confidence)
