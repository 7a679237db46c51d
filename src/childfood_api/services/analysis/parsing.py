"""
Parsing and repair of raw model responses.

The model may wrap its JSON in prose or code fences, so the first
top-level balanced `{...}` span that decodes as an object is used.
"""

import json
import logging
from typing import Any

import pydantic

from childfood_api.models.analysis import AnalysisResult, Suitability

from .errors import MalformedOutput

logger = logging.getLogger(__name__)


REQUIRED_FIELDS = ("productName", "suitability", "ingredients")

OPTIONAL_LIST_FIELDS = ("specialWarnings", "alternatives", "comparisonTable")

# Authoritative rating used whenever the model's own rating is unusable
SUITABILITY_RATINGS = {
    Suitability.GOOD.value: 85,
    Suitability.MODERATE.value: 60,
    Suitability.POOR.value: 30,
}

DEFAULT_RECOMMENDATIONS = [
    "Consult with a healthcare professional before making significant changes to your child's diet.",
    "Introduce new foods gradually, one at a time, and watch for any reaction before offering more.",
    "Read ingredient labels carefully and avoid known triggers for your child's condition.",
]


def _find_closing_brace(text: str, start: int) -> int | None:
    """Index of the brace closing the object opened at `start`, if any."""
    depth = 0
    in_string = False
    escaped = False

    for i in range(start, len(text)):
        char = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return i

    return None


def _decode_object(candidate: str) -> dict[str, Any] | None:
    """Decode a span as a JSON object; None if it is not one."""
    try:
        value = json.loads(candidate)
    except (json.JSONDecodeError, RecursionError):
        # RecursionError: nesting deeper than the decoder can follow
        return None
    return value if isinstance(value, dict) else None


def _first_object(text: str) -> tuple[str, dict[str, Any]] | None:
    if not text:
        return None

    position = text.find("{")
    while position != -1:
        end = _find_closing_brace(text, position)
        if end is None:
            position = text.find("{", position + 1)
            continue

        candidate = text[position : end + 1]
        decoded = _decode_object(candidate)
        if decoded is not None:
            return candidate, decoded
        position = text.find("{", end + 1)

    return None


def extract_json_object(text: str) -> str | None:
    """
    Extract the first top-level JSON object from free text.

    Braces inside JSON strings are ignored. A balanced span that does not
    decode as an object (including one nested too deeply to decode) is
    skipped and scanning resumes after it; an opening brace that is never
    closed is skipped on its own.

    Args:
        text: Raw model output

    Returns:
        The JSON object substring, or None if there is none
    """
    found = _first_object(text)
    return found[0] if found is not None else None


def _is_missing(value: Any) -> bool:
    # An empty ingredient list is still a list; only absent/blank counts
    return value is None or value == ""


def repair_rating(data: dict[str, Any]) -> None:
    """Replace an absent, non-numeric or out-of-range rating in place."""
    rating = data.get("suitabilityRating")
    usable = (
        isinstance(rating, (int, float))
        and not isinstance(rating, bool)
        and 0 <= rating <= 100
    )
    if usable:
        data["suitabilityRating"] = int(round(rating))
        return

    suitability = data.get("suitability")
    if not isinstance(suitability, str):
        suitability = Suitability.POOR.value
    data["suitabilityRating"] = SUITABILITY_RATINGS.get(
        suitability, SUITABILITY_RATINGS[Suitability.POOR.value]
    )


def repair_analysis_data(data: dict[str, Any]) -> dict[str, Any]:
    """
    Apply repair rules to decoded model output.

    Order: rating, recommendations, then the optional list fields.
    Mutates and returns `data`.
    """
    repair_rating(data)

    if not data.get("recommendations"):
        data["recommendations"] = list(DEFAULT_RECOMMENDATIONS)

    for field in OPTIONAL_LIST_FIELDS:
        if data.get(field) is None:
            data[field] = []

    return data


def parse_analysis_response(text: str) -> AnalysisResult:
    """
    Parse raw model text into a repaired AnalysisResult.

    Args:
        text: Raw model output

    Returns:
        Validated analysis result

    Raises:
        MalformedOutput: No JSON object, required fields missing, or the
            object does not fit the result schema
    """
    found = _first_object(text)
    if found is None:
        raise MalformedOutput(
            "No JSON object found in the response",
            details={"response_preview": text[:200] if text else ""},
        )

    data = found[1]

    missing = [field for field in REQUIRED_FIELDS if _is_missing(data.get(field))]
    if missing:
        raise MalformedOutput(
            "Missing required fields in the analysis response",
            details={"missing": missing},
        )

    repair_analysis_data(data)

    try:
        return AnalysisResult.model_validate(data)
    except pydantic.ValidationError as e:
        logger.debug(f"Analysis response failed schema validation: {e}")
        raise MalformedOutput(
            "Analysis response does not match the result schema",
            details={"errors": e.errors(include_url=False, include_input=False)},
        ) from e
