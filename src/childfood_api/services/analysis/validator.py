"""Validation of incoming analysis requests."""

from typing import Any

import pydantic

from childfood_api.core.exceptions import ValidationError
from childfood_api.models.analysis import AnalysisRequest


def _field_name(loc: tuple) -> str:
    """Render a pydantic error location as `healthConditions[1]`."""
    name = ""
    for part in loc:
        if isinstance(part, int):
            name += f"[{part}]"
        else:
            name += f".{part}" if name else str(part)
    return name or "body"


def validate_analysis_request(payload: Any) -> AnalysisRequest:
    """
    Validate a raw payload into an AnalysisRequest.

    Args:
        payload: Decoded JSON body (or an already-built request)

    Returns:
        Validated, normalized request

    Raises:
        ValidationError: Listing every offending field
    """
    if isinstance(payload, AnalysisRequest):
        return payload

    if not isinstance(payload, dict):
        raise ValidationError(
            "Analysis request must be a JSON object",
            errors=[{"field": "body", "message": "Expected an object"}],
        )

    try:
        return AnalysisRequest.model_validate(payload)
    except pydantic.ValidationError as e:
        errors = [
            {"field": _field_name(err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        fields = ", ".join(dict.fromkeys(error["field"] for error in errors))
        raise ValidationError(
            f"Invalid analysis request: {fields}",
            errors=errors,
        ) from e
