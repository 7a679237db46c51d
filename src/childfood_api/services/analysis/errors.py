"""Internal failure classes of the analysis engine.

None of these reach the engine's callers; each one selects a fallback.
"""

from typing import Any


class AnalysisError(Exception):
    """Base class for operational failures during analysis."""

    error_code = "ANALYSIS_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MissingCredentials(AnalysisError):
    """No usable API credential is configured."""

    error_code = "MISSING_CREDENTIALS"


class TransportFailure(AnalysisError):
    """Network or model-service error (timeout, 5xx, quota)."""

    error_code = "TRANSPORT_FAILURE"


class MalformedOutput(AnalysisError):
    """The model answered but not with a usable analysis object."""

    error_code = "MALFORMED_OUTPUT"
