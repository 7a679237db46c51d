"""
Product analysis pipeline.

Validation, prompt construction, model invocation, response repair and the
deterministic fallbacks that keep every analysis well-formed.
"""

from .engine import AnalysisEngine
from .errors import AnalysisError, MalformedOutput, MissingCredentials, TransportFailure
from .factory import get_analysis_engine
from .fallback import build_general_fallback_result, build_missing_credentials_result
from .parsing import extract_json_object, parse_analysis_response
from .prompts import build_analysis_prompt
from .validator import validate_analysis_request

__all__ = [
    "AnalysisEngine",
    "AnalysisError",
    "MalformedOutput",
    "MissingCredentials",
    "TransportFailure",
    "get_analysis_engine",
    "build_general_fallback_result",
    "build_missing_credentials_result",
    "extract_json_object",
    "parse_analysis_response",
    "build_analysis_prompt",
    "validate_analysis_request",
]
