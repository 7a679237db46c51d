"""
AI analysis engine.

Validates the request, asks the chat model for an analysis, and parses and
repairs the answer. Any operational failure (missing key, transport error,
unusable output) is absorbed into a deterministic fallback result; the only
exception callers can see is a ValidationError raised before any model call.
"""

import asyncio
import logging
from typing import Any

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage

from childfood_api.models.analysis import (
    AnalysisOutcome,
    AnalysisRequest,
    AnalysisResult,
    AnalysisSource,
)

from .errors import AnalysisError, MalformedOutput, MissingCredentials, TransportFailure
from .fallback import build_general_fallback_result, build_missing_credentials_result
from .parsing import parse_analysis_response
from .prompts import build_analysis_prompt
from .validator import validate_analysis_request

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


def _message_text(content: Any) -> str:
    """Flatten chat message content (plain string or list of parts)."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)
    return ""


class AnalysisEngine:
    """
    Turns an analysis request into an AnalysisResult, always.

    The chat model is injected so tests can simulate transport failures
    and malformed output. Pass `llm=None` when no credential is configured.

    Usage:
        engine = AnalysisEngine(get_llm(settings), timeout=30)
        result = await engine.analyze(payload)
    """

    def __init__(
        self,
        llm: BaseChatModel | None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        model_name: str | None = None,
    ):
        """
        Initialize analysis engine.

        Args:
            llm: Chat model to call, or None when credentials are missing
            timeout: Seconds to wait for the model before giving up
            model_name: Model name for logging (read from the llm if omitted)
        """
        self._llm = llm
        self.timeout = timeout
        self.model_name = model_name or (
            getattr(llm, "model_name", None) or getattr(llm, "model", None) or "none"
        )

    async def analyze(self, payload: AnalysisRequest | dict[str, Any]) -> AnalysisResult:
        """
        Analyze a product for a child profile.

        Args:
            payload: AnalysisRequest or raw request body

        Returns:
            Structurally valid AnalysisResult

        Raises:
            ValidationError: If the payload is malformed (before any model call)
        """
        outcome = await self.analyze_with_status(payload)
        return outcome.result

    async def analyze_with_status(
        self, payload: AnalysisRequest | dict[str, Any]
    ) -> AnalysisOutcome:
        """Like `analyze`, but also reports which path produced the result."""
        request = validate_analysis_request(payload)

        try:
            raw_text = await self._invoke(build_analysis_prompt(request))
            result = parse_analysis_response(raw_text)
        except MissingCredentials as e:
            logger.warning(f"Analysis fallback ({e.error_code}): {e.message}")
            return AnalysisOutcome(
                result=build_missing_credentials_result(),
                source=AnalysisSource.FALLBACK_MISSING_CREDENTIALS,
            )
        except AnalysisError as e:
            logger.warning(f"Analysis fallback ({e.error_code}): {e.message}")
            return AnalysisOutcome(
                result=build_general_fallback_result(request),
                source=AnalysisSource.FALLBACK_ERROR,
            )

        logger.info(
            f"Analysis complete: {result.product_name} "
            f"({result.suitability.value}, {result.suitability_rating})"
        )
        return AnalysisOutcome(result=result, source=AnalysisSource.MODEL)

    async def _invoke(self, prompt: str) -> str:
        """
        Send the prompt to the chat model and return its raw text.

        Raises:
            MissingCredentials: No model configured (no network I/O attempted)
            TransportFailure: Timeout or any error from the model client
            MalformedOutput: The model returned no text
        """
        if self._llm is None:
            raise MissingCredentials("No API key configured for the analysis model")

        logger.info(f"Sending analysis request to {self.model_name}")

        try:
            response = await asyncio.wait_for(
                self._llm.ainvoke([HumanMessage(content=prompt)]),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            raise TransportFailure(
                f"Model did not respond within {self.timeout}s",
                details={"timeout": self.timeout},
            ) from e
        except Exception as e:
            raise TransportFailure(
                f"Model call failed: {e}",
                details={"exception": type(e).__name__},
            ) from e

        text = _message_text(getattr(response, "content", response))
        logger.debug(f"Raw analysis response: {text[:500]}...")

        if not text.strip():
            raise MalformedOutput("Model returned an empty response")
        return text
