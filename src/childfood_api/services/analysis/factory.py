"""Factory for the analysis engine."""

import logging

from childfood_api.core.config import Settings, get_settings
from childfood_api.services.llm import API_KEY_ENV, get_llm

from .engine import AnalysisEngine

logger = logging.getLogger(__name__)


def get_analysis_engine(settings: Settings | None = None) -> AnalysisEngine:
    """
    Build an analysis engine from settings.

    Without a usable API key the engine gets no model and answers every
    request with the missing-credentials result.
    """
    if settings is None:
        settings = get_settings()

    llm = None
    if settings.is_llm_configured:
        llm = get_llm(settings)
    else:
        logger.warning(
            f"No usable {settings.llm_provider.value} API key "
            f"(set {API_KEY_ENV[settings.llm_provider]}); analysis will use fallback results"
        )

    return AnalysisEngine(
        llm=llm,
        timeout=settings.analysis_timeout_seconds,
        model_name=settings.llm_model,
    )
