"""Chat model construction for the analysis engine."""

from langchain_core.language_models import BaseChatModel

from childfood_api.core.config import LLMProvider, Settings, get_settings

# Environment variable that holds each provider's key
API_KEY_ENV = {
    LLMProvider.GEMINI: "GOOGLE_API_KEY",
    LLMProvider.OPENAI: "OPENAI_API_KEY",
}


def get_llm(settings: Settings | None = None) -> BaseChatModel:
    """
    Build the chat model for the selected provider.

    Client retries are disabled and the request timeout matches
    `analysis_timeout_seconds`: each analysis gets one attempt and falls
    back to heuristics when it fails.

    Raises:
        ValueError: If the provider's API key is missing or too short
    """
    if settings is None:
        settings = get_settings()

    if not settings.is_llm_configured:
        raise ValueError(
            f"No usable {settings.llm_provider.value} API key. "
            f"Set {API_KEY_ENV[settings.llm_provider]} in your .env file."
        )

    options = {
        "model": settings.llm_model,
        "temperature": settings.llm_temperature,
        "timeout": settings.analysis_timeout_seconds,
        "max_retries": 0,
    }

    match settings.llm_provider:
        case LLMProvider.GEMINI:
            from langchain_google_genai import ChatGoogleGenerativeAI

            return ChatGoogleGenerativeAI(google_api_key=settings.llm_api_key.strip(), **options)
        case LLMProvider.OPENAI:
            from langchain_openai import ChatOpenAI

            return ChatOpenAI(api_key=settings.llm_api_key.strip(), **options)
        case _:
            raise ValueError(f"Unsupported LLM provider: {settings.llm_provider}")


def get_llm_info(settings: Settings | None = None) -> dict:
    """
    Describe the analysis model for /health.

    `configured` is False when the key fails the credential check; every
    analysis then returns the missing-credentials result and `api_key_env`
    names the variable to set.
    """
    if settings is None:
        settings = get_settings()

    return {
        "provider": settings.llm_provider.value,
        "model": settings.llm_model,
        "configured": settings.is_llm_configured,
        "api_key_env": API_KEY_ENV[settings.llm_provider],
        "timeout_seconds": settings.analysis_timeout_seconds,
    }
