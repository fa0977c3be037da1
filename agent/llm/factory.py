from agent.errors import MissingCredentialError
from agent.llm.base import LLMClient


def get_llm_client() -> LLMClient:
    from config import settings

    provider = settings.llm_provider.lower()

    if provider == "anthropic":
        from agent.llm.anthropic_client import AnthropicClient
        if not settings.anthropic_api_key:
            raise MissingCredentialError(
                "ANTHROPIC_API_KEY environment variable is not set. "
                "Please add it to your .env file."
            )
        return AnthropicClient(
            api_key=settings.anthropic_api_key,
            model=settings.anthropic_model,
        )

    if provider in ("openai", "custom"):
        from agent.llm.openai_client import OpenAIClient
        if not settings.openai_api_key:
            raise MissingCredentialError(
                "OPENAI_API_KEY environment variable is not set. "
                "Please add it to your .env file."
            )
        base_url = settings.openai_base_url if provider == "custom" else (settings.openai_base_url or None)
        return OpenAIClient(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            base_url=base_url,
        )

    raise ValueError(f"Unknown LLM_PROVIDER: {provider!r}")


def current_model() -> str:
    from config import settings

    provider = settings.llm_provider.lower()
    model_map = {
        "anthropic": settings.anthropic_model,
        "openai": settings.openai_model,
        "custom": settings.openai_model,
    }
    return model_map.get(provider, "unknown")
