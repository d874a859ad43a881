"""Provider registry - maps configured kinds to provider instances."""

from git_msg.config import Config
from git_msg.llm.base import LLMProvider
from git_msg.llm.huggingface import HuggingFaceProvider
from git_msg.llm.local import LocalProvider
from git_msg.llm.openai import OpenAIProvider

PROVIDERS = {
    "openai": OpenAIProvider,
    "huggingface": HuggingFaceProvider,
    "local": LocalProvider,
}

DEFAULT_PROVIDER = "huggingface"

# Config field each provider cannot run without
REQUIRED_SETTINGS = {
    "openai": "openai_api_key",
    "huggingface": "huggingface_token",
    "local": "local_endpoint",
}


def resolve_kind(kind: str | None) -> str:
    """Unknown or unset kinds fall back to the Hugging Face provider."""
    return kind if kind in PROVIDERS else DEFAULT_PROVIDER


def build_provider(kind: str, config: Config) -> LLMProvider:
    """Construct the provider named by kind from the given configuration."""
    kind = resolve_kind(kind)
    if kind == "openai":
        return OpenAIProvider(api_key=config.openai_api_key, model=config.openai_model,
                              endpoint=config.openai_endpoint)
    if kind == "local":
        return LocalProvider(endpoint=config.local_endpoint)
    return HuggingFaceProvider(token=config.huggingface_token, model=config.huggingface_model,
                               endpoint=config.huggingface_endpoint)


def is_configured(kind: str, config: Config) -> bool:
    """True when the provider's required credential or endpoint is non-empty."""
    setting = REQUIRED_SETTINGS.get(kind)
    return bool(setting and getattr(config, setting))
