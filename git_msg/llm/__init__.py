"""LLM Provider Package"""

from git_msg.llm.base import LLMProvider, HTTPResponse, post_json
from git_msg.llm.huggingface import HuggingFaceProvider, decode_generation
from git_msg.llm.local import LocalProvider
from git_msg.llm.openai import OpenAIProvider
from git_msg.llm.registry import PROVIDERS, DEFAULT_PROVIDER, build_provider, is_configured, resolve_kind
from git_msg.llm.fallback import FallbackCoordinator, GenerationOutcome, FALLBACK_ORDER

__all__ = [
    "LLMProvider",
    "HTTPResponse",
    "post_json",
    "OpenAIProvider",
    "HuggingFaceProvider",
    "LocalProvider",
    "decode_generation",
    "PROVIDERS",
    "DEFAULT_PROVIDER",
    "build_provider",
    "is_configured",
    "resolve_kind",
    "FallbackCoordinator",
    "GenerationOutcome",
    "FALLBACK_ORDER",
]
