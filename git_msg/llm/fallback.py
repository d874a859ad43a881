"""Fallback Coordinator - run the primary provider, then at most one alternate."""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from git_msg.config import Config
from git_msg.errors import GenerationError, ValidationError
from git_msg.llm.base import LLMProvider
from git_msg.llm.registry import build_provider, is_configured, resolve_kind

logger = logging.getLogger(__name__)

# Alternates tried after a provider fails; the first one configured wins.
FALLBACK_ORDER = {
    "openai": ("huggingface", "local"),
    "huggingface": ("local",),
    "local": ("huggingface",),
}

FallbackHook = Callable[[LLMProvider, GenerationError, LLMProvider], None]


@dataclass
class GenerationOutcome:
    """Generated text and the provider that produced it."""
    message: str
    provider: LLMProvider
    fell_back: bool = False


class FallbackCoordinator:
    """Selects providers from configuration and performs the single fallback hop."""

    def __init__(self, config: Config,
                 factory: Callable[[str, Config], LLMProvider] = build_provider,
                 on_fallback: Optional[FallbackHook] = None):
        self.config = config
        self._factory = factory
        self._on_fallback = on_fallback

    @property
    def primary_kind(self) -> str:
        return resolve_kind(self.config.provider)

    def fallback_kind(self, failed_kind: str) -> Optional[str]:
        """First configured alternate for a failed provider, or None."""
        for kind in FALLBACK_ORDER.get(failed_kind, ()):
            if kind != failed_kind and is_configured(kind, self.config):
                return kind
        return None

    def generate(self, diff: str) -> GenerationOutcome:
        if not diff:
            raise ValidationError("empty diff provided")

        primary_kind = self.primary_kind
        primary = self._factory(primary_kind, self.config)
        try:
            return GenerationOutcome(primary.generate(diff), primary)
        except GenerationError as e:
            logger.warning("provider failed provider=%s kind=%s error=%s", primary_kind, e.kind, e)
            alternate_kind = self.fallback_kind(primary_kind)
            if alternate_kind is None:
                raise
            primary_error = e

        alternate = self._factory(alternate_kind, self.config)
        if self._on_fallback:
            self._on_fallback(primary, primary_error, alternate)
        logger.info("falling back from %s to %s", primary_kind, alternate_kind)

        return GenerationOutcome(alternate.generate(diff), alternate, fell_back=True)
