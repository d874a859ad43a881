"""OpenAI Chat Completions Provider"""

import json
import logging

from git_msg.errors import AuthError, EmptyResultError, ParseError, RemoteError
from git_msg.llm.base import LLMProvider, post_json
from git_msg.prompts import PromptBuilder

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """Chat-completion client. Requires an OpenAI API key."""

    kind = "openai"
    DEFAULT_MODEL = "gpt-4o"
    DEFAULT_ENDPOINT = "https://api.openai.com/v1/chat/completions"
    TIMEOUT = 30
    TEMPERATURE = 0.7

    def __init__(self, api_key: str = "", model: str | None = None, endpoint: str | None = None):
        self.api_key = api_key
        self.model = model or self.DEFAULT_MODEL
        self.endpoint = endpoint or self.DEFAULT_ENDPOINT

    @property
    def name(self) -> str:
        return f"OpenAI ({self.model})"

    def _generate(self, diff: str) -> str:
        if not self.api_key:
            raise AuthError(
                "OpenAI API key is not set. Add openai_api_key to .git-msg.json or:\n"
                "  export OPENAI_API_KEY='your-key-here'"
            )

        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": PromptBuilder().build(diff)}],
            "temperature": self.TEMPERATURE,
        }
        response = post_json(
            self.endpoint,
            payload,
            headers={"Authorization": f"Bearer {self.api_key}"},
            timeout=self.TIMEOUT,
            service="OpenAI API",
        )

        if not response.ok:
            raise RemoteError(self._error_message(response.body), status=response.status)

        try:
            choices = response.json()["choices"]
            contents = [choice["message"]["content"] for choice in choices]
        except (json.JSONDecodeError, KeyError, TypeError) as e:
            raise ParseError(
                f"failed to parse OpenAI API response: {e} (body: {response.body})",
                body=response.body,
            )

        if not contents:
            raise EmptyResultError("no response from OpenAI API")
        if not isinstance(contents[0], str):
            raise ParseError(f"unexpected OpenAI API response format: {response.body}", body=response.body)
        if not contents[0].strip():
            raise EmptyResultError("empty response from OpenAI API")

        logger.debug("received %d choice(s) from %s", len(contents), self.model)
        return contents[0]

    def _error_message(self, body: str) -> str:
        """Pull error.message out of an error body, else a generic message."""
        try:
            message = json.loads(body)["error"]["message"]
        except (json.JSONDecodeError, KeyError, TypeError):
            message = None
        if isinstance(message, str) and message:
            return message
        return "OpenAI API error"
