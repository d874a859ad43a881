"""Local Model Service Provider

Talks to a self-hosted HTTP service that owns its own prompting:
POST {"diff": ...} -> {"commit_message": ..., "error": ...}
"""

import json
import logging

from git_msg.errors import AuthError, EmptyResultError, ParseError, RemoteError
from git_msg.llm.base import LLMProvider, post_json

logger = logging.getLogger(__name__)


class LocalProvider(LLMProvider):
    """Client for a local generation endpoint."""

    kind = "local"
    DEFAULT_ENDPOINT = "http://localhost:8000/generate"
    TIMEOUT = 30

    def __init__(self, endpoint: str = ""):
        self.endpoint = endpoint

    @property
    def name(self) -> str:
        return f"local model ({self.endpoint})"

    def _generate(self, diff: str) -> str:
        if not self.endpoint:
            raise AuthError(
                "local endpoint URL is not set. Add local_endpoint to .git-msg.json or:\n"
                "  export GIT_MSG_LOCAL_ENDPOINT='http://localhost:8000/generate'"
            )

        response = post_json(self.endpoint, {"diff": diff}, timeout=self.TIMEOUT, service="local API")

        reason = "expected a JSON object"
        try:
            data = response.json()
        except json.JSONDecodeError as e:
            data = None
            reason = str(e)

        if not response.ok:
            error = data.get("error") if isinstance(data, dict) else None
            raise RemoteError(error if isinstance(error, str) and error else "Local API error",
                              status=response.status)

        if not isinstance(data, dict):
            raise ParseError(f"failed to parse API response: {reason} (body: {response.body})",
                             body=response.body)

        message = data.get("commit_message") or ""
        if not isinstance(message, str):
            raise ParseError(f"unexpected API response format: {response.body}", body=response.body)
        if not message.strip():
            raise EmptyResultError("empty response from local API")

        logger.debug("received %d chars from %s", len(message), self.endpoint)
        return message
