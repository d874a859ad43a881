"""Hugging Face Inference API Provider"""

import json
import logging

from git_msg.errors import AuthError, EmptyResultError, ParseError, RateLimitError, RemoteError
from git_msg.llm.base import LLMProvider, post_json
from git_msg.prompts import PromptBuilder

logger = logging.getLogger(__name__)

_NO_MATCH = object()


def _as_string_list(data):
    if isinstance(data, list) and all(isinstance(item, str) for item in data):
        return data[0] if data else ""
    return _NO_MATCH


def _as_string(data):
    return data if isinstance(data, str) else _NO_MATCH


def _as_record_list(data):
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        return _NO_MATCH
    if data and isinstance(data[0].get("generated_text"), str):
        return data[0]["generated_text"]
    return _NO_MATCH


# Models answer in different shapes; order matters.
RESPONSE_DECODERS = (_as_string_list, _as_string, _as_record_list)


def decode_generation(body: str) -> str:
    """Extract generated text from a raw inference response body.

    Tries a list of strings, then a bare string, then a list of records
    with `generated_text`. The first shape that matches wins.
    """
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise ParseError(f"failed to parse API response: {e} (body: {body})", body=body)

    for decoder in RESPONSE_DECODERS:
        text = decoder(data)
        if text is not _NO_MATCH:
            return text

    raise ParseError(f"unexpected API response format: {body}", body=body)


class HuggingFaceProvider(LLMProvider):
    """Text-generation inference client. Requires a Hugging Face token."""

    kind = "huggingface"
    DEFAULT_MODEL = "mistralai/Mistral-7B-Instruct-v0.2"
    DEFAULT_ENDPOINT = "https://api-inference.huggingface.co/models/"
    TIMEOUT = 60  # heavier models take longer to answer
    PARAMETERS = {
        "max_new_tokens": 100,
        "temperature": 0.7,
        "top_p": 0.95,
        "do_sample": True,
        "return_full_text": False,
    }

    def __init__(self, token: str = "", model: str | None = None, endpoint: str | None = None):
        self.token = token
        self.model = model or self.DEFAULT_MODEL
        self.endpoint = endpoint or self.DEFAULT_ENDPOINT

    @property
    def name(self) -> str:
        return f"Hugging Face ({self.model})"

    @property
    def url(self) -> str:
        return self.endpoint.rstrip('/') + '/' + self.model

    def _generate(self, diff: str) -> str:
        if not self.token:
            raise AuthError(
                "Hugging Face API token is not set. Add huggingface_token to .git-msg.json or:\n"
                "  export HUGGINGFACE_TOKEN='your-token-here'"
            )

        payload = {
            "inputs": PromptBuilder().build(diff),
            "parameters": dict(self.PARAMETERS),
        }
        response = post_json(
            self.url,
            payload,
            headers={"Authorization": f"Bearer {self.token}"},
            timeout=self.TIMEOUT,
            service="Hugging Face API",
        )

        if response.status == 429:
            raise RateLimitError(
                "Hugging Face API rate limit exceeded. Please try again later",
                status=response.status,
            )
        if not response.ok:
            raise RemoteError(
                f"Hugging Face API error ({response.status}): {response.body}",
                status=response.status,
            )

        text = decode_generation(response.body)
        if not text.strip():
            raise EmptyResultError("empty response from Hugging Face API")

        logger.debug("received %d chars from %s", len(text), self.model)
        return text
