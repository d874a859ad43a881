"""LLM Base Classes and Shared Code"""

import http.client
import json
import logging
import socket
import urllib.error
import urllib.request
from abc import ABC, abstractmethod
from dataclasses import dataclass

from git_msg.errors import RemoteError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


@dataclass
class HTTPResponse:
    """Status and decoded body of a finished request, success or not."""
    status: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self):
        """Decode the body; raises json.JSONDecodeError."""
        return json.loads(self.body)


def _read_error_body(e: urllib.error.HTTPError, service: str, timeout: float) -> str:
    """Body of an error response; a stalled or cut-off body is a RemoteError."""
    try:
        return e.read().decode('utf-8', errors='replace')
    except (socket.timeout, TimeoutError):
        raise RemoteError(f"{service} error response ({e.code}) timed out after {timeout}s",
                          status=e.code)
    except (http.client.HTTPException, OSError) as read_error:
        raise RemoteError(f"Incomplete error response ({e.code}) from {service}: {read_error}",
                          status=e.code)


def post_json(url: str, payload: dict, headers: dict | None = None,
              timeout: float = DEFAULT_TIMEOUT, service: str = "API") -> HTTPResponse:
    """POST a JSON payload and return the response, whatever its status.

    Transport failures and timeouts raise RemoteError.
    """
    data = json.dumps(payload).encode('utf-8')
    req = urllib.request.Request(
        url,
        data=data,
        headers={"Content-Type": "application/json", **(headers or {})},
        method="POST",
    )
    logger.debug("POST %s (%d bytes, timeout=%ss)", url, len(data), timeout)

    try:
        with urllib.request.urlopen(req, timeout=timeout) as response:
            return HTTPResponse(response.status, response.read().decode('utf-8', errors='replace'))
    except urllib.error.HTTPError as e:
        return HTTPResponse(e.code, _read_error_body(e, service, timeout))
    except urllib.error.URLError as e:
        if isinstance(e.reason, (socket.timeout, TimeoutError)):
            raise RemoteError(f"{service} request timed out after {timeout}s")
        raise RemoteError(f"{service} request failed: {e.reason}")
    except (socket.timeout, TimeoutError):
        raise RemoteError(f"{service} request timed out after {timeout}s")
    except http.client.HTTPException as e:
        raise RemoteError(f"Incomplete response from {service}: {e}")
    except OSError as e:
        raise RemoteError(f"Connection to {service} lost: {e}")


class LLMProvider(ABC):
    """Abstract base for commit message providers.

    Subclasses implement `_generate` for one service's wire contract;
    `generate` enforces the shared precondition on the diff.
    """

    kind: str = ""

    def generate(self, diff: str) -> str:
        if not diff:
            raise ValidationError("empty diff provided")
        return self._generate(diff)

    @abstractmethod
    def _generate(self, diff: str) -> str:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
