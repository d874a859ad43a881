"""Error types shared by configuration, providers and the CLI."""


class GitMsgError(Exception):
    """Base class for every error git-msg reports to the user."""

    @property
    def kind(self) -> str:
        return type(self).__name__


class ValidationError(GitMsgError):
    """Invalid input: an empty diff or a malformed configuration."""
    pass


class GenerationError(GitMsgError):
    """A provider failed to produce a commit message."""
    pass


class AuthError(GenerationError):
    """The selected provider has no credential or endpoint configured."""
    pass


class RemoteError(GenerationError):
    """Non-success HTTP status, transport failure or timeout."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class RateLimitError(RemoteError):
    """The service answered HTTP 429."""
    pass


class ParseError(GenerationError):
    """Response body could not be decoded into any expected shape."""

    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body


class EmptyResultError(GenerationError):
    """Well-formed response that carries no text."""
    pass
