"""Exception hierarchy for deckcache.

Only ``ConfigurationMissing`` and ``MissingIdentifier`` are meant to reach
synchronous callers. Origin failures, malformed payloads and capped result
sets are absorbed at the adapter boundary and turned into safe empty
values.
"""

from typing import Any


class DeckCacheError(Exception):
    """Base exception for all deckcache errors.

    Attributes:
        message: Human-readable error message.
        context: Structured context for logging.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class OriginUnavailable(DeckCacheError):
    """Raised when an upstream returns a non-2xx status or cannot be reached."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context)
        self.status_code = status_code
        self.body = body


class MalformedResponse(DeckCacheError):
    """Raised when an upstream payload does not have the expected shape."""

    pass


class ConfigurationMissing(DeckCacheError):
    """Raised when credentials or an API key required by a source are absent."""

    pass


class MissingIdentifier(DeckCacheError):
    """Raised when a lookup is attempted without its required identifier."""

    pass


class Ambiguous(DeckCacheError):
    """Multiple upstream records matched what should be a single entity.

    Never raised to callers; adapters take the first candidate and log
    an instance of this error as a warning.
    """

    def __init__(
        self,
        message: str,
        candidates: int,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context)
        self.candidates = candidates


class ResultCapped(DeckCacheError):
    """Raised when an upstream result ceiling truncated a paginated walk.

    Attributes:
        partial: The partial, incomplete-flagged pagination state.
    """

    def __init__(
        self,
        message: str,
        partial: Any,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context)
        self.partial = partial
