"""Error types for URL shortener."""

from typing import Optional


INTERNAL_ERROR_MESSAGE = "internal error"


class ShortenerError(Exception):
    """Base class for errors raised by the URL shortener.

    Each error carries the HTTP status it maps to and whether its message is
    safe to show to clients. Errors with ``expose = False`` are logged and
    replaced with a generic message before they leave the server.
    """

    status_code: int = 500
    expose: bool = False
    default_message: str = INTERNAL_ERROR_MESSAGE

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    @property
    def public_message(self) -> str:
        """Message that may be sent to the client."""
        return self.message if self.expose else INTERNAL_ERROR_MESSAGE

    @property
    def public_status(self) -> int:
        """HTTP status that may be sent to the client."""
        return self.status_code if self.expose else 500


class ValidationError(ShortenerError):
    """Missing or malformed input."""

    status_code = 400
    expose = True
    default_message = "invalid request"


class ContentTypeError(ValidationError):
    """Request body was not sent as JSON."""

    default_message = "Content-Type: application/json header is required"


class NotFoundError(ShortenerError):
    """Unknown short URL id."""

    status_code = 404
    expose = True
    default_message = "url not found"


class GenerationError(ShortenerError):
    """Short id could not be generated."""

    default_message = "could not generate URL ID"


class RandomSourceError(GenerationError):
    """The entropy source failed."""

    default_message = "random source failure"


class ExhaustedRetriesError(GenerationError):
    """Every generation attempt collided with an existing id."""


class InternalError(ShortenerError):
    """Internal invariant violation."""
