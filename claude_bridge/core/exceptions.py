"""
Custom exception hierarchy for request conversion.

All conversion failures are detected locally and raised before any output
is returned, so a caller never receives a partially converted request.

All exceptions inherit from ConversionError, allowing callers to
catch every conversion failure with a single except clause and turn it
into a client-facing error response.

Example:
    >>> try:
    ...     convert_claude_to_openai("gpt-4o", request, stream=False)
    ... except ConversionError as e:
    ...     return JSONResponse(status_code=400, content=e.to_error_response())
"""

from __future__ import annotations

from typing import Any

from claude_bridge.core.error_types import ErrorType


class ValidationError(Exception):
    """Raised when input validation fails.

    Attributes:
        field: Name (or JSON path) of the field that failed validation
        value: The invalid value that was provided
        message: Human-readable explanation of the validation error

    Example:
        >>> ValidationError("model", None, "must be a non-empty string")
        ValidationError: Invalid 'model': must be a non-empty string (got None)
    """

    def __init__(self, field: str, value: object, message: str) -> None:
        self.field = field
        self.value = value
        self.message = message
        super().__init__(f"Invalid {field!r}: {message} (got {value!r})")

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(field={self.field!r}, value={self.value!r}, "
            f"message={self.message!r})"
        )


class ConversionError(ValidationError):
    """Base exception for all request conversion errors.

    Subclasses set error_type to the category reported to clients.
    """

    error_type: ErrorType = ErrorType.INVALID_REQUEST

    def to_error_response(self) -> dict[str, Any]:
        """Build an Anthropic-style error body for this failure."""
        return {
            "type": "error",
            "error": {
                "type": self.error_type.value,
                "message": self.message,
            },
        }


class InvalidModelError(ConversionError):
    """Raised when the target model is missing or not a string."""

    error_type = ErrorType.INVALID_MODEL


class InvalidRequestError(ConversionError):
    """Raised when the request, or one of its turns, is not a JSON object."""

    error_type = ErrorType.INVALID_REQUEST


class EmptyMessagesError(ConversionError):
    """Raised when messages is missing, not a list, or empty."""

    error_type = ErrorType.EMPTY_MESSAGES


class MalformedToolUseError(ConversionError):
    """Raised when a tool_use block lacks its id or name.

    Example:
        >>> MalformedToolUseError("messages[1].content[0]", block, "missing id")
    """

    error_type = ErrorType.MALFORMED_TOOL_USE


class MalformedToolResultError(ConversionError):
    """Raised when a tool_result block lacks its tool_use_id."""

    error_type = ErrorType.MALFORMED_TOOL_RESULT


__all__ = [
    "ValidationError",
    "ConversionError",
    "InvalidModelError",
    "InvalidRequestError",
    "EmptyMessagesError",
    "MalformedToolUseError",
    "MalformedToolResultError",
]
