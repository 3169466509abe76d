"""Error type enumeration for Claude Bridge.

Provides type-safe error categorization for conversion failures and the
error responses built from them.
"""

from enum import Enum


class ErrorType(str, Enum):
    """Error type categories for conversion errors.

    These error types are used for:
    - ConversionError.error_type
    - The "type" field of client-facing error responses

    When adding new error types:
    1. Add the enum value here
    2. Add the matching ConversionError subclass in core.exceptions
    """

    # Request shape errors
    INVALID_MODEL = "invalid_model"  # Model missing or not a string
    INVALID_REQUEST = "invalid_request"  # Request (or a turn) is not a JSON object
    EMPTY_MESSAGES = "empty_messages"  # messages missing, not a list, or empty

    # Content block errors
    MALFORMED_TOOL_USE = "malformed_tool_use"  # tool_use without id or name
    MALFORMED_TOOL_RESULT = "malformed_tool_result"  # tool_result without tool_use_id
