"""Protocol constants shared by the conversion pipeline."""


class Constants:
    ROLE_ASSISTANT = "assistant"
    ROLE_SYSTEM = "system"
    ROLE_TOOL = "tool"

    CONTENT_TEXT = "text"
    CONTENT_IMAGE = "image"
    CONTENT_IMAGE_URL = "image_url"
    CONTENT_TOOL_USE = "tool_use"
    CONTENT_TOOL_RESULT = "tool_result"

    IMAGE_SOURCE_BASE64 = "base64"
    IMAGE_SOURCE_URL = "url"
    IMAGE_DEFAULT_MEDIA_TYPE = "application/octet-stream"
    IMAGE_DETAIL_AUTO = "auto"

    TOOL_FUNCTION = "function"

    TOOL_CHOICE_AUTO = "auto"
    TOOL_CHOICE_ANY = "any"
    TOOL_CHOICE_TOOL = "tool"
    TOOL_CHOICE_REQUIRED = "required"

    # Server-side tools executed by Anthropic; they have no function-calling equivalent
    BUILTIN_TOOL_TYPES = frozenset({"web_search_20250305"})

    # Internal request flags set by the count_tokens endpoint, snake and camel case
    COUNT_TOKENS_FLAGS = ("_is_count_tokens", "_isCountTokens")
    # OpenAI rejects max_tokens=0, so token counting probes request a single token
    COUNT_TOKENS_MAX_TOKENS = 1

    LOG_PREFIX = "[Claude→OpenAI]"
