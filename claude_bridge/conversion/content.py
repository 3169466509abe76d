"""Content helpers shared by the message transformer.

Resolves image sources to URLs, tool results to plain text, and tool
inputs to the JSON-string arguments OpenAI expects.
"""

import json
from collections.abc import Mapping
from typing import Any

from claude_bridge.core.config.accessors import is_development
from claude_bridge.core.constants import Constants
from claude_bridge.core.logging import ConversationLogger

conversation_logger = ConversationLogger.get_logger()


def encode_tool_arguments(tool_input: Any) -> str:
    """Serialize tool input the way JSON.stringify does: compact, UTF-8 preserved."""
    return json.dumps(tool_input, ensure_ascii=False, separators=(",", ":"))


def stringify(value: Any) -> str:
    """Best-effort string form for non-text content."""
    if isinstance(value, str):
        return value
    if value is None or isinstance(value, (bool, dict, list)):
        try:
            return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
        except (TypeError, ValueError):
            return str(value)
    return str(value)


def resolve_image_url(source: Mapping[str, Any] | None, message_index: int) -> str | None:
    """Resolve a Claude image source to a URL usable in an image_url part.

    Args:
        source: The image block's source descriptor.
        message_index: Position of the owning turn, for diagnostics.

    Returns:
        A data URI for base64 sources, the URL for url sources, or None when
        the source cannot be resolved. Unresolvable images are never fatal.
    """
    if source is None:
        conversation_logger.warning(
            f"{Constants.LOG_PREFIX} Image part missing source",
            extra={"context": {"messageIndex": message_index}},
        )
        return None

    source_type = source.get("type")

    if source_type == Constants.IMAGE_SOURCE_BASE64:
        media_type = source.get("media_type") or Constants.IMAGE_DEFAULT_MEDIA_TYPE
        data = source.get("data") or ""
        if not data:
            conversation_logger.warning(
                f"{Constants.LOG_PREFIX} Empty base64 image data",
                extra={"context": {"messageIndex": message_index, "partType": "image"}},
            )
            return None
        url = f"data:{media_type};base64,{data}"
    elif source_type == Constants.IMAGE_SOURCE_URL:
        url = source.get("url") or ""
        if not url:
            conversation_logger.warning(
                f"{Constants.LOG_PREFIX} Empty image URL",
                extra={"context": {"messageIndex": message_index, "partType": "image"}},
            )
            return None
    else:
        conversation_logger.warning(
            f"{Constants.LOG_PREFIX} Unknown image source type",
            extra={"context": {"messageIndex": message_index, "sourceType": source_type}},
        )
        return None

    if is_development():
        conversation_logger.debug(
            f"{Constants.LOG_PREFIX} Converted image content",
            extra={
                "context": {
                    "messageIndex": message_index,
                    "sourceType": source_type,
                    "urlLength": len(url),
                }
            },
        )
    return url


def resolve_tool_result_text(content: Any, message_index: int) -> str:
    """Flatten tool_result content into the string a tool message carries.

    - str: used verbatim
    - list: each item's "text" if it has one, else its string form, joined
      with no separator
    - anything else, explicit null included: its string form, with a warning

    A missing content key reaches here as the empty string.
    """
    if isinstance(content, str):
        return content

    if isinstance(content, list):
        parts = []
        for item in content:
            if isinstance(item, Mapping) and "text" in item:
                text = item["text"]
                parts.append("" if text is None else stringify(text))
            else:
                parts.append(stringify(item))
        return "".join(parts)

    conversation_logger.warning(
        f"{Constants.LOG_PREFIX} Unexpected tool_result content type",
        extra={"context": {"messageIndex": message_index, "contentType": type(content).__name__}},
    )
    return stringify(content)
