"""Typed views over Claude Messages API content blocks.

Requests arrive as free-form JSON, so blocks are parsed into a closed set of
frozen dataclasses before conversion. Every known block type has its own
class; anything else becomes an UnknownBlock so dispatch sites always have
an explicit default branch.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from claude_bridge.core.constants import Constants
from claude_bridge.core.exceptions import MalformedToolResultError, MalformedToolUseError
from claude_bridge.core.logging import ConversationLogger

conversation_logger = ConversationLogger.get_logger()


@dataclass(frozen=True, slots=True)
class TextBlock:
    text: str


@dataclass(frozen=True, slots=True)
class ImageBlock:
    """Image block; source stays a raw mapping since its shape varies by source type."""

    source: Mapping[str, Any] | None


@dataclass(frozen=True, slots=True)
class ToolUseBlock:
    id: str
    name: str
    input: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ToolResultBlock:
    tool_use_id: str
    content: Any = ""


@dataclass(frozen=True, slots=True)
class UnknownBlock:
    type: Any
    raw: Any


ContentBlock = Union[TextBlock, ImageBlock, ToolUseBlock, ToolResultBlock, UnknownBlock]


def _block_path(message_index: int, block_index: int) -> str:
    return f"messages[{message_index}].content[{block_index}]"


def parse_content_block(raw: Any, message_index: int = 0, block_index: int = 0) -> ContentBlock:
    """Parse one raw content block into its typed variant.

    Args:
        raw: The block as it appears in the request JSON.
        message_index: Position of the owning turn, for error paths and logs.
        block_index: Position of the block within the turn.

    Returns:
        The typed block. Non-mapping values and unrecognized types yield
        UnknownBlock.

    Raises:
        MalformedToolUseError: tool_use without a non-empty id and name.
        MalformedToolResultError: tool_result without a non-empty tool_use_id.
    """
    if not isinstance(raw, Mapping):
        return UnknownBlock(type=None, raw=raw)

    block_type = raw.get("type")

    if block_type == Constants.CONTENT_TEXT:
        return TextBlock(text=raw.get("text") or "")

    if block_type == Constants.CONTENT_IMAGE:
        source = raw.get("source")
        return ImageBlock(source=source if isinstance(source, Mapping) else None)

    if block_type == Constants.CONTENT_TOOL_USE:
        tool_id, tool_name = raw.get("id"), raw.get("name")
        if not tool_id or not tool_name:
            conversation_logger.error(
                f"{Constants.LOG_PREFIX} Invalid tool_use: missing id or name",
                extra={
                    "context": {
                        "messageIndex": message_index,
                        "toolUseId": tool_id,
                        "toolUseName": tool_name,
                    }
                },
            )
            raise MalformedToolUseError(
                _block_path(message_index, block_index),
                {"id": tool_id, "name": tool_name},
                "tool_use must have both id and name",
            )
        return ToolUseBlock(id=tool_id, name=tool_name, input=raw.get("input") or {})

    if block_type == Constants.CONTENT_TOOL_RESULT:
        tool_use_id = raw.get("tool_use_id")
        if not tool_use_id:
            conversation_logger.error(
                f"{Constants.LOG_PREFIX} Invalid tool_result: missing tool_use_id",
                extra={"context": {"messageIndex": message_index}},
            )
            raise MalformedToolResultError(
                f"{_block_path(message_index, block_index)}.tool_use_id",
                tool_use_id,
                "tool_result must have tool_use_id",
            )
        return ToolResultBlock(tool_use_id=tool_use_id, content=raw.get("content", ""))

    return UnknownBlock(type=block_type, raw=raw)
