"""Message content transformer.

Converts Claude messages to OpenAI format. Structured content is folded
block by block: plain parts (text, images) accumulate, while tool blocks
emit standalone messages and flush whatever accumulated before them.
"""

import dataclasses
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Union

from claude_bridge.conversion.content import (
    encode_tool_arguments,
    resolve_image_url,
    resolve_tool_result_text,
)
from claude_bridge.conversion.pipeline.base import ConversionContext, RequestTransformer
from claude_bridge.core.config.accessors import is_development
from claude_bridge.core.constants import Constants
from claude_bridge.core.logging import ConversationLogger
from claude_bridge.models.claude import (
    ImageBlock,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
    UnknownBlock,
    parse_content_block,
)

conversation_logger = ConversationLogger.get_logger()


@dataclass(frozen=True, slots=True)
class PendingPart:
    """A plain content part waiting to be emitted with its neighbours."""

    part: dict[str, Any]


@dataclass(frozen=True, slots=True)
class EmitMessage:
    """A message that must be emitted on its own, after flushing pending parts."""

    message: dict[str, Any]


FoldStep = Union[PendingPart, EmitMessage]


class MessageContentTransformer(RequestTransformer):
    """Converts Claude messages to OpenAI format.

    - String content passes through as a single message
    - Text and image blocks become OpenAI content parts
    - Each tool_use becomes an assistant message with exactly one tool call
    - Each tool_result becomes a tool message
    """

    def transform(self, context: ConversionContext) -> ConversionContext:
        openai_messages: list[dict[str, Any]] = list(context.openai_request.get("messages", []))

        for index, message in enumerate(context.claude_request["messages"]):
            openai_messages.extend(convert_claude_message(message, index))

        new_request = {**context.openai_request, "messages": openai_messages}
        return dataclasses.replace(context, openai_request=new_request)


def convert_claude_message(message: Mapping[str, Any], message_index: int) -> list[dict[str, Any]]:
    """Convert one Claude turn into zero or more OpenAI messages."""
    role = message.get("role")
    content = message.get("content")

    if isinstance(content, str):
        return [{"role": role, "content": content}]

    if isinstance(content, list):
        return fold_content_blocks(role, content, message_index)

    conversation_logger.warning(
        f"{Constants.LOG_PREFIX} Unsupported message content, skipping turn",
        extra={"context": {"messageIndex": message_index, "contentType": type(content).__name__}},
    )
    return []


def fold_content_blocks(
    role: Any, blocks: Iterable[Any], message_index: int
) -> list[dict[str, Any]]:
    """Fold a turn's content blocks into OpenAI messages, preserving order.

    Pending parts are flushed as a `{role, content: [...]}` message right
    before every emitted tool message. Parts left over at the end are only
    emitted when the turn contained no tool blocks.
    """
    messages: list[dict[str, Any]] = []
    pending: tuple[dict[str, Any], ...] = ()
    saw_tool_block = False

    for step in _content_steps(blocks, message_index):
        if isinstance(step, PendingPart):
            pending = (*pending, step.part)
            continue

        if pending:
            messages.append({"role": role, "content": list(pending)})
            pending = ()
        messages.append(step.message)
        saw_tool_block = True

    if pending:
        if saw_tool_block:
            conversation_logger.warning(
                f"{Constants.LOG_PREFIX} Dropping content parts that follow the last tool block",
                extra={"context": {"messageIndex": message_index, "droppedParts": len(pending)}},
            )
        else:
            messages.append({"role": role, "content": list(pending)})

    return messages


def _content_steps(blocks: Iterable[Any], message_index: int) -> Iterator[FoldStep]:
    for block_index, raw_block in enumerate(blocks):
        block = parse_content_block(raw_block, message_index, block_index)

        if isinstance(block, TextBlock):
            yield PendingPart({"type": Constants.CONTENT_TEXT, "text": block.text})

        elif isinstance(block, ImageBlock):
            url = resolve_image_url(block.source, message_index)
            if url:
                yield PendingPart(
                    {
                        "type": Constants.CONTENT_IMAGE_URL,
                        "image_url": {"url": url, "detail": Constants.IMAGE_DETAIL_AUTO},
                    }
                )

        elif isinstance(block, ToolUseBlock):
            yield EmitMessage(_tool_use_message(block, message_index))

        elif isinstance(block, ToolResultBlock):
            yield EmitMessage(_tool_result_message(block, message_index))

        elif isinstance(block, UnknownBlock):
            conversation_logger.warning(
                f"{Constants.LOG_PREFIX} Unknown content part type, skipping",
                extra={"context": {"messageIndex": message_index, "partType": block.type}},
            )


def _tool_use_message(block: ToolUseBlock, message_index: int) -> dict[str, Any]:
    if is_development():
        conversation_logger.debug(
            f"{Constants.LOG_PREFIX} Converted tool_use to tool_calls",
            extra={
                "context": {
                    "messageIndex": message_index,
                    "toolId": block.id,
                    "toolName": block.name,
                    "hasInput": bool(block.input),
                }
            },
        )
    return {
        "role": Constants.ROLE_ASSISTANT,
        "content": None,
        "tool_calls": [
            {
                "id": block.id,
                "type": Constants.TOOL_FUNCTION,
                Constants.TOOL_FUNCTION: {
                    "name": block.name,
                    "arguments": encode_tool_arguments(block.input),
                },
            }
        ],
    }


def _tool_result_message(block: ToolResultBlock, message_index: int) -> dict[str, Any]:
    text = resolve_tool_result_text(block.content, message_index)
    if is_development():
        conversation_logger.debug(
            f"{Constants.LOG_PREFIX} Converted tool_result to tool message",
            extra={
                "context": {
                    "messageIndex": message_index,
                    "toolUseId": block.tool_use_id,
                    "contentLength": len(text),
                }
            },
        )
    return {
        "role": Constants.ROLE_TOOL,
        "content": text,
        "tool_call_id": block.tool_use_id,
    }
