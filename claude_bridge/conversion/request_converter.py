"""Claude Messages API → OpenAI Chat Completions request conversion.

Core mappings:
- system → leading system message
- messages[] → messages[] (roles kept)
- text/image blocks → content parts
- tool_use → assistant message with tool_calls
- tool_result → tool message
- tools[] → tools[] (input_schema → parameters)
- tool_choice, max_tokens, temperature, top_p
"""

from collections.abc import Mapping
from typing import Any

from claude_bridge.conversion.pipeline.base import ConversionContext
from claude_bridge.conversion.pipeline.factory import RequestPipelineFactory
from claude_bridge.conversion.pipeline.transformers.token_limit import is_zero_token_budget
from claude_bridge.core.config.accessors import log_conversion_summary
from claude_bridge.core.constants import Constants
from claude_bridge.core.exceptions import (
    EmptyMessagesError,
    InvalidModelError,
    InvalidRequestError,
)
from claude_bridge.core.logging import ConversationLogger

conversation_logger = ConversationLogger.get_logger()

# Transformers are stateless, so one pipeline serves every call
_pipeline = RequestPipelineFactory.create_default()


def convert_claude_to_openai(
    model: str,
    request: Mapping[str, Any],
    stream: bool,
    *,
    count_tokens: bool = False,
) -> dict[str, Any]:
    """Convert a Claude Messages request into an OpenAI Chat Completions request.

    The input is never mutated and no I/O happens here. Fields the
    conversion does not understand are ignored.

    Args:
        model: The target OpenAI model name.
        request: The Claude Messages request body.
        stream: Whether the caller wants a streaming response.
        count_tokens: Treat the request as a count_tokens probe regardless of
            its max_tokens value.

    Returns:
        The OpenAI request body.

    Raises:
        InvalidModelError: model is missing or not a string.
        InvalidRequestError: request, or one of its turns, is not an object.
        EmptyMessagesError: messages is missing, not a list, or empty.
        MalformedToolUseError: a tool_use block lacks id or name.
        MalformedToolResultError: a tool_result block lacks tool_use_id.
    """
    _validate_inputs(model, request)

    is_count_tokens = is_count_tokens_request(request, count_tokens)

    # count_tokens does not support streaming, so neither does its OpenAI equivalent
    openai_request: dict[str, Any] = {
        "model": model,
        "messages": [],
        "stream": False if is_count_tokens else stream,
    }

    summary_enabled = log_conversion_summary()
    if summary_enabled:
        tools = request.get("tools")
        conversation_logger.debug(
            f"{Constants.LOG_PREFIX} Starting request transformation",
            extra={
                "context": {
                    "model": model,
                    "stream": openai_request["stream"],
                    "isCountTokens": is_count_tokens,
                    "hasSystem": bool(request.get("system")),
                    "messageCount": len(request["messages"]),
                    "hasTools": bool(tools),
                    "toolsCount": len(tools) if isinstance(tools, list) else 0,
                }
            },
        )

    context = ConversionContext(
        claude_request=request,
        openai_model=model,
        is_count_tokens=is_count_tokens,
        openai_request=openai_request,
    )
    result = _pipeline.execute(context)

    if summary_enabled:
        conversation_logger.debug(
            f"{Constants.LOG_PREFIX} Request transformation completed",
            extra={
                "context": {
                    "messageCount": len(result["messages"]),
                    "hasTools": "tools" in result,
                    "toolsCount": len(result.get("tools", [])),
                    "maxTokens": result.get("max_tokens"),
                    "isCountTokens": is_count_tokens,
                }
            },
        )

    return result


def is_count_tokens_request(request: Mapping[str, Any], override: bool = False) -> bool:
    """Whether the request only measures tokens.

    Signalled by a zero max_tokens, the caller's override, or the internal
    request flag set by the count_tokens endpoint.
    """
    return (
        override
        or is_zero_token_budget(request.get("max_tokens"))
        or any(request.get(flag) for flag in Constants.COUNT_TOKENS_FLAGS)
    )


def _validate_inputs(model: Any, request: Any) -> None:
    if not model or not isinstance(model, str):
        conversation_logger.error(
            f"{Constants.LOG_PREFIX} Invalid model parameter",
            extra={"context": {"model": model}},
        )
        raise InvalidModelError("model", model, "Model parameter is required and must be a string")

    if not request or not isinstance(request, Mapping):
        conversation_logger.error(
            f"{Constants.LOG_PREFIX} Invalid request parameter",
            extra={"context": {"requestType": type(request).__name__}},
        )
        raise InvalidRequestError(
            "request", request, "Request parameter is required and must be an object"
        )

    messages = request.get("messages")
    if not isinstance(messages, list) or not messages:
        conversation_logger.error(
            f"{Constants.LOG_PREFIX} Invalid or empty messages array",
            extra={"context": {"messages": messages}},
        )
        raise EmptyMessagesError(
            "messages", messages, "Messages array is required and must not be empty"
        )

    for index, message in enumerate(messages):
        if not isinstance(message, Mapping):
            conversation_logger.error(
                f"{Constants.LOG_PREFIX} Invalid message entry",
                extra={"context": {"messageIndex": index}},
            )
            raise InvalidRequestError(
                f"messages[{index}]", message, "Each message must be an object"
            )
