"""Tool choice transformer.

Maps Claude's tool_choice to OpenAI's format.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any

from claude_bridge.conversion.pipeline.base import ConversionContext, RequestTransformer
from claude_bridge.core.constants import Constants
from claude_bridge.core.logging import ConversationLogger

conversation_logger = ConversationLogger.get_logger()


class ToolChoiceTransformer(RequestTransformer):
    """Converts Claude tool_choice to OpenAI format.

    Claude types:
    - "auto": Model decides whether to call tools
    - "any": Must call at least one tool
    - "tool": Specific tool to call (with name parameter)

    OpenAI equivalents:
    - "auto"
    - "required"
    - {"type": "function", "function": {"name": "..."}}

    A bare string is passed through unchanged for clients that already
    send OpenAI-style values.
    """

    def transform(self, context: ConversionContext) -> ConversionContext:
        tool_choice = context.claude_request.get("tool_choice")
        if not tool_choice:
            return context

        openai_choice = self._map_tool_choice(tool_choice)
        if openai_choice is None:
            return context

        new_request = {**context.openai_request, "tool_choice": openai_choice}
        return dataclasses.replace(context, openai_request=new_request)

    def _map_tool_choice(self, tool_choice: Any) -> str | dict[str, Any] | None:
        if isinstance(tool_choice, str):
            return tool_choice

        if not isinstance(tool_choice, Mapping):
            conversation_logger.warning(
                f"{Constants.LOG_PREFIX} Unsupported tool_choice value, omitting",
                extra={"context": {"toolChoiceType": type(tool_choice).__name__}},
            )
            return None

        choice_type = tool_choice.get("type")

        if choice_type == Constants.TOOL_CHOICE_AUTO:
            return Constants.TOOL_CHOICE_AUTO
        if choice_type == Constants.TOOL_CHOICE_ANY:
            return Constants.TOOL_CHOICE_REQUIRED
        if choice_type == Constants.TOOL_CHOICE_TOOL:
            name = tool_choice.get("name")
            if name:
                return {"type": Constants.TOOL_FUNCTION, Constants.TOOL_FUNCTION: {"name": name}}
            conversation_logger.warning(
                f"{Constants.LOG_PREFIX} tool_choice of type 'tool' has no name, omitting"
            )
            return None

        conversation_logger.warning(
            f"{Constants.LOG_PREFIX} Unknown tool_choice type, omitting",
            extra={"context": {"toolChoiceType": choice_type}},
        )
        return None
