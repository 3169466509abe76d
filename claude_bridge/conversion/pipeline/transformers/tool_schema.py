"""Tool schema transformer.

Converts Claude tool definitions to OpenAI function calling format.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any

from claude_bridge.conversion.pipeline.base import ConversionContext, RequestTransformer
from claude_bridge.core.constants import Constants
from claude_bridge.core.logging import ConversationLogger

conversation_logger = ConversationLogger.get_logger()


def is_builtin_tool(tool: Mapping[str, Any]) -> bool:
    """Whether the tool is an Anthropic server-side tool (e.g. web search)."""
    return tool.get("type") in Constants.BUILTIN_TOOL_TYPES


class ToolSchemaTransformer(RequestTransformer):
    """Converts Claude tools to OpenAI function format.

    input_schema is re-tagged as parameters and passed through untouched.
    Built-in server tools have no function equivalent and are dropped.
    """

    def transform(self, context: ConversionContext) -> ConversionContext:
        tools = context.claude_request.get("tools")
        if not tools or not isinstance(tools, list):
            return context

        openai_tools = []
        for index, tool in enumerate(tools):
            if not isinstance(tool, Mapping):
                conversation_logger.warning(
                    f"{Constants.LOG_PREFIX} Skipping malformed tool definition",
                    extra={"context": {"toolIndex": index}},
                )
                continue
            if is_builtin_tool(tool):
                conversation_logger.debug(
                    f"{Constants.LOG_PREFIX} Skipping built-in tool",
                    extra={"context": {"toolIndex": index, "toolType": tool.get("type")}},
                )
                continue
            openai_tools.append(self._convert_tool(tool))

        if openai_tools:
            new_request = {**context.openai_request, "tools": openai_tools}
            return dataclasses.replace(context, openai_request=new_request)

        return context

    def _convert_tool(self, tool: Mapping[str, Any]) -> dict[str, Any]:
        function: dict[str, Any] = {
            "name": tool.get("name") or "",
            "parameters": tool.get("input_schema") or {},
        }
        if tool.get("description"):
            function["description"] = tool["description"]
        return {"type": Constants.TOOL_FUNCTION, Constants.TOOL_FUNCTION: function}
