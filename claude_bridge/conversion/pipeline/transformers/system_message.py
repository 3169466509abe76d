"""System message transformer.

Converts Claude's system parameter to OpenAI's system message format.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any

from claude_bridge.conversion.pipeline.base import ConversionContext, RequestTransformer
from claude_bridge.core.constants import Constants


class SystemMessageTransformer(RequestTransformer):
    """Converts Claude system parameter to OpenAI system message.

    Claude accepts system as:
    - str: Direct text content
    - list: Structured blocks, of which only type="text" carry prompt text

    OpenAI requires a single system message at the start of messages array.
    """

    def transform(self, context: ConversionContext) -> ConversionContext:
        system_text = self._extract_system_text(context.claude_request.get("system"))

        if not system_text:
            return context

        existing_messages = context.openai_request.get("messages", [])
        new_messages = [
            {"role": Constants.ROLE_SYSTEM, "content": system_text},
            *existing_messages,
        ]

        new_request = {**context.openai_request, "messages": new_messages}
        return dataclasses.replace(context, openai_request=new_request)

    def _extract_system_text(self, system: Any) -> str:
        """Extract text content from Claude system parameter.

        Text segments are concatenated in order with no separator; empty and
        non-text segments contribute nothing.
        """
        if not system:
            return ""

        if isinstance(system, str):
            return system

        if not isinstance(system, list):
            return ""

        return "".join(
            block["text"]
            for block in system
            if isinstance(block, Mapping)
            and block.get("type") == Constants.CONTENT_TEXT
            and isinstance(block.get("text"), str)
        )
