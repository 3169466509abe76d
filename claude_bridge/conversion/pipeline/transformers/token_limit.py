"""Token limit transformer.

Forwards max_tokens, adjusting the zero-token budget of count_tokens probes.
"""

import dataclasses
from typing import Any

from claude_bridge.conversion.pipeline.base import ConversionContext, RequestTransformer
from claude_bridge.core.config.accessors import is_development
from claude_bridge.core.constants import Constants
from claude_bridge.core.logging import ConversationLogger

conversation_logger = ConversationLogger.get_logger()


def is_zero_token_budget(value: Any) -> bool:
    """Whether max_tokens is the numeric zero that marks a count_tokens probe."""
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0


class TokenLimitTransformer(RequestTransformer):
    """Maps max_tokens onto the OpenAI request.

    OpenAI does not accept max_tokens=0, so a count_tokens probe asking for
    zero tokens requests a single token instead. Any other value is
    forwarded unchanged; an absent value stays absent.
    """

    def transform(self, context: ConversionContext) -> ConversionContext:
        requested = context.claude_request.get("max_tokens")

        if requested is None:
            if is_development():
                conversation_logger.debug(
                    f"{Constants.LOG_PREFIX} No max_tokens specified in request"
                )
            return context

        if context.is_count_tokens and is_zero_token_budget(requested):
            max_tokens = Constants.COUNT_TOKENS_MAX_TOKENS
            conversation_logger.debug(
                f"{Constants.LOG_PREFIX} Adjusted max_tokens for count_tokens endpoint",
                extra={"context": {"original": requested, "adjusted": max_tokens}},
            )
        else:
            max_tokens = requested
            if is_development():
                conversation_logger.debug(
                    f"{Constants.LOG_PREFIX} Forwarding max_tokens",
                    extra={
                        "context": {"value": requested, "isCountTokens": context.is_count_tokens}
                    },
                )

        new_request = {**context.openai_request, "max_tokens": max_tokens}
        return dataclasses.replace(context, openai_request=new_request)
