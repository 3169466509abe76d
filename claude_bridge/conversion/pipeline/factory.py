"""Request pipeline factory.

Builds the default request conversion pipeline with all transformers.
"""

from claude_bridge.conversion.pipeline.base import RequestPipeline, RequestTransformer
from claude_bridge.conversion.pipeline.transformers.message_content import (
    MessageContentTransformer,
)
from claude_bridge.conversion.pipeline.transformers.optional_fields import (
    OptionalFieldsTransformer,
)
from claude_bridge.conversion.pipeline.transformers.system_message import SystemMessageTransformer
from claude_bridge.conversion.pipeline.transformers.token_limit import TokenLimitTransformer
from claude_bridge.conversion.pipeline.transformers.tool_choice import ToolChoiceTransformer
from claude_bridge.conversion.pipeline.transformers.tool_schema import ToolSchemaTransformer


class RequestPipelineFactory:
    """Factory for creating request conversion pipelines."""

    @staticmethod
    def create_default() -> RequestPipeline:
        """Create the default request conversion pipeline.

        Transformers are executed in the following order:
        1. SystemMessageTransformer - Leading system message
        2. MessageContentTransformer - Convert all messages
        3. ToolSchemaTransformer - Convert tools
        4. ToolChoiceTransformer - Map tool_choice
        5. TokenLimitTransformer - max_tokens and count_tokens adjustment
        6. OptionalFieldsTransformer - temperature, top_p

        Returns:
            A configured RequestPipeline ready for execution.
        """
        transformers: list[RequestTransformer] = [
            SystemMessageTransformer(),
            MessageContentTransformer(),
            ToolSchemaTransformer(),
            ToolChoiceTransformer(),
            TokenLimitTransformer(),
            OptionalFieldsTransformer(),
        ]
        return RequestPipeline(transformers)

    @staticmethod
    def create_custom(transformers: list[RequestTransformer]) -> RequestPipeline:
        """Create a custom pipeline with specified transformers."""
        return RequestPipeline(transformers)
