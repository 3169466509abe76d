"""Request conversion transformers.

Each transformer handles a single, focused transformation of the request.
Transformers are executed in sequence by the RequestPipeline.
"""

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

__all__ = [
    "SystemMessageTransformer",
    "MessageContentTransformer",
    "ToolSchemaTransformer",
    "ToolChoiceTransformer",
    "TokenLimitTransformer",
    "OptionalFieldsTransformer",
]
