"""Request conversion pipeline.

A composable pipeline for converting Claude API requests to OpenAI format.
Each transformer in the pipeline handles a single responsibility.
"""

from claude_bridge.conversion.pipeline.base import (
    ConversionContext,
    RequestPipeline,
    RequestTransformer,
)
from claude_bridge.conversion.pipeline.factory import RequestPipelineFactory

__all__ = ["ConversionContext", "RequestPipeline", "RequestTransformer", "RequestPipelineFactory"]
