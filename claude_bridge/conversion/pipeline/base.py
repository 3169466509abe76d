"""Base infrastructure for request conversion pipeline.

This module defines the core components of the pipeline:
- ConversionContext: Immutable context passed through transformers
- RequestTransformer: Abstract base for all transformation steps
- RequestPipeline: Orchestrator that executes transformers in sequence
"""

import dataclasses
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


@dataclasses.dataclass(frozen=True)
class ConversionContext:
    """Immutable context passed through the conversion pipeline.

    The frozen=True ensures transformers return new instances via
    dataclasses.replace() rather than mutating the context.

    Attributes:
        claude_request: The original Claude Messages request (never mutated).
        openai_model: The target model name.
        is_count_tokens: Whether the request is a token counting probe.
        openai_request: The OpenAI request being built (replaced by each transformer).
    """

    claude_request: Mapping[str, Any]
    openai_model: str
    is_count_tokens: bool
    openai_request: dict[str, Any]


class RequestTransformer(ABC):
    """Base class for all request transformation steps.

    Each transformer handles a single, focused transformation of the request.
    Transformers must be pure functions - they should not mutate the input
    context but rather return a new ConversionContext with changes applied.
    """

    @abstractmethod
    def transform(self, context: ConversionContext) -> ConversionContext:
        """Transform the context and return a new instance.

        Args:
            context: The input context.

        Returns:
            A new ConversionContext with transformations applied.
        """

    @property
    def name(self) -> str:
        """Human-readable name for logging and debugging."""
        return self.__class__.__name__


class RequestPipeline:
    """Orchestrates the execution of transformers in sequence.

    Each transformer receives the output of the previous transformer as its
    input. Pipelines hold no per-request state and can be shared.
    """

    def __init__(self, transformers: list[RequestTransformer]) -> None:
        self.transformers = transformers
        self.logger = logging.getLogger(f"{__name__}.RequestPipeline")

    def execute(self, initial_context: ConversionContext) -> dict[str, Any]:
        """Execute all transformers and return the final OpenAI request.

        Raises:
            Exception: If any transformer fails. The exception propagates
                unchanged after being logged with the failing transformer's name.
        """
        context = initial_context

        for i, transformer in enumerate(self.transformers):
            self.logger.debug(
                f"Running transformer [{i + 1}/{len(self.transformers)}]: {transformer.name}"
            )
            try:
                context = transformer.transform(context)
            except Exception as e:
                self.logger.error(f"Transformer {transformer.name} failed: {e}")
                raise

        self.logger.debug(f"Pipeline completed: {len(self.transformers)} transformers executed")
        return context.openai_request
