"""Optional fields transformer.

Passes sampling parameters through unchanged.
"""

import dataclasses

from claude_bridge.conversion.pipeline.base import ConversionContext, RequestTransformer

PASSTHROUGH_FIELDS = ("temperature", "top_p")


class OptionalFieldsTransformer(RequestTransformer):
    """Copies temperature and top_p to the OpenAI request when present."""

    def transform(self, context: ConversionContext) -> ConversionContext:
        request = context.claude_request
        present = {
            field: request[field] for field in PASSTHROUGH_FIELDS if request.get(field) is not None
        }
        if not present:
            return context

        new_request = {**context.openai_request, **present}
        return dataclasses.replace(context, openai_request=new_request)
