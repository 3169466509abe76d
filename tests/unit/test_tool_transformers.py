"""Unit tests for tool schema and tool choice conversion."""

import logging

import pytest

from claude_bridge.conversion.pipeline.transformers.tool_choice import ToolChoiceTransformer
from claude_bridge.conversion.pipeline.transformers.tool_schema import (
    ToolSchemaTransformer,
    is_builtin_tool,
)

WEATHER_SCHEMA = {
    "type": "object",
    "properties": {"city": {"type": "string"}},
    "required": ["city"],
}


@pytest.mark.unit
class TestToolSchemaTransformer:
    def _convert(self, build_context, tools):
        context = build_context({"messages": [], "tools": tools})
        return ToolSchemaTransformer().transform(context).openai_request

    def test_input_schema_becomes_parameters(self, build_context):
        result = self._convert(
            build_context,
            [
                {
                    "name": "get_weather",
                    "description": "Weather lookup",
                    "input_schema": WEATHER_SCHEMA,
                }
            ],
        )

        assert result["tools"] == [
            {
                "type": "function",
                "function": {
                    "name": "get_weather",
                    "parameters": WEATHER_SCHEMA,
                    "description": "Weather lookup",
                },
            }
        ]

    def test_description_only_when_present(self, build_context):
        result = self._convert(build_context, [{"name": "ping", "input_schema": {}}])
        assert "description" not in result["tools"][0]["function"]

    def test_missing_schema_defaults_to_empty_object(self, build_context):
        result = self._convert(build_context, [{"name": "ping"}])
        assert result["tools"][0]["function"]["parameters"] == {}

    def test_builtin_web_search_is_dropped(self, build_context):
        tools = [
            {"type": "web_search_20250305", "name": "web_search", "max_uses": 5},
            {"name": "get_weather", "input_schema": WEATHER_SCHEMA},
        ]

        result = self._convert(build_context, tools)

        assert len(result["tools"]) == 1
        assert result["tools"][0]["function"]["name"] == "get_weather"

    def test_only_builtin_tools_omits_tools_field(self, build_context):
        result = self._convert(build_context, [{"type": "web_search_20250305", "name": "web"}])
        assert "tools" not in result

    def test_tool_order_is_preserved(self, build_context):
        tools = [{"name": name, "input_schema": {}} for name in ("a", "b", "c")]
        result = self._convert(build_context, tools)
        assert [t["function"]["name"] for t in result["tools"]] == ["a", "b", "c"]

    def test_no_tools_leaves_context_unchanged(self, build_context):
        context = build_context({"messages": []})
        assert ToolSchemaTransformer().transform(context) is context

    def test_non_mapping_entries_are_skipped(self, build_context, caplog):
        with caplog.at_level(logging.WARNING, logger="conversation"):
            result = self._convert(build_context, ["oops", {"name": "ok"}])

        assert [t["function"]["name"] for t in result["tools"]] == ["ok"]
        assert "Skipping malformed tool definition" in caplog.text

    def test_is_builtin_tool(self):
        assert is_builtin_tool({"type": "web_search_20250305"})
        assert not is_builtin_tool({"type": "custom", "name": "x"})
        assert not is_builtin_tool({"name": "x"})


@pytest.mark.unit
class TestToolChoiceTransformer:
    def _convert(self, build_context, tool_choice):
        context = build_context({"messages": [], "tool_choice": tool_choice})
        return ToolChoiceTransformer().transform(context).openai_request

    def test_auto(self, build_context):
        assert self._convert(build_context, {"type": "auto"})["tool_choice"] == "auto"

    def test_any_maps_to_required(self, build_context):
        assert self._convert(build_context, {"type": "any"})["tool_choice"] == "required"

    def test_named_tool(self, build_context):
        result = self._convert(build_context, {"type": "tool", "name": "get_weather"})
        assert result["tool_choice"] == {"type": "function", "function": {"name": "get_weather"}}

    def test_string_passes_through(self, build_context):
        assert self._convert(build_context, "none")["tool_choice"] == "none"

    def test_tool_without_name_is_omitted(self, build_context, caplog):
        with caplog.at_level(logging.WARNING, logger="conversation"):
            result = self._convert(build_context, {"type": "tool"})

        assert "tool_choice" not in result
        assert "has no name" in caplog.text

    @pytest.mark.parametrize("tool_choice", [{"type": "none"}, {"type": "whatever"}, 3])
    def test_unknown_choices_are_omitted(self, build_context, tool_choice):
        assert "tool_choice" not in self._convert(build_context, tool_choice)

    def test_absent_tool_choice_leaves_context_unchanged(self, build_context):
        context = build_context({"messages": []})
        assert ToolChoiceTransformer().transform(context) is context
