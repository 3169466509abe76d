from claude_bridge.conversion.request_converter import convert_claude_to_openai

__all__ = ["convert_claude_to_openai"]
