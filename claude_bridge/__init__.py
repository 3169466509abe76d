"""Claude Bridge

Converts Claude Messages API requests into OpenAI Chat Completions requests.
"""

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("claude-bridge")
except PackageNotFoundError:
    # Fallback for source checkouts
    __version__ = "1.0.0"
__author__ = "Claude Bridge"
