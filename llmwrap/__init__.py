"""llmwrap: describe a shell task in plain English, get a runnable command back."""

__version__ = "0.1.0"

from .command_translator import CommandTranslator, extract_text, sanitize_command
from .config import Config, load_config
from .errors import LlmwrapError

__all__ = [
    "__version__",
    "CommandTranslator",
    "Config",
    "LlmwrapError",
    "extract_text",
    "load_config",
    "sanitize_command",
]
