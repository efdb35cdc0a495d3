"""Colorful CLI output helpers."""

import sys

# ANSI color codes
RED = "\033[31m"
RESET = "\033[0m"
CROSS = "\u2717"  # ✗


def _supports_color() -> bool:
    """Check if stderr supports color output."""
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


def _colorize(text: str, color: str) -> str:
    """Apply color to text if terminal supports it."""
    if _supports_color():
        return f"{color}{text}{RESET}"
    return text


def error(message: str) -> None:
    """Print error message with red cross to stderr."""
    cross = _colorize(CROSS, RED)
    print(f"{cross} {message}", file=sys.stderr)
