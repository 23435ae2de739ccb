"""
String helpers shared by the CMake writers.
"""

import re

# Characters kept as-is by sanitize_identifier(); everything else becomes '_'
_NON_IDENTIFIER_PATTERN = re.compile(r"[^A-Za-z0-9]")


def escape(chars_to_escape: str, value: str) -> str:
    """
    Prefix every occurrence of any of chars_to_escape with a backslash.

    Args:
        chars_to_escape: Set of characters to escape, e.g. '"' or '\\\\"'.
        value: String to escape.

    Returns:
        The escaped string.
    """
    return "".join("\\" + c if c in chars_to_escape else c for c in value)


def escape_string(value: str) -> str:
    """Escape a value for use inside a double-quoted CMake argument."""
    return escape('\\"', value)


def escape_path(value: str) -> str:
    """Escape a filesystem path for use inside a double-quoted CMake argument."""
    return escape("\\", value)


def join(sep: str, elements: list[str]) -> str:
    return sep.join(elements)


def split(sep: str, value: str) -> list[str]:
    """Split value on sep, keeping empty tokens (''.split gives [''])."""
    return value.split(sep)


def sanitize_identifier(value: str) -> str:
    """
    Replace every character that is not an ASCII letter or digit with '_'.

    Used to derive CMake variable names from file names, e.g.
    'My Project.jucer' -> 'My_Project_jucer'.
    """
    return _NON_IDENTIFIER_PATTERN.sub("_", value)
