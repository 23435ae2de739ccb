"""
Settings accessor: turns an attribute into a CMake argument line.

Absent or empty attributes become a commented-out tag (`# TAG`) so every
generated call still lists every setting it knows about.
"""

import re
from typing import Optional

from jucer2cmake.core.document import Node
from jucer2cmake.core.text import escape_string

# Leading integer, as read by JUCE's var-to-int conversion ("1", " 0", "12abc")
_INT_PATTERN = re.compile(r"^\s*([-+]?\d+)")


def to_int(value: Optional[str]) -> int:
    """Convert an attribute value to int; non-numeric values read as 0."""
    if value is None:
        return 0
    match = _INT_PATTERN.match(value)
    if match:
        return int(match.group(1))
    return 0


def format_setting(cmake_tag: str, value: Optional[str]) -> str:
    """Return `TAG "value"` for a non-empty value, `# TAG` otherwise."""
    if value:
        return f'{cmake_tag} "{escape_string(value)}"'
    return f"# {cmake_tag}"


def format_on_off_setting(cmake_tag: str, value: Optional[str]) -> str:
    """Return `TAG ON` / `TAG OFF` for a present value, `# TAG` otherwise."""
    if value is None:
        return f"# {cmake_tag}"
    return f"{cmake_tag} {'ON' if to_int(value) else 'OFF'}"


def get_setting(node: Optional[Node], cmake_tag: str, attribute: str) -> str:
    """
    Emit a string setting from a node attribute.

    Args:
        node: Node holding the attribute (None behaves like a missing attribute).
        cmake_tag: Keyword of the CMake function argument, e.g. 'PROJECT_NAME'.
        attribute: Attribute name in the Jucer project, e.g. 'name'.

    Returns:
        The argument line without indentation.
    """
    value = node.get(attribute) if node is not None else None
    return format_setting(cmake_tag, value)


def get_on_off_setting(node: Optional[Node], cmake_tag: str, attribute: str) -> str:
    """Emit a boolean setting from an integer-valued node attribute."""
    value = node.get(attribute) if node is not None else None
    return format_on_off_setting(cmake_tag, value)
