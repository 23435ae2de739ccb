"""
Generic parsed-document abstraction.

The rest of the package only sees Node: a tag, string attributes and ordered
children. The XML parser behind it (xml.etree.ElementTree) can be swapped
without touching the typed readers in project.py.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator, Optional

from jucer2cmake.errors import ParseError


class Node:
    """Read-only view over one element of a parsed document."""

    def __init__(self, element: ET.Element):
        self._element = element

    @property
    def tag(self) -> str:
        return self._element.tag

    def get(self, name: str) -> Optional[str]:
        """Return attribute `name`, or None if the node does not have it."""
        return self._element.get(name)

    def has(self, name: str) -> bool:
        return name in self._element.attrib

    def attributes(self) -> dict[str, str]:
        return dict(self._element.attrib)

    def children(self) -> list["Node"]:
        return [Node(child) for child in self._element]

    def __iter__(self) -> Iterator["Node"]:
        return iter(self.children())

    def __len__(self) -> int:
        return len(self._element)

    def child(self, tag: str) -> Optional["Node"]:
        """Return the first child with the given tag, or None."""
        element = self._element.find(tag)
        if element is None:
            return None
        return Node(element)

    def child_with(self, attribute: str, value: str) -> Optional["Node"]:
        """Return the first child whose attribute equals value, or None."""
        for element in self._element:
            if element.get(attribute) == value:
                return Node(element)
        return None

    def __repr__(self) -> str:
        return f"Node({self.tag}, {len(self)} children)"


def parse_document(data: bytes) -> Optional[Node]:
    """
    Parse a markup document.

    Args:
        data: Raw document bytes (encoding taken from the XML declaration).

    Returns:
        The root Node, or None if the document is not well-formed or
        declares an unknown encoding.
    """
    try:
        root = ET.fromstring(data)
    except (ET.ParseError, LookupError):
        return None
    return Node(root)


def load_document(path: Path) -> Optional[Node]:
    """
    Read and parse a markup document from disk.

    Raises:
        ParseError: If the file cannot be read.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise ParseError(f"Cannot read {path}: {e.strerror}") from e
    return parse_document(data)
