# src/flattener/dom/tree_view.py
from enum import Enum
from typing import Any, Dict, Optional, Protocol

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString


class NodeKind(str, Enum):
    ELEMENT = "element"
    TEXT = "text"
    OTHER = "other"


class TreeView(Protocol):
    """
    Read-only accessors the flattener needs from a parsed markup tree.
    Any parser can be plugged in by implementing these six methods.
    """

    def kind(self, node: Any) -> NodeKind: ...

    def tag_name(self, node: Any) -> Optional[str]: ...

    def attributes(self, node: Any) -> Dict[str, Any]: ...

    def first_child(self, node: Any) -> Optional[Any]: ...

    def next_sibling(self, node: Any) -> Optional[Any]: ...

    def text(self, node: Any) -> str: ...


class SoupTreeView:
    """TreeView over BeautifulSoup nodes."""

    def kind(self, node: Any) -> NodeKind:
        if isinstance(node, Tag):
            return NodeKind.ELEMENT
        # Comments, doctypes, CDATA and processing instructions subclass PreformattedString.
        if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
            return NodeKind.TEXT
        return NodeKind.OTHER

    def tag_name(self, node: Any) -> Optional[str]:
        return node.name if isinstance(node, Tag) else None

    def attributes(self, node: Any) -> Dict[str, Any]:
        return dict(node.attrs) if isinstance(node, Tag) else {}

    def first_child(self, node: Any) -> Optional[Any]:
        if isinstance(node, Tag) and node.contents:
            return node.contents[0]
        return None

    def next_sibling(self, node: Any) -> Optional[Any]:
        return node.next_sibling

    def text(self, node: Any) -> str:
        return str(node) if isinstance(node, NavigableString) else ""
