# src/flattener/utils/text_utils.py
from typing import Any, Optional

from flattener.dom.tree_view import NodeKind, TreeView


def normalize_text(text: Optional[str]) -> str:
    """Trims surrounding whitespace; None becomes an empty string."""
    return text.strip() if text else ""


def iter_children(view: TreeView, node: Any):
    """Yields the direct children of a node in document order."""
    child = view.first_child(node)
    while child is not None:
        yield child
        child = view.next_sibling(child)


def inner_text(view: TreeView, node: Any) -> str:
    """
    Concatenates the node's immediate text children (not deeper descendants)
    and trims the result.
    """
    parts = [view.text(child) for child in iter_children(view, node) if view.kind(child) == NodeKind.TEXT]
    return normalize_text("".join(parts))


def subtree_text(view: TreeView, node: Any) -> str:
    """
    Concatenates every text descendant of a node in document order and trims
    the result. Used for code blocks, whose text is often split across
    syntax-highlighting spans.
    """
    parts = []
    stack = [view.first_child(node)]
    while stack:
        current = stack.pop()
        if current is None:
            continue
        stack.append(view.next_sibling(current))
        kind = view.kind(current)
        if kind == NodeKind.TEXT:
            parts.append(view.text(current))
        elif kind == NodeKind.ELEMENT:
            stack.append(view.first_child(current))
    return normalize_text("".join(parts))
