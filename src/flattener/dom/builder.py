# src/flattener/dom/builder.py
import logging
from typing import Any, List, Optional

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from .core import ContentRule, Element, ElementAttributes, ElementDefinition, ElementType
from .registry import ElementRegistry
from .tree_view import NodeKind, SoupTreeView, TreeView
from flattener.utils.text_utils import inner_text, normalize_text, subtree_text

logger = logging.getLogger(__name__)


class ElementFlattener:
    """
    Walks a parsed markup tree and produces the ordered sequence of typed
    Elements that describe its content.

    Traversal is pre-order and depth-first. Known tags produce one Element
    each; unknown tags are transparent (their children are flattened in
    their place); whitespace-only text and non-content nodes (comments,
    doctypes) are dropped. The input tree is never modified.

    Unknown tags and sibling chains are walked with an explicit stack, so
    only nesting of known container tags costs Python stack frames. A tree
    nested deeper than the interpreter allows is logged and yields [].
    """

    def __init__(self, view: Optional[TreeView] = None):
        self.view = view or SoupTreeView()
        ElementRegistry.discover()

    def flatten_html(self, html: str) -> List[Element]:
        """
        Parses an HTML string and flattens it.

        A parser failure is logged and yields an empty sequence.
        """
        if not html or not html.strip():
            return []

        try:
            soup = BeautifulSoup(html.replace('\ufeff', ''), 'html.parser')
        except ParserRejectedMarkup as e:
            logger.warning("HTML parser rejected markup (%d chars): %s", len(html), e)
            return []
        except RecursionError:
            logger.warning("HTML nested too deeply to parse (%d chars).", len(html))
            return []

        # soup itself is the '[document]' root, which is not in the dispatch table
        return self.flatten(soup)

    def flatten(self, node: Any) -> List[Element]:
        """Flattens a single node and its subtree. None yields an empty list."""
        return self._guarded_walk(node, follow_siblings=False)

    def flatten_siblings(self, node: Any) -> List[Element]:
        """Flattens a node followed by every one of its next siblings."""
        return self._guarded_walk(node, follow_siblings=True)

    def _guarded_walk(self, node: Any, follow_siblings: bool) -> List[Element]:
        try:
            return self._walk(node, follow_siblings)
        except RecursionError:
            logger.warning("Markup nested too deeply to flatten; returning no elements.")
            return []

    def _walk(self, start: Any, follow_siblings: bool) -> List[Element]:
        elements: List[Element] = []
        # (node, whether its next siblings belong to this walk)
        stack = [(start, follow_siblings)]

        while stack:
            node, follow = stack.pop()
            if node is None:
                continue
            if follow:
                stack.append((self.view.next_sibling(node), True))

            kind = self.view.kind(node)

            if kind == NodeKind.TEXT:
                text = normalize_text(self.view.text(node))
                if text:
                    elements.append(Element(type=ElementType.TEXT, content=text))

            elif kind == NodeKind.ELEMENT:
                tag_name = self.view.tag_name(node)
                definition = ElementRegistry.get_definition(tag_name)
                if definition is None:
                    # Unsupported markup: skip the tag but keep its content.
                    # Pushed last, so the children are expanded before the next sibling.
                    stack.append((self.view.first_child(node), True))
                else:
                    elements.append(self._build_element(node, tag_name, definition))

            else:
                logger.debug("Skipping non-content node of type %s", type(node).__name__)

        return elements

    def _build_element(self, node: Any, tag_name: str, definition: ElementDefinition) -> Element:
        content = None
        if definition.content == ContentRule.INNER_TEXT:
            content = inner_text(self.view, node)
        elif definition.content == ContentRule.SUBTREE_TEXT:
            content = subtree_text(self.view, node)

        children = None
        if definition.recurse:
            children = self._walk(self.view.first_child(node), True)

        attributes = None
        if definition.capture is not None:
            captured = definition.capture(tag_name, self.view.attributes(node))
            if captured:
                attributes = ElementAttributes(**captured)

        return Element(
            type=definition.element_type,
            content=content,
            children=children,
            attributes=attributes
        )


def flatten_html(html: str) -> List[Element]:
    """Convenience wrapper flattening an HTML string with the default tree view."""
    return ElementFlattener().flatten_html(html)
