# src/flattener/services/markdown_render_service.py
import logging
from typing import List, Optional, Sequence

import markdown2

from flattener.dom.builder import ElementFlattener
from flattener.dom.core import Element

logger = logging.getLogger(__name__)

DEFAULT_EXTRAS = ("fenced-code-blocks", "tables", "strike", "cuddled-lists")


class MarkdownRenderService:
    """
    Renders README markdown to HTML with markdown2 and flattens the result.
    """

    def __init__(self, extras: Optional[Sequence[str]] = None, flattener: Optional[ElementFlattener] = None):
        self.extras = list(extras if extras is not None else DEFAULT_EXTRAS)
        self.flattener = flattener or ElementFlattener()

    def render_html(self, markdown_text: str) -> str:
        if not markdown_text or not markdown_text.strip():
            return ""
        try:
            html = markdown2.markdown(markdown_text, extras=self.extras)
        except RecursionError:
            logger.warning("Markdown nested too deeply to render (%d chars).", len(markdown_text))
            return ""
        # markdown2 returns a UnicodeWithAttrs str subclass; hand back a plain str
        return str(html)

    def render_elements(self, markdown_text: str) -> List[Element]:
        """Markdown -> HTML -> flattened element sequence."""
        html = self.render_html(markdown_text)
        elements = self.flattener.flatten_html(html)
        logger.debug("Rendered %d chars of markdown into %d top-level elements.", len(markdown_text or ""), len(elements))
        return elements
