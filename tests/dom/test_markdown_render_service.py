# tests/dom/test_markdown_render_service.py
import logging
from unittest.mock import patch

import pytest

from flattener.services.markdown_render_service import MarkdownRenderService


@pytest.fixture
def service():
    return MarkdownRenderService()


def test_empty_markdown_renders_nothing(service):
    assert service.render_html("") == ""
    assert service.render_elements("   \n") == []


def test_heading_and_paragraph(service):
    elements = service.render_elements("# Title\n\nSome *text* here.\n")
    assert elements[0].type == "heading"
    assert elements[0].content == "Title"
    assert elements[0].attributes.level == "1"
    assert elements[1].type == "paragraph"
    assert [c.type for c in elements[1].children] == ["text", "emphasis", "text"]


def test_fenced_code_block(service):
    elements = service.render_elements("```\nx = 1\n```\n")
    blocks = [e for e in elements if e.type == "code_block"]
    assert len(blocks) == 1
    assert "x = 1" in blocks[0].content


def test_table_extra(service):
    markdown_text = "| a | b |\n|---|---|\n| 1 | 2 |\n"
    elements = service.render_elements(markdown_text)
    tables = [e for e in elements if e.type == "table"]
    assert len(tables) == 1
    header_row = tables[0].children[0]
    assert [cell.content for cell in header_row.children] == ["a", "b"]


def test_links_and_images(service):
    elements = service.render_elements("[docs](https://example.com) ![logo](logo.png)\n")
    paragraph = elements[0]
    link = next(c for c in paragraph.children if c.type == "link")
    image = next(c for c in paragraph.children if c.type == "image")
    assert link.attributes.href == "https://example.com"
    assert image.attributes.src == "logo.png"
    assert image.attributes.alt == "logo"


def test_custom_extras_are_used():
    service = MarkdownRenderService(extras=[])
    assert "<table>" not in service.render_html("| a |\n|---|\n| 1 |\n")


@pytest.mark.parametrize("language", ["python", "bash", ""])
def test_fenced_code_block_with_language(service, language):
    elements = service.render_elements(f"```{language}\nprint(1)\n```\n")
    blocks = [e for e in elements if e.type == "code_block"]
    assert len(blocks) == 1
    assert "print(1)" in blocks[0].content


def test_render_recursion_is_logged_not_raised(service, caplog):
    with patch("flattener.services.markdown_render_service.markdown2.markdown", side_effect=RecursionError):
        with caplog.at_level(logging.WARNING, logger="flattener.services.markdown_render_service"):
            assert service.render_elements("> " * 50 + "deep") == []
    assert "nested too deeply" in caplog.text


def test_deep_blockquotes_do_not_raise(service):
    elements = service.render_elements(">" * 400 + " deep\n")
    assert isinstance(elements, list)
