from typing import Any, Dict

from ..core import ContentRule, ElementDefinition, ElementType


def capture_level(tag_name: str, attrs: Dict[str, Any]) -> Dict[str, str]:
    """
    Derives the heading level from the tag name (e.g. 'h2' -> '2').
    """
    level = tag_name[1:]
    if not level.isdigit():
        return {}
    return {"level": level}


DEFINITIONS = [
    ElementDefinition(
        tag_names=("h1", "h2", "h3", "h4", "h5", "h6"),
        element_type=ElementType.HEADING,
        content=ContentRule.INNER_TEXT,
        capture=capture_level
    )
]
