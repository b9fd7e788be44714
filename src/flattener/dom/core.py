# src/flattener/dom/core.py
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class ElementType(str, Enum):
    """Closed set of content node types produced by the flattener."""
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LINK = "link"
    IMAGE = "image"
    CODE = "code"
    CODE_BLOCK = "code_block"
    STRONG = "strong"
    EMPHASIS = "emphasis"
    UNORDERED_LIST = "unordered_list"
    ORDERED_LIST = "ordered_list"
    LIST_ITEM = "list_item"
    TABLE = "table"
    TABLE_ROW = "table_row"
    TABLE_HEADER_CELL = "table_header_cell"
    TABLE_CELL = "table_cell"
    TEXT = "text"


class ElementAttributes(BaseModel):
    """Structured extras carried by links, images and headings."""
    model_config = ConfigDict(frozen=True)

    href: Optional[str] = None
    src: Optional[str] = None
    alt: Optional[str] = None
    title: Optional[str] = None
    width: Optional[str] = None
    height: Optional[str] = None
    level: Optional[str] = None


class Element(BaseModel):
    """
    A typed content node in the flattened document.

    Container types carry `children`, leaf types carry `content` and/or
    `attributes`. Instances are frozen once built.
    """
    model_config = ConfigDict(frozen=True, use_enum_values=True)

    type: ElementType
    content: Optional[str] = None
    children: Optional[List['Element']] = None
    attributes: Optional[ElementAttributes] = None

    @property
    def is_container(self) -> bool:
        return self.children is not None

    def to_dict(self) -> Dict[str, Any]:
        """Serializes the element, omitting every unset optional key."""
        return self.model_dump(mode="json", exclude_none=True)


class ContentRule(str, Enum):
    """How an element's `content` payload is derived from its source node."""
    NONE = "none"
    INNER_TEXT = "inner_text"
    SUBTREE_TEXT = "subtree_text"


# Receives (tag name, source attributes) and returns the attributes to keep.
AttributeCapture = Callable[[str, Dict[str, Any]], Dict[str, str]]


def capture_attrs(*names: str) -> AttributeCapture:
    """
    Builds an AttributeCapture that copies the named attributes when present.
    Multi-valued attributes (e.g. class lists) are joined with a space.
    """
    def capture(tag_name: str, attrs: Dict[str, Any]) -> Dict[str, str]:
        captured = {}
        for name in names:
            value = attrs.get(name)
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                value = " ".join(value)
            captured[name] = str(value)
        return captured
    return capture


class ElementDefinition:
    """
    Descriptor binding one or more HTML tags to the element they produce.
    """

    def __init__(
            self,
            tag_names: Tuple[str, ...],
            element_type: ElementType,
            content: ContentRule = ContentRule.NONE,
            recurse: bool = False,
            capture: Optional[AttributeCapture] = None
    ):
        self.tag_names = tuple(tag_names)
        self.element_type = element_type
        self.content = content
        self.recurse = recurse
        self.capture = capture

    def __repr__(self) -> str:
        return (
            f"ElementDefinition(tags={self.tag_names}, type={self.element_type.value}, "
            f"content={self.content.value}, recurse={self.recurse})"
        )
