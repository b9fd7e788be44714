from ..core import ContentRule, ElementDefinition, ElementType

# Cells carry both their own direct text and their flattened children.
DEFINITIONS = [
    ElementDefinition(tag_names=("table",), element_type=ElementType.TABLE, recurse=True),
    ElementDefinition(tag_names=("tr",), element_type=ElementType.TABLE_ROW, recurse=True),
    ElementDefinition(
        tag_names=("th",),
        element_type=ElementType.TABLE_HEADER_CELL,
        content=ContentRule.INNER_TEXT,
        recurse=True
    ),
    ElementDefinition(
        tag_names=("td",),
        element_type=ElementType.TABLE_CELL,
        content=ContentRule.INNER_TEXT,
        recurse=True
    ),
]
