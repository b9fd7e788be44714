from ..core import ElementDefinition, ElementType

DEFINITIONS = [
    ElementDefinition(tag_names=("p",), element_type=ElementType.PARAGRAPH, recurse=True)
]
