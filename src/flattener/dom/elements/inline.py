from ..core import ElementDefinition, ElementType

DEFINITIONS = [
    ElementDefinition(tag_names=("strong", "b"), element_type=ElementType.STRONG, recurse=True),
    ElementDefinition(tag_names=("em", "i"), element_type=ElementType.EMPHASIS, recurse=True),
]
