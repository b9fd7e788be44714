from ..core import ElementDefinition, ElementType

DEFINITIONS = [
    ElementDefinition(tag_names=("ul",), element_type=ElementType.UNORDERED_LIST, recurse=True),
    ElementDefinition(tag_names=("ol",), element_type=ElementType.ORDERED_LIST, recurse=True),
    ElementDefinition(tag_names=("li",), element_type=ElementType.LIST_ITEM, recurse=True),
]
