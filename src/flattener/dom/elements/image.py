from ..core import ElementDefinition, ElementType, capture_attrs

DEFINITIONS = [
    ElementDefinition(
        tag_names=("img",),
        element_type=ElementType.IMAGE,
        capture=capture_attrs("src", "alt", "title", "width", "height")
    )
]
