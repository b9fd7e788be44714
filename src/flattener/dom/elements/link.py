from ..core import ElementDefinition, ElementType, capture_attrs

# Anchors keep their children so inline markup inside link text survives.
DEFINITIONS = [
    ElementDefinition(
        tag_names=("a",),
        element_type=ElementType.LINK,
        recurse=True,
        capture=capture_attrs("href", "title")
    )
]
