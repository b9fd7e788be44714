from ..core import ContentRule, ElementDefinition, ElementType

DEFINITIONS = [
    ElementDefinition(
        tag_names=("code",),
        element_type=ElementType.CODE,
        content=ContentRule.INNER_TEXT
    ),
    # Fenced blocks render as <pre><code>...</code></pre>, split into spans when highlighted.
    ElementDefinition(
        tag_names=("pre",),
        element_type=ElementType.CODE_BLOCK,
        content=ContentRule.SUBTREE_TEXT
    ),
]
