# src/flattener/dom/registry.py
import importlib
import logging
import pkgutil
from typing import Dict, List, Optional

from .core import ElementDefinition

logger = logging.getLogger(__name__)

ELEMENTS_PACKAGE = "flattener.dom.elements"


class ElementRegistry:
    """
    Central dispatch table mapping HTML tag names to element definitions.

    Definitions are discovered once from the modules in the
    'flattener.dom.elements' package; every module exposing a `DEFINITIONS`
    list of ElementDefinition instances contributes its tags.
    """

    _definitions: Dict[str, ElementDefinition] = {}
    _loaded: bool = False

    @classmethod
    def discover(cls) -> None:
        """
        Populates the dispatch table from the elements package.

        Raises:
            ValueError: If two definitions claim the same tag.
        """
        if cls._loaded:
            return

        elements_pkg = importlib.import_module(ELEMENTS_PACKAGE)
        table: Dict[str, ElementDefinition] = {}

        for _, name, _ in sorted(pkgutil.iter_modules(elements_pkg.__path__), key=lambda m: m[1]):
            module = importlib.import_module(f"{ELEMENTS_PACKAGE}.{name}")
            definitions = getattr(module, "DEFINITIONS", None)
            if not definitions:
                logger.debug("Module %s defines no elements, skipping.", name)
                continue

            for defn in definitions:
                if not isinstance(defn, ElementDefinition):
                    continue
                for tag_name in defn.tag_names:
                    if tag_name in table:
                        raise ValueError(f"Tag '{tag_name}' registered twice (module {name})")
                    table[tag_name] = defn
                logger.debug("Element loaded: %s -> %s", defn.tag_names, defn.element_type.value)

        cls._definitions = table
        cls._loaded = True

    @classmethod
    def get_definition(cls, tag_name: Optional[str]) -> Optional[ElementDefinition]:
        """Returns the definition for a tag, or None for unsupported markup."""
        if not tag_name:
            return None
        cls.discover()
        return cls._definitions.get(tag_name.lower())

    @classmethod
    def get_supported_tags(cls) -> List[str]:
        cls.discover()
        return sorted(cls._definitions)
