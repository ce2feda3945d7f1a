"""selectorkit: fluent CSS selector builder and small object helpers."""
from __future__ import annotations

__version__ = "0.1.0"

from selectorkit.config import SelectorKitConfig
from selectorkit.errors import (
    DuplicateFragmentError,
    InvalidCombinatorError,
    PayloadError,
    SelectorError,
    SelectorKitError,
    SequenceOrderError,
)
from selectorkit.objects import Rectangle, from_json, to_json
from selectorkit.selector import (
    COMBINATORS,
    CombinedSelector,
    FragmentKind,
    SelectorBuilder,
    Stringifiable,
    attr,
    class_,
    combine,
    element,
    id,
    pseudo_class,
    pseudo_element,
)

__all__ = [
    "__version__",
    # Selector
    "COMBINATORS",
    "CombinedSelector",
    "FragmentKind",
    "SelectorBuilder",
    "Stringifiable",
    "attr",
    "class_",
    "combine",
    "element",
    "id",
    "pseudo_class",
    "pseudo_element",
    # Objects
    "Rectangle",
    "from_json",
    "to_json",
    # Config
    "SelectorKitConfig",
    # Errors
    "DuplicateFragmentError",
    "InvalidCombinatorError",
    "PayloadError",
    "SelectorError",
    "SelectorKitError",
    "SequenceOrderError",
]
