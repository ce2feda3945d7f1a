from selectorkit.selector.builder import (
    SelectorBuilder,
    attr,
    class_,
    element,
    id,
    pseudo_class,
    pseudo_element,
)
from selectorkit.selector.combinator import COMBINATORS, CombinedSelector, combine
from selectorkit.selector.model import FragmentKind, Stringifiable

__all__ = [
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
]
