"""Selector model: fragment kinds, their ranks and renderings."""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class FragmentKind(Enum):
    """Kinds of simple-selector fragments, declared in canonical order.

    A compound selector must list its fragments in non-decreasing rank:

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def unique(self) -> bool:
        """True if the kind may occur at most once per selector."""
        return self in _UNIQUE_KINDS

    def render(self, value: str) -> str:
        return _TEMPLATES[self].format(value)


_RANKS: dict[FragmentKind, int] = {kind: i for i, kind in enumerate(FragmentKind)}

_UNIQUE_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_TEMPLATES: dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "{}",
    FragmentKind.ID: "#{}",
    FragmentKind.CLASS: ".{}",
    FragmentKind.ATTRIBUTE: "[{}]",
    FragmentKind.PSEUDO_CLASS: ":{}",
    FragmentKind.PSEUDO_ELEMENT: "::{}",
}


class Stringifiable(Protocol):
    """Anything that renders itself as a selector string."""

    def stringify(self) -> str: ...
