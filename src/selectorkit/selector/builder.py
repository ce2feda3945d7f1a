"""Fluent builder for compound CSS selectors.

Usage::

    id("main").class_("container").class_("editable").stringify()
    # => "#main.container.editable"

Each append is validated before the builder is touched, so a rejected
fragment leaves the builder exactly as it was. Builders are not safe for
concurrent mutation; callers sharing one across threads must serialize
access themselves.
"""

from __future__ import annotations

import logging

from selectorkit.errors import DuplicateFragmentError, SequenceOrderError
from selectorkit.selector.model import FragmentKind

__all__ = [
    "SelectorBuilder",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates selector fragments while enforcing order and uniqueness."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._seen: set[FragmentKind] = set()
        self._last_kind: FragmentKind | None = None

    # --- state ---------------------------------------------------------------

    @property
    def text(self) -> str:
        return "".join(self._parts)

    @property
    def last_kind(self) -> FragmentKind | None:
        return self._last_kind

    @property
    def element_seen(self) -> bool:
        return FragmentKind.ELEMENT in self._seen

    @property
    def id_seen(self) -> bool:
        return FragmentKind.ID in self._seen

    @property
    def pseudo_element_seen(self) -> bool:
        return FragmentKind.PSEUDO_ELEMENT in self._seen

    # --- appending -----------------------------------------------------------

    def append(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        """Validate and append one fragment of *kind*.

        Raises :class:`DuplicateFragmentError` if a once-only kind is repeated
        and :class:`SequenceOrderError` if *kind* ranks below the last
        fragment. The duplicate check wins when both apply.
        """
        if kind.unique and kind in self._seen:
            logger.debug("Rejected duplicate %s fragment %r", kind.value, value)
            raise DuplicateFragmentError(kind)
        if self._last_kind is not None and kind.rank < self._last_kind.rank:
            logger.debug(
                "Rejected %s fragment %r after %s",
                kind.value,
                value,
                self._last_kind.value,
            )
            raise SequenceOrderError(kind)

        self._parts.append(kind.render(value))
        self._seen.add(kind)
        self._last_kind = kind
        return self

    def element(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.PSEUDO_ELEMENT, value)

    # --- rendering -----------------------------------------------------------

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.text!r})"


# ---------------------------------------------------------------------------
# Entry points: each returns a fresh builder seeded with one fragment
# ---------------------------------------------------------------------------


def element(value: str) -> SelectorBuilder:
    return SelectorBuilder().element(value)


def id(value: str) -> SelectorBuilder:  # noqa: A001
    return SelectorBuilder().id(value)


def class_(value: str) -> SelectorBuilder:
    return SelectorBuilder().class_(value)


def attr(value: str) -> SelectorBuilder:
    return SelectorBuilder().attr(value)


def pseudo_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_element(value)
