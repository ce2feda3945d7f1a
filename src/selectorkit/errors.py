"""Error hierarchy for selectorkit."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.model import FragmentKind


class SelectorKitError(Exception):
    """Base error for all selectorkit errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class SelectorError(SelectorKitError):
    """A fragment could not be appended to a selector builder."""

    message = "Invalid selector fragment."

    def __init__(self, kind: FragmentKind | None = None) -> None:
        super().__init__(self.message)
        self.kind = kind


class DuplicateFragmentError(SelectorError):
    """Element, id or pseudo-element appended a second time."""

    message = (
        "Element, id and pseudo-element should not occur more than one time "
        "inside the selector."
    )


class SequenceOrderError(SelectorError):
    """A fragment ranked lower than the previous one was appended."""

    message = (
        "Selector parts should be arranged in the following order: element, "
        "id, class, attribute, pseudo-class, pseudo-element."
    )


class InvalidCombinatorError(SelectorKitError):
    """Combinator token outside the CSS set (strict mode only)."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid combinator: {token!r}")
        self.token = token


class PayloadError(SelectorKitError):
    """A JSON payload could not be decoded into the requested record type."""
