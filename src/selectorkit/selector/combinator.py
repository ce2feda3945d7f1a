"""Combined selectors: two selectors joined by a combinator token."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from selectorkit.config import SelectorKitConfig
from selectorkit.errors import InvalidCombinatorError
from selectorkit.selector.model import Stringifiable

__all__ = ["COMBINATORS", "CombinedSelector", "combine"]

logger = logging.getLogger(__name__)

# descendant, adjacent sibling, general sibling, child
COMBINATORS: tuple[str, ...] = (" ", "+", "~", ">")


@dataclass(frozen=True)
class CombinedSelector:
    """An immutable selector rendered eagerly from two operands."""

    text: str

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


def combine(
    left: Stringifiable,
    token: str,
    right: Stringifiable,
    *,
    config: SelectorKitConfig | None = None,
) -> CombinedSelector:
    """Join *left* and *right* as ``"<left> <token> <right>"``.

    The token is accepted as-is unless ``config.strict_combinators`` is set,
    in which case anything outside :data:`COMBINATORS` raises
    :class:`InvalidCombinatorError`.
    """
    if config is not None and config.strict_combinators and token not in COMBINATORS:
        raise InvalidCombinatorError(token)
    text = f"{left.stringify()} {token} {right.stringify()}"
    logger.debug("Combined selector: %r", text)
    return CombinedSelector(text=text)
