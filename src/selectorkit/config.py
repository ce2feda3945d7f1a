from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorKitConfig:
    strict_combinators: bool = False  # reject tokens outside COMBINATORS
