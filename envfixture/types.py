"""Common types for envfixture."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Tuple


class EscapeKind(enum.Enum):
    """How a single code point is written inside a string literal."""

    LITERAL = "literal"
    NAMED = "named"
    NUMERIC = "numeric"


@dataclass(frozen=True)
class FixturePair:
    """A variable that was present in the environment when it was read."""

    name: str
    value: str

    def as_tuple(self) -> Tuple[str, str]:
        return (self.name, self.value)
