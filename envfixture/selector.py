"""Selection of the variable names to capture."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

# Keys used by the loader edge-case fixtures, in the order the fixtures list
# them. Some are deliberately odd names to exercise escaping of names too.
DEFAULT_KEYS: Tuple[str, ...] = (
    "VAR1",
    "VAR2",
    "VAR3",
    "  VAR3 ",
    "VAR4",
    '"VAR4"',
    '"VAR 4"',
    "VAR 4",
    "VAR5",
    "VAR6",
    "VAR7",
    "VAR8",
    "BAR1",
    "VAR9",
    "BAR2",
    "VAR10",
    "VAR12",
    "VAR13",
    "VAR14",
    "VAR15",
    "VAR16",
    "VAR17",
    "VAR18",
    "VAR19",
    "VAR20",
    "VAR21",
    "VAR22",
    "VAR23",
    "VAR24",
    "VAR25",
    "VAR26",
    "VAR27",
    "VAR28",
    "VAR29",
    "VAR30",
    "VAR31",
    "VAR32",
    "VAR33",
    "VAR34",
    "VAR35",
    "VAR36",
    "VAR37",
    "VAR37B",
    "VAR37C",
    "JSON1",
    "JSON2",
    "JSON3",
    "JSON4",
    "PRE_DEFINED",
    "VAR38",
    "VAR39",
    "VAR40",
    "VAR41",
    "VAR42",
    "VAR43",
    "EOF",
    "FOO",
    "BAR",
    "BAZ",
)


def select_keys(
    keys: Optional[Sequence[str]] = None,
    default: Sequence[str] = DEFAULT_KEYS,
) -> List[str]:
    """Return the names to look up, in output order.

    Any non-empty ``keys`` replaces ``default`` entirely. Names are neither
    validated, sorted nor de-duplicated.
    """
    if keys:
        return list(keys)
    return list(default)


__all__ = ["DEFAULT_KEYS", "select_keys"]
