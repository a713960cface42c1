"""Reading variable values from the environment."""

from __future__ import annotations

import logging
import os
from typing import Iterable, List, Mapping, Optional

from envfixture.types import FixturePair

logger = logging.getLogger(__name__)


def read_value(name: str, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the current value of ``name`` or ``None`` if it is not set.

    ``environ`` defaults to the live ``os.environ``, looked up on every call.
    """
    if environ is None:
        environ = os.environ
    try:
        return environ.get(name)
    except (ValueError, UnicodeError):
        # Names the platform cannot encode (e.g. embedded NUL) are never set
        return None


def snapshot(
    keys: Iterable[str],
    environ: Optional[Mapping[str, str]] = None,
) -> List[FixturePair]:
    """Collect the pairs for all ``keys`` that are set, preserving key order."""
    pairs: List[FixturePair] = []
    for key in keys:
        value = read_value(key, environ)
        if value is None:
            logger.debug("Skipping %r: not set", key)
            continue
        pairs.append(FixturePair(name=key, value=value))
    return pairs


__all__ = ["read_value", "snapshot"]
