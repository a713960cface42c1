"""envfixture - dump environment variables as Rust test fixtures."""

__version__ = "1.0.0"

from envfixture.render import quote, render_fixture, write_fixture
from envfixture.selector import DEFAULT_KEYS, select_keys
from envfixture.snapshot import read_value, snapshot
from envfixture.types import EscapeKind, FixturePair

__all__ = [
    "DEFAULT_KEYS",
    "EscapeKind",
    "FixturePair",
    "quote",
    "read_value",
    "render_fixture",
    "select_keys",
    "snapshot",
    "write_fixture",
]
