"""Rendering of fixture pairs as Rust source.

Every string is written as a double-quoted Rust string literal that parses
back to the same text. Two deliberate exceptions exist:

* ``"Ã¤"`` (UTF-8 of ``ä`` decoded as Latin-1, as written by some upstream
  dotenv tools) is turned back into ``ä`` before escaping.
* Lone surrogates cannot be expressed in a Rust ``&str`` and are written as
  ``\\u{fffd}``.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, TextIO

from envfixture.types import EscapeKind, FixturePair

logger = logging.getLogger(__name__)

MOJIBAKE_FIXES = (("\u00c3\u00a4", "\u00e4"),)

NAMED_ESCAPES = {
    0x0A: "\\n",
    0x0D: "\\r",
    0x09: "\\t",
    0x22: '\\"',
    0x5C: "\\\\",
}

REPLACEMENT_CHARACTER = 0xFFFD

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


def fix_mojibake(text: str) -> str:
    """Undo the known Latin-1 misreading of ``ä``."""
    for broken, fixed in MOJIBAKE_FIXES:
        text = text.replace(broken, fixed)
    return text


def classify(code_point: int) -> EscapeKind:
    """Decide how ``code_point`` is written inside a string literal."""
    if code_point in NAMED_ESCAPES:
        return EscapeKind.NAMED
    if 0x20 <= code_point <= 0x7E or 0x80 <= code_point <= 0xFE:
        return EscapeKind.LITERAL
    return EscapeKind.NUMERIC


def escape_code_point(code_point: int) -> str:
    kind = classify(code_point)
    if kind is EscapeKind.LITERAL:
        return chr(code_point)
    if kind is EscapeKind.NAMED:
        return NAMED_ESCAPES[code_point]
    if 0xD800 <= code_point <= 0xDFFF:
        code_point = REPLACEMENT_CHARACTER
    return f"\\u{{{code_point:x}}}"


def iter_code_points(text: str) -> Iterator[int]:
    """Yield the code points of ``text``, joining surrogate pairs.

    Strings decoded with ``surrogatepass`` may carry an astral character as two
    surrogate halves; those are combined so they are escaped as one character.
    """
    index = 0
    length = len(text)
    while index < length:
        code_point = ord(text[index])
        if code_point in _HIGH_SURROGATES and index + 1 < length:
            low = ord(text[index + 1])
            if low in _LOW_SURROGATES:
                yield 0x10000 + ((code_point - 0xD800) << 10) + (low - 0xDC00)
                index += 2
                continue
        yield code_point
        index += 1


def quote(text: str) -> str:
    """Render ``text`` as a double-quoted Rust string literal."""
    escaped = "".join(escape_code_point(cp) for cp in iter_code_points(fix_mojibake(text)))
    return f'"{escaped}"'


def render_pair(pair: FixturePair, indent: int = 4) -> str:
    return f"{' ' * indent}({quote(pair.name)}, {quote(pair.value)}),"


def render_header(const_name: str = "FIXTURE") -> str:
    return f"pub const {const_name}: &[(&str, &str)] = &["


def render_lines(
    pairs: Iterable[FixturePair],
    const_name: str = "FIXTURE",
    indent: int = 4,
) -> Iterator[str]:
    """Yield the fixture source line by line, without line terminators."""
    yield render_header(const_name)
    for pair in pairs:
        yield render_pair(pair, indent)
    yield "];"


def render_fixture(
    pairs: Iterable[FixturePair],
    const_name: str = "FIXTURE",
    indent: int = 4,
) -> str:
    """Render the complete fixture constant, one newline-terminated line each."""
    return "".join(f"{line}\n" for line in render_lines(pairs, const_name, indent))


def write_fixture(
    pairs: Iterable[FixturePair],
    stream: TextIO,
    const_name: str = "FIXTURE",
    indent: int = 4,
) -> int:
    """Write the fixture to ``stream`` and return the number of pairs written."""
    pairs = list(pairs)
    stream.write(render_fixture(pairs, const_name, indent))
    logger.debug("Rendered %d pairs as %s", len(pairs), const_name)
    return len(pairs)


__all__ = [
    "classify",
    "escape_code_point",
    "fix_mojibake",
    "iter_code_points",
    "quote",
    "render_fixture",
    "render_lines",
    "render_pair",
    "write_fixture",
]
