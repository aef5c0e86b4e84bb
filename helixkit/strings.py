"""String helpers: splitting, joining, trimming and character-class tests."""

from __future__ import annotations

import re
import string
from collections.abc import Iterable

DEFAULT_TRIM = " \t\r\n"

_WHITESPACE = re.compile(r"[ \t\n\v\f\r]+")
_DIGITS = frozenset(string.digits)
_ALPHAS = frozenset(string.ascii_letters)
_ALPHA_NUMERICS = _DIGITS | _ALPHAS


def make(data: bytes | bytearray | memoryview | str) -> str:
    """Return the text up to the first NUL character, or all of it if there is none.

    Byte input is decoded one byte per character.
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        data = bytes(data).decode("latin-1")
    head, _, _ = data.partition("\0")
    return head


def trim(text: str, remove: str = DEFAULT_TRIM) -> str:
    """Remove every leading and trailing character found in ``remove``."""
    return text.strip(remove)


def split(text: str, token: str, limit: int = -1) -> list[str]:
    """Split ``text`` on each occurrence of ``token``.

    At most ``limit`` splits are made; the last item then holds the unsplit
    remainder. A negative limit splits on every occurrence.
    """
    if not token:
        raise ValueError("token must have non-zero length.")
    return text.split(token, limit)


def split_on_whitespace(text: str) -> list[str]:
    """Split on runs of whitespace.

    Leading or trailing whitespace produces an empty first or last item.
    """
    return _WHITESPACE.split(text)


def join(items: Iterable[object], token: str) -> str:
    """Concatenate the items as text with ``token`` between each pair."""
    return token.join(str(item) for item in items)


def all_of_digits(text: str) -> bool:
    """True when every character is an ASCII digit."""
    return all(character in _DIGITS for character in text)


def all_of_alpha_numerics(text: str) -> bool:
    """True when every character is an ASCII letter or digit."""
    return all(character in _ALPHA_NUMERICS for character in text)


def all_of_alphas(text: str) -> bool:
    """True when every character is an ASCII letter."""
    return all(character in _ALPHAS for character in text)