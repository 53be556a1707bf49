"""Text traversal helpers shared across modules."""
from __future__ import annotations

from typing import Iterator, Tuple

_BYTE_MASK = 0xFF
_ASTRAL_BASE = 0x10000
_HIGH_SURROGATE_BASE = 0xD800
_LOW_SURROGATE_BASE = 0xDC00


def to_text(data: str | bytes, *, errors: str = "surrogatepass") -> str:
    """Decode UTF-8 ``data``; ``errors`` is passed to :meth:`bytes.decode`.

    Use ``errors="surrogateescape"`` to map undecodable bytes the way the
    interpreter decodes ``sys.argv``.
    """
    if isinstance(data, bytes):
        return data.decode("utf-8", errors=errors)
    return data


def iter_code_points(text: str) -> Iterator[Tuple[int, int]]:
    for index, char in enumerate(text):
        yield index, ord(char)


def utf16_units(code_point: int) -> Tuple[int, ...]:
    """Return the UTF-16 code units that store ``code_point``.

    Lone surrogates are returned unchanged as a single unit.
    """

    if code_point < _ASTRAL_BASE:
        return (code_point,)
    offset = code_point - _ASTRAL_BASE
    return (_HIGH_SURROGATE_BASE + (offset >> 10), _LOW_SURROGATE_BASE + (offset & 0x3FF))


def first_code_unit(code_point: int) -> int:
    return utf16_units(code_point)[0]


def project_byte(value: int) -> int:
    return value & _BYTE_MASK


__all__ = ["to_text", "iter_code_points", "utf16_units", "first_code_unit", "project_byte"]
