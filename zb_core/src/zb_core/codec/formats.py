"""Textual renderings of byte sequences."""
from __future__ import annotations

import base64
import json
from typing import Callable, Dict, Sequence

from ..exceptions import UnknownFormatError


def _as_json(values: Sequence[int]) -> str:
    return json.dumps(list(values), separators=(",", ":"))


def _as_hex(values: Sequence[int]) -> str:
    return bytes(values).hex()


def _as_base64(values: Sequence[int]) -> str:
    return base64.b64encode(bytes(values)).decode("ascii")


_RENDERERS: Dict[str, Callable[[Sequence[int]], str]] = {
    "json": _as_json,
    "hex": _as_hex,
    "base64": _as_base64,
}

FORMATS = tuple(_RENDERERS)


def format_bytes(values: Sequence[int], fmt: str = "json") -> str:
    try:
        renderer = _RENDERERS[fmt.lower()]
    except KeyError as exc:
        raise UnknownFormatError(f"Unknown output format: {fmt}") from exc
    return renderer(values)


__all__ = ["FORMATS", "format_bytes"]
