"""Validation helpers for caller-facing inputs."""
from __future__ import annotations

from typing import Any

from ..exceptions import InputTypeError


def ensure_text(value: Any) -> str:
    """Ensure ``value`` is a ``str`` before it reaches the byte projection.

    Parameters
    ----------
    value:
        Object supplied by the caller.

    Returns
    -------
    str
        ``value`` unchanged.

    Raises
    ------
    InputTypeError
        If ``value`` is not a text string. ``bytes`` are rejected too; decode
        them with :func:`zb_core.utils.text.to_text` first.
    """

    if not isinstance(value, str):
        raise InputTypeError(f"Expected str input, got {type(value).__name__}")
    return value


__all__ = ["ensure_text"]
