"""Byte projection of text for the compression input buffer.

Each code point of the input becomes exactly one byte: the low eight bits of
its first UTF-16 code unit. ASCII and Latin-1 pass through unchanged, wider BMP
characters are truncated, and astral characters (U+10000 and above) emit the
low byte of their high surrogate only. The low surrogate never contributes to
the output. That last mapping is a known anomaly kept for compatibility with
existing compressed data; :class:`~zb_core.models.ProjectionKind` flags it as
``ASTRAL`` so callers can detect it.
"""
from __future__ import annotations

from typing import List

from ..exceptions import LossyProjectionError
from ..models import ProjectedChar, ProjectionKind, ProjectionReport
from ..utils.text import first_code_unit, iter_code_points, project_byte
from ..utils.validation import ensure_text

_LATIN1_MAX = 0xFF
_BMP_MAX = 0xFFFF


def string_to_byte_array(text: str) -> List[int]:
    return [project_byte(first_code_unit(ord(char))) for char in text]


def string_to_bytes(text: str) -> bytes:
    return bytes(string_to_byte_array(text))


def classify(code_point: int) -> ProjectionKind:
    if code_point <= _LATIN1_MAX:
        return ProjectionKind.IDENTITY
    if code_point <= _BMP_MAX:
        return ProjectionKind.TRUNCATED
    return ProjectionKind.ASTRAL


def project_text(text: str) -> ProjectionReport:
    chars = []
    for index, code_point in iter_code_points(text):
        unit = first_code_unit(code_point)
        chars.append(
            ProjectedChar(
                index=index,
                code_point=code_point,
                code_unit=unit,
                byte=project_byte(unit),
                kind=classify(code_point),
            )
        )
    return ProjectionReport(chars=tuple(chars))


class ByteArrayEncoder:
    """Checked entry point over :func:`string_to_byte_array`.

    With ``strict`` enabled any code point above U+00FF is rejected instead of
    being truncated.
    """

    __slots__ = ("strict",)

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    def encode(self, text: str) -> List[int]:
        text = ensure_text(text)
        if self.strict:
            self._reject_lossy(text)
        return string_to_byte_array(text)

    def encode_bytes(self, text: str) -> bytes:
        return bytes(self.encode(text))

    def inspect(self, text: str) -> ProjectionReport:
        return project_text(ensure_text(text))

    @staticmethod
    def _reject_lossy(text: str) -> None:
        for index, code_point in iter_code_points(text):
            if code_point > _LATIN1_MAX:
                raise LossyProjectionError(index, code_point)


__all__ = ["ByteArrayEncoder", "classify", "project_text", "string_to_byte_array", "string_to_bytes"]
