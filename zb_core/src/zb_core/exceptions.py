from __future__ import annotations

"""Central exception hierarchy"""
class ZbCoreError(Exception):
    """Base exception for all ZB Core failures"""


class InputTypeError(ZbCoreError, TypeError):
    """Raised when a caller hands a non-str value to a checked entry point"""


class LossyProjectionError(ZbCoreError, ValueError):
    """Raised in strict mode when a code point does not fit in one byte"""

    def __init__(self, index: int, code_point: int) -> None:
        self.index = index
        self.code_point = code_point
        super().__init__(
            f"Code point U+{code_point:04X} at index {index} cannot be projected to a byte without loss"
        )


class UnknownFormatError(ZbCoreError, ValueError):
    """Raised when an unsupported output format is requested"""


__all__ = ["ZbCoreError", "InputTypeError", "LossyProjectionError", "UnknownFormatError"]
