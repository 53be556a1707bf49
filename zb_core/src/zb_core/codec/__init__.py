"""Codec package exports."""
from .encoder import ByteArrayEncoder, classify, project_text, string_to_byte_array, string_to_bytes
from .formats import FORMATS, format_bytes

__all__ = [
    "ByteArrayEncoder",
    "classify",
    "project_text",
    "string_to_byte_array",
    "string_to_bytes",
    "FORMATS",
    "format_bytes",
]
