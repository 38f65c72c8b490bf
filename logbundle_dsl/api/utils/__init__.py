"""Utility functions for code generation."""

from .formatters import encode_special_chars, formatting_string, java_string_literal

__all__ = [
    "encode_special_chars",
    "formatting_string",
    "java_string_literal",
]
