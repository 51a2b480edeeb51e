"""Validation of .ber tile maps, with C-style string, memory and formatting helpers."""

__version__ = "0.1.0"
__all__ = ["ctype", "memory", "strings", "output", "textops", "printf", "grid", "validate", "cli"]