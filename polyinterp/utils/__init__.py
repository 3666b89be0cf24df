"""Shared helpers."""

from .formatting import format_number, round_significant

__all__ = ["format_number", "round_significant"]
