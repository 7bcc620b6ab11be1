"""Exceptions raised by the palette engine."""
from __future__ import annotations


class ColorFormatError(ValueError):
    """Raised when a hex / rgb / hsl value cannot be turned into a colour."""

    def __init__(self, value: object, reason: str = "") -> None:
        self.value = value
        self.reason = reason
        msg = f"Invalid color: {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
