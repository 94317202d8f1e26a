"""Exceptions raised while constructing or converting colors."""
from __future__ import annotations
from typing import Optional


class ColorError(ValueError):
    """Base class for every failure raised by colorkit."""


class InvalidFormat(ColorError):
    """A hex string has a length other than 3 or 6, or a packed integer uses an unknown base."""

    def __init__(self, message: str, text: Optional[str] = None):
        self.text = text
        self.length = len(text) if text is not None else None
        super().__init__(message)


class InvalidDigit(ColorError):
    """A hex string contains a character outside ``0-9a-fA-F``."""

    def __init__(self, text: str, position: int):
        self.text = text
        self.position = position
        self.char = text[position]
        super().__init__(
            f"HEX is invalid: {text!r} has non-hex character {self.char!r} at position {position}"
        )


class InvalidNumericInput(ColorError):
    """NaN was passed to a strict HSV channel."""

    def __init__(self, channel: str):
        self.channel = channel
        super().__init__(f"HSV channel {channel!r} must not be NaN")


class NonFiniteHue(ColorError):
    """An infinite hue was passed. Saturation and value clamp instead."""

    def __init__(self, hue: float):
        self.hue = hue
        super().__init__(f"h must be finite, got {hue}")


class UnsupportedDepth(ColorError):
    """A channel width, or the scale factor between two widths, is not supported."""
