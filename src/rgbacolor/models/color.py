"""
RGBA Color - Color Domain Model

Canonical RGBA color representation for the library.
All conversions between HSV, RGB and hex flow through this class.
"""

import logging
import math
import numbers
from typing import Tuple

import numpy as np

from rgbacolor.constants import (
    ALPHA_MAX, ALPHA_MIN, CHANNEL_MAX, CHANNEL_MIN, DEFAULT_ALPHA,
    DEFAULT_DECIMAL_SEPARATOR, DEFAULT_HEX_INCLUDE_PREFIX, DEFAULT_HEX_UPPERCASE,
    HEX_BASE, HEX_DIGITS, HEX_PREFIX, HSV_MAX, HSV_MIN, HUE_SECTORS,
)
from rgbacolor.errors import ErrorReason, InvalidArgumentError
from rgbacolor.services.hex_parsers import BaseHexParser, get_parser
from rgbacolor.utils.config import get_settings
from rgbacolor.utils.logger import loggerRaise


def _is_number(value) -> bool:
    # bool is an int subclass but never a valid component
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _require_number(value, parameter: str, label: str):
    if not _is_number(value):
        loggerRaise(InvalidArgumentError(
            f"{label} specified must be a number",
            ErrorReason.WRONG_TYPE, parameter, value))


def _require_range(value, low, high, parameter: str, label: str):
    # Written as a negated chained comparison so NaN is rejected too
    if not (low <= value <= high):
        loggerRaise(InvalidArgumentError(
            f"{label} specified can only be between (Inclusive) values {low:g} and {high:g}.",
            ErrorReason.OUT_OF_RANGE, parameter, value))


def _require_channel(value, parameter: str, label: str):
    _require_range(value, CHANNEL_MIN, CHANNEL_MAX, parameter, label)
    if value != math.floor(value):
        loggerRaise(InvalidArgumentError(
            f"{label} specified must be a whole number",
            ErrorReason.OUT_OF_RANGE, parameter, value))


def _to_channel(component: float) -> int:
    """Scale a [0, 1] component to 0-255, rounding halves up."""
    return int(math.floor(component * CHANNEL_MAX + 0.5))


class Color:
    """Mutable RGBA color with uint8 channels and float alpha.

    Internal storage: _r, _g, _b (int 0-255), _a (float 0-1)

    Modifications ONLY through the set_from_* methods. Every setter
    validates all of its arguments before touching any field, so a
    rejected call leaves the color exactly as it was. Setters return
    self for chaining:

        Color().set_from_hsv(0.5, 1, 1).to_hex_string(include_prefix=True)
    """

    _logger = logging.getLogger('Color')

    def __init__(self, r: int = CHANNEL_MIN, g: int = CHANNEL_MIN, b: int = CHANNEL_MIN,
                 a: float = DEFAULT_ALPHA):
        """Construct from RGB uint8 values (0-255), opaque black by default.

        Args:
            r: Red component (0-255)
            g: Green component (0-255)
            b: Blue component (0-255)
            a: Alpha (0-1)

        Raises:
            InvalidArgumentError: Same rules as set_from_rgb()
        """
        self._r = CHANNEL_MIN
        self._g = CHANNEL_MIN
        self._b = CHANNEL_MIN
        self._a = DEFAULT_ALPHA
        self.set_from_rgb(r, g, b, a)

    @property
    def r(self) -> int:
        """Red component (0-255) - READ ONLY"""
        return self._r

    @property
    def g(self) -> int:
        """Green component (0-255) - READ ONLY"""
        return self._g

    @property
    def b(self) -> int:
        """Blue component (0-255) - READ ONLY"""
        return self._b

    @property
    def a(self) -> float:
        """Alpha (0-1) - READ ONLY"""
        return self._a

    # ========================================
    # Setter Methods (validate everything, then commit)
    # ========================================

    def _commit(self, r: int, g: int, b: int, a: float) -> 'Color':
        self._r, self._g, self._b, self._a = r, g, b, float(a)
        return self

    def set_from_hsv(self, h: float, s: float, v: float, a: float = DEFAULT_ALPHA) -> 'Color':
        """Set color from HSV components, each in [0, 1].

        Hue wraps, so h=1 gives the same color as h=0.

        Args:
            h: Hue (0-1)
            s: Saturation (0-1)
            v: Value (0-1)
            a: Alpha (0-1)

        Returns:
            self

        Raises:
            InvalidArgumentError: If any component is not a number or out of range
        """
        _require_number(h, 'h', "Hue")
        _require_number(s, 's', "Saturation")
        _require_number(v, 'v', "Value/Lightness")
        _require_number(a, 'a', "Alpha")

        _require_range(h, HSV_MIN, HSV_MAX, 'h', "Hue")
        _require_range(s, HSV_MIN, HSV_MAX, 's', "Saturation")
        _require_range(v, HSV_MIN, HSV_MAX, 'v', "Value/Lightness")
        _require_range(a, ALPHA_MIN, ALPHA_MAX, 'a', "Alpha")

        scaled = h * HUE_SECTORS
        sector = math.floor(scaled)
        f = scaled - sector
        p = v * (1 - s)
        q = v * (1 - f * s)
        t = v * (1 - (1 - f) * s)

        r, g, b = (
            (v, t, p),
            (q, v, p),
            (p, v, t),
            (p, q, v),
            (t, p, v),
            (v, p, q),
        )[sector % HUE_SECTORS]

        self._commit(_to_channel(r), _to_channel(g), _to_channel(b), a)
        self._logger.debug(f"HSV ({h}, {s}, {v}) -> {self!r}")
        return self

    def set_from_rgb(self, r: int, g: int, b: int, a: float = DEFAULT_ALPHA) -> 'Color':
        """Set color from RGB uint8 values (0-255) and alpha (0-1).

        Whole-number floats such as 12.0 are accepted and stored as int.

        Returns:
            self

        Raises:
            InvalidArgumentError: If any value is not a number or out of range
        """
        _require_number(r, 'r', "Red Value")
        _require_number(g, 'g', "Green Value")
        _require_number(b, 'b', "Blue Value")
        _require_number(a, 'a', "Alpha")

        _require_channel(r, 'r', "Red Value")
        _require_channel(g, 'g', "Green Value")
        _require_channel(b, 'b', "Blue Value")
        _require_range(a, ALPHA_MIN, ALPHA_MAX, 'a', "Alpha")

        return self._commit(int(r), int(g), int(b), a)

    def set_from_hex_string(self, value: str, a: float = DEFAULT_ALPHA, parser=None) -> 'Color':
        """Set color from a hex string: RRGGBB or RGB, optionally prefixed with '#'.

        A 3-character string holds one hex digit per channel, so "f00"
        gives r=15, not 255.

        Args:
            value: Hex color string (case insensitive)
            a: Alpha (0-1)
            parser: Strategy name, BaseHexParser instance, or None for the
                configured default ('digit' unless overridden)

        Returns:
            self

        Raises:
            InvalidArgumentError: On a bad alpha, non-string value, wrong
                length, invalid digit or unknown parser name
        """
        strategy = self._resolve_parser(parser)

        _require_number(a, 'a', "Alpha")
        text = strategy.normalize(value)
        _require_range(a, ALPHA_MIN, ALPHA_MAX, 'a', "Alpha")
        r, g, b = strategy.decode(text)

        return self._commit(r, g, b, a)

    @staticmethod
    def _resolve_parser(parser) -> BaseHexParser:
        if isinstance(parser, BaseHexParser):
            return parser
        if parser is None:
            parser = get_settings().hex_parser
        return get_parser(parser)

    # ========================================
    # Output Methods
    # ========================================

    def to_hex_string(self, include_prefix: bool = DEFAULT_HEX_INCLUDE_PREFIX,
                      uppercase: bool = DEFAULT_HEX_UPPERCASE) -> str:
        """Convert to a 6-digit hex string (alpha is not encoded).

        Args:
            include_prefix: Prepend '#'
            uppercase: Render digits in upper case

        Returns:
            e.g. "FF8000" or "#ff8000"
        """
        digits = "".join(
            HEX_DIGITS[channel // HEX_BASE] + HEX_DIGITS[channel % HEX_BASE]
            for channel in (self._r, self._g, self._b)
        )
        result = (HEX_PREFIX if include_prefix else "") + digits
        return result.upper() if uppercase else result

    def to_decimal_string(self, separator: str = DEFAULT_DECIMAL_SEPARATOR) -> str:
        """Join r, g, b as base-10 text.

        Example:
            Color().set_from_rgb(1, 1, 1).to_decimal_string() == "1, 1, 1"
            Color().set_from_rgb(255, 255, 255).to_decimal_string("|") == "255|255|255"

        Raises:
            InvalidArgumentError: If separator is not a string
        """
        if not isinstance(separator, str):
            loggerRaise(InvalidArgumentError(
                "Separator specified must be a string.",
                ErrorReason.WRONG_TYPE, 'separator', separator))
        return separator.join(str(channel) for channel in (self._r, self._g, self._b))

    def to_rgba(self) -> Tuple[int, int, int, float]:
        """Return (r, g, b, a)."""
        return (self._r, self._g, self._b, self._a)

    def to_float4(self) -> np.ndarray:
        """Convert to normalized float32 RGBA [0-1] for OpenGL/rendering.

        Returns:
            Array of [r, g, b, a] in 0-1 range
        """
        return np.array([self._r / 255.0, self._g / 255.0, self._b / 255.0, self._a],
                        dtype=np.float32)

    def to_qcolor(self):
        """Convert to PyQt5 QColor object (requires the 'qt' extra).

        Returns:
            QColor: Qt color object for UI rendering
        """
        from PyQt5.QtGui import QColor
        return QColor(self._r, self._g, self._b, _to_channel(self._a))

    # ========================================
    # Factory Methods
    # ========================================

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float, a: float = DEFAULT_ALPHA) -> 'Color':
        """Create Color from HSV components (0-1)."""
        return cls().set_from_hsv(h, s, v, a)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int, a: float = DEFAULT_ALPHA) -> 'Color':
        """Create Color from RGB uint8 values and alpha."""
        return cls().set_from_rgb(r, g, b, a)

    @classmethod
    def from_hex(cls, value: str, a: float = DEFAULT_ALPHA, parser=None) -> 'Color':
        """Create Color from a hex string: #RRGGBB, RRGGBB, #RGB or RGB."""
        return cls().set_from_hex_string(value, a, parser)

    # ========================================
    # Equality
    # ========================================

    def __eq__(self, other) -> bool:
        """Test equality based on RGBA values."""
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_rgba() == other.to_rgba()

    # Mutable, so not usable as a dict key
    __hash__ = None

    def __repr__(self) -> str:
        return f"Color({self._r}, {self._g}, {self._b}, {self._a:g})"

    def __str__(self) -> str:
        """String representation - uses hex format."""
        return self.to_hex_string(include_prefix=True)
