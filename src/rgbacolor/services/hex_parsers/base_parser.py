"""Base class for hex parser strategies.

Each strategy turns a hex color string into an (r, g, b) tuple.
Strategies share prefix handling, length checks and segmentation;
they differ only in how digits are validated and converted, and so in
the position reported for malformed input.
"""

from abc import ABC, abstractmethod
import logging
from typing import List, Tuple

from rgbacolor.constants import HEX_PREFIX, HEX_SEGMENT_COUNT, HEX_VALID_LENGTHS
from rgbacolor.errors import ErrorReason, InvalidArgumentError
from rgbacolor.utils.logger import loggerRaise


class BaseHexParser(ABC):
    """Abstract base class for hex parser strategies.

    Subclasses must implement:
    - get_name(): Return registry identifier (e.g., "digit")
    - get_display_name(): Return human readable name
    - validate(): Reject malformed digits with an InvalidArgumentError
    - convert_segment(): Turn one validated segment into an int
    """

    _logger = logging.getLogger('HexParser')

    @abstractmethod
    def get_name(self) -> str:
        """Return registry identifier for this strategy.

        Returns:
            Name string (e.g., "digit", "pair")
        """
        pass

    @abstractmethod
    def get_display_name(self) -> str:
        """Return display name.

        Returns:
            Display string (e.g., "Digit by digit")
        """
        pass

    @abstractmethod
    def validate(self, text: str, width: int) -> None:
        """Check every digit of a normalized, length-checked string.

        Args:
            text: Lower-case hex string without prefix
            width: Segment width (1 or 2)

        Raises:
            InvalidArgumentError: With reason INVALID_HEX and 1-based position
        """
        pass

    @abstractmethod
    def convert_segment(self, segment: str) -> int:
        """Convert one validated segment to its base-10 value."""
        pass

    # ========================================
    # Shared pipeline
    # ========================================

    def normalize(self, value) -> str:
        """Type-check, lower-case and strip one leading '#'.

        Raises:
            InvalidArgumentError: If value is not a string
        """
        if not isinstance(value, str):
            loggerRaise(InvalidArgumentError(
                "String specified must be a string",
                ErrorReason.WRONG_TYPE, 'value', value))
        text = value.lower()
        if text.startswith(HEX_PREFIX):
            text = text[len(HEX_PREFIX):]
        return text

    def decode(self, text: str) -> Tuple[int, int, int]:
        """Decode an already normalized string into (r, g, b).

        Raises:
            InvalidArgumentError: On wrong length or invalid hex digits
        """
        if len(text) not in HEX_VALID_LENGTHS:
            loggerRaise(InvalidArgumentError(
                "String specified must be made of 6 hex values (RRGGBB) or 3 hex values (RGB)",
                ErrorReason.WRONG_LENGTH, 'value', text))

        width = len(text) // HEX_SEGMENT_COUNT
        self.validate(text, width)

        r, g, b = (self.convert_segment(segment) for segment in self.split_segments(text, width))
        self._logger.debug(f"{self.get_name()}: '{text}' -> ({r}, {g}, {b})")
        return r, g, b

    def parse(self, value) -> Tuple[int, int, int]:
        """Normalize and decode in one step."""
        return self.decode(self.normalize(value))

    @staticmethod
    def split_segments(text: str, width: int) -> List[str]:
        """Split into red, green and blue segments of equal width."""
        return [text[i * width:(i + 1) * width] for i in range(HEX_SEGMENT_COUNT)]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
