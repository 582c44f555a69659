"""Digit-by-digit hex parser.

Validates every character up front and converts each segment with
positional weighting. This is the production strategy.
"""

from rgbacolor.constants import HEX_BASE, HEX_DIGITS, PARSER_DIGIT
from rgbacolor.errors import ErrorReason, InvalidArgumentError
from rgbacolor.utils.logger import loggerRaise
from .base_parser import BaseHexParser


class DigitHexParser(BaseHexParser):
    """Character-level validation; errors point at the first bad character.

    Reported positions are 1-based within the string after the '#'
    prefix has been stripped, so "#12x456" reports 'x' at position 3.
    """

    def get_name(self) -> str:
        return PARSER_DIGIT

    def get_display_name(self) -> str:
        return "Digit by digit"

    def validate(self, text: str, width: int) -> None:
        for index, char in enumerate(text):
            if char not in HEX_DIGITS:
                loggerRaise(InvalidArgumentError(
                    f"Unexpected hex character '{char}' at position '{index + 1}'",
                    ErrorReason.INVALID_HEX, 'value', char, index + 1))

    def convert_segment(self, segment: str) -> int:
        value = 0
        for index, char in enumerate(segment):
            # Weight of the digit: base ** (digits remaining after it)
            value += HEX_DIGITS.index(char) * HEX_BASE ** (len(segment) - index - 1)
        return value
