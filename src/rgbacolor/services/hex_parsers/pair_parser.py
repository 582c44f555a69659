"""Pair lookup hex parser.

Validates each channel segment as a whole against a precomputed table
and uses the table index as the channel value.
"""

from rgbacolor.constants import HEX_BYTE_PAIRS, HEX_SINGLE_DIGITS, PARSER_PAIR
from rgbacolor.errors import ErrorReason, InvalidArgumentError
from rgbacolor.utils.logger import loggerRaise
from .base_parser import BaseHexParser

# Segment width -> lookup table
_TABLES = {
    1: HEX_SINGLE_DIGITS,
    2: HEX_BYTE_PAIRS,
}


class PairHexParser(BaseHexParser):
    """Segment-level validation; errors point at the first bad segment.

    A 6-character string is checked against the 256 two-digit byte
    strings, a 3-character one against the 16 single digits. The
    reported position is where the segment starts (1, 1 + w, 1 + 2w for
    segment width w), 1-based after the '#' prefix has been stripped.
    """

    def get_name(self) -> str:
        return PARSER_PAIR

    def get_display_name(self) -> str:
        return "Pair lookup"

    def validate(self, text: str, width: int) -> None:
        table = _TABLES[width]
        position = 0
        for segment in self.split_segments(text, width):
            if segment not in table:
                loggerRaise(InvalidArgumentError(
                    f"Unexpected hex '{segment}' at position '{position + 1}'",
                    ErrorReason.INVALID_HEX, 'value', segment, position + 1))
            position += width

    def convert_segment(self, segment: str) -> int:
        return _TABLES[len(segment)].index(segment)
