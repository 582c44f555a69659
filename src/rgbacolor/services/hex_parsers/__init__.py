"""Hex parser strategy registry.

Each strategy parses the same hex string contract; they differ in how
malformed input is validated and reported.
"""

from rgbacolor.constants import PARSER_DIGIT, PARSER_PAIR
from rgbacolor.errors import ErrorReason, InvalidArgumentError
from rgbacolor.utils.logger import loggerRaise
from .base_parser import BaseHexParser
from .digit_parser import DigitHexParser
from .pair_parser import PairHexParser

# Registry of available parsers
AVAILABLE_PARSERS = {
    PARSER_DIGIT: DigitHexParser,
    PARSER_PAIR: PairHexParser,
}

# Strategies are stateless, so one shared instance per name is enough
_instances = {}


def get_parser(parser_type: str) -> BaseHexParser:
    """Get parser instance by type.

    Args:
        parser_type: Parser type identifier

    Returns:
        Shared parser instance

    Raises:
        InvalidArgumentError: If the name is not a string or no parser is
            registered under it
    """
    if not isinstance(parser_type, str):
        loggerRaise(InvalidArgumentError(
            "Parser specified must be a name or a BaseHexParser",
            ErrorReason.WRONG_TYPE, 'parser', parser_type))
    parser_class = AVAILABLE_PARSERS.get(parser_type)
    if parser_class is None:
        loggerRaise(InvalidArgumentError(
            f"Unknown hex parser '{parser_type}'; expected one of {sorted(AVAILABLE_PARSERS)}",
            ErrorReason.UNKNOWN_PARSER, 'parser', parser_type))
    if parser_type not in _instances:
        _instances[parser_type] = parser_class()
    return _instances[parser_type]


def get_available_parsers():
    """Get list of available parser types.

    Returns:
        List of (name, display_name) tuples
    """
    return [(name, get_parser(name).get_display_name()) for name in AVAILABLE_PARSERS]


__all__ = [
    'AVAILABLE_PARSERS', 'BaseHexParser', 'DigitHexParser', 'PairHexParser',
    'get_parser', 'get_available_parsers',
]
