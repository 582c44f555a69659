"""
RGBA Color - color representation and conversion

Public API: Color, InvalidArgumentError, ErrorReason and the hex parser
registry. The models/, services/ and utils/ subpackages hold the
implementation.
"""

from .errors import ErrorReason, InvalidArgumentError
from .models.color import Color
from .services.hex_parsers import get_available_parsers, get_parser

__version__ = "1.0.0"

__all__ = [
    'Color', 'ErrorReason', 'InvalidArgumentError',
    'get_parser', 'get_available_parsers',
]
