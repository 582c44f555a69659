"""
RGBA Color - Error Types

InvalidArgumentError is the single error kind raised by the library.
It carries a reason code plus the offending parameter, value and
(for hex input) 1-based position so callers can react without parsing
the message.
"""

from enum import Enum
from typing import Any, Optional


class ErrorReason(Enum):
    """Why an argument was rejected"""
    WRONG_TYPE = 'wrong_type'
    OUT_OF_RANGE = 'out_of_range'
    WRONG_LENGTH = 'wrong_length'
    INVALID_HEX = 'invalid_hex'
    UNKNOWN_PARSER = 'unknown_parser'
    INVALID_CONFIG = 'invalid_config'


class InvalidArgumentError(ValueError):
    """Raised whenever an invalid argument is passed to a Color operation.

    Attributes:
        message: Human-readable description
        reason: ErrorReason code
        parameter: Name of the failing argument
        value: Offending value, character or segment
        position: 1-based position within a hex string, None otherwise
    """

    def __init__(self, message: str, reason: ErrorReason, parameter: str,
                 value: Any = None, position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.reason = reason
        self.parameter = parameter
        self.value = value
        self.position = position

    def __repr__(self) -> str:
        return (f"InvalidArgumentError({self.message!r}, reason={self.reason.name}, "
                f"parameter={self.parameter!r}, position={self.position})")
