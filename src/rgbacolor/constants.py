"""
RGBA Color - Constants and Configuration

This module contains all constant values used throughout the library:
- Channel and alpha bounds
- Hex digit alphabet and lookup tables
- Formatter defaults
- Parser strategy defaults
- Config file locations
"""

import os

# ======================================================================
# CHANNEL BOUNDS
# ======================================================================
# Red, green and blue are 8-bit intensities; alpha is opacity in [0, 1]

CHANNEL_MIN = 0
CHANNEL_MAX = 255
ALPHA_MIN = 0.0
ALPHA_MAX = 1.0
DEFAULT_ALPHA = 1.0

# HSV components are all normalized
HSV_MIN = 0.0
HSV_MAX = 1.0

# Number of hue sectors used by the HSV -> RGB conversion
HUE_SECTORS = 6

# ======================================================================
# HEX LOOKUP TABLES
# ======================================================================
# Immutable tables shared by the formatter and both parser strategies

HEX_DIGITS = tuple("0123456789abcdef")
HEX_BASE = len(HEX_DIGITS)

# Single-digit segments (3-character input) map directly to 0-15
HEX_SINGLE_DIGITS = HEX_DIGITS

# Every two-digit byte string "00".."ff"; index == value
HEX_BYTE_PAIRS = tuple(high + low for high in HEX_DIGITS for low in HEX_DIGITS)

# Accepted hex string lengths (after stripping the prefix)
HEX_SHORT_LENGTH = 3
HEX_LONG_LENGTH = 6
HEX_VALID_LENGTHS = (HEX_SHORT_LENGTH, HEX_LONG_LENGTH)
HEX_SEGMENT_COUNT = 3

HEX_PREFIX = "#"

# ======================================================================
# FORMATTER DEFAULTS
# ======================================================================

DEFAULT_DECIMAL_SEPARATOR = ", "
DEFAULT_HEX_INCLUDE_PREFIX = False
DEFAULT_HEX_UPPERCASE = True

# ======================================================================
# PARSER STRATEGIES
# ======================================================================
# 'digit' validates character by character; 'pair' validates whole segments

PARSER_DIGIT = 'digit'
PARSER_PAIR = 'pair'
DEFAULT_HEX_PARSER = PARSER_DIGIT

# Default number of iterations per sample for the parser benchmark
BENCHMARK_DEFAULT_REPEAT = 1000

# ======================================================================
# CONFIG FILE
# ======================================================================

CONFIG_ENV_VAR = 'RGBACOLOR_CONFIG'
CONFIG_DIR = os.path.join(os.path.expanduser('~'), '.rgbacolor')
CONFIG_FILE = os.path.join(CONFIG_DIR, 'config.json')
