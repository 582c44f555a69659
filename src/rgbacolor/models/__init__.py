"""
RGBA Color - Data Models

This module contains the Color model class.
"""

from .color import Color

__all__ = ['Color']
