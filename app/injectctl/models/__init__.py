"""Data models for injectctl.

This module exports the injection types and profile models.
"""

from injectctl.models.injection import (
    PLACEHOLDER,
    InjectionType,
    InjectorProfile,
    PatternPair,
    fill_pattern,
    fill_replacement,
)

__all__ = [
    "PLACEHOLDER",
    "InjectionType",
    "InjectorProfile",
    "PatternPair",
    "fill_pattern",
    "fill_replacement",
]
