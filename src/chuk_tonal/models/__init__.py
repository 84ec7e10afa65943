"""
Pydantic models for parsed names.

This module provides:
- ParsedNote: step/alteration/octave of a note name
- ParsedInterval: number/quality/direction of an interval name
"""

from chuk_tonal.models.names import ParsedInterval, ParsedNote

__all__ = [
    "ParsedInterval",
    "ParsedNote",
]
