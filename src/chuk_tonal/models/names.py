"""
Parsed name models - what the grammars hand to the codec.

These are transient: the parser builds one, the codec encodes it, and it
is dropped. They are never cached or stored.
"""

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from chuk_tonal.core.pitch import Pitch, encode


class ParsedNote(BaseModel):
    """
    A note name split into its parts.

    "Db3" -> step=1, alt=-1, oct=3
    "g#"  -> step=4, alt=1, oct=None
    """

    step: int = Field(..., ge=0, le=6, description="Letter index (C=0 .. B=6)")
    alt: int = Field(0, description="Alteration (negative = flats)")
    oct: int | None = Field(None, description="Scientific octave, None for pitch classes")

    model_config = {"frozen": True}

    def encode(self) -> Pitch | None:
        """Encode as a pitch class (no octave) or note pitch."""
        return encode(self.step, self.alt, self.oct)


class ParsedInterval(BaseModel):
    """
    An interval name split into its parts.

    "-M9" -> num=9, simple=2, quality="M", alt=0, oct=1, dir=-1
    """

    num: int = Field(..., ge=1, description="Interval number (1 = unison)")
    simple: int = Field(..., ge=1, le=7, description="Simple interval number")
    quality: str = Field(..., description="Quality token (P, M, m, A.., d..)")
    alt: int = Field(0, description="Alteration from the perfect/major quality")
    oct: int = Field(0, ge=0, description="Octaves spanned")
    dir: Literal[-1, 1] = Field(1, description="Direction")

    model_config = {"frozen": True}

    @field_validator("quality")
    @classmethod
    def validate_quality(cls, v: str) -> str:
        """Quality must be one of the shorthand tokens."""
        if v in ("P", "M", "m") or re.fullmatch(r"A+|d+", v):
            return v
        raise ValueError(f"Invalid interval quality: {v}")

    def encode(self) -> Pitch | None:
        """Encode as an interval pitch."""
        return encode(self.simple - 1, self.alt, self.oct, self.dir)
