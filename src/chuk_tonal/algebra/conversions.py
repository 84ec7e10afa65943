"""
Conversions between names and encoded pitches.

Every operation accepts either an encoded pitch or a name. The decorators
here make that uniform: a name is parsed, the operation runs on the
encoded form, and a pitch result is rendered back to a name. Encoded
input gives encoded output.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from chuk_tonal.core.pitch import (
    Pitch,
    is_interval_pitch,
    is_pitch,
    is_pitch_not_interval,
)
from chuk_tonal.core.render import str_ivl, str_note, str_pitch
from chuk_tonal.notation.parser import parse_interval, parse_note, parse_pitch

Parse = Callable[[object], Pitch | None]
Accepts = Callable[[object], bool]


def _notation(parse: Parse, accepts: Accepts) -> Callable[[object], Pitch | None]:
    def convert(value: object) -> Pitch | None:
        if is_pitch(value):
            return value if accepts(value) else None  # type: ignore[return-value]
        return parse(value)

    return convert


def _render(render: Callable[[object], str | None]) -> Callable[[Any], Any]:
    def convert(value: Any) -> Any:
        return render(value) if is_pitch(value) else value

    return convert


as_note = _notation(parse_note, is_pitch_not_interval)
as_interval = _notation(parse_interval, is_interval_pitch)
as_pitch = _notation(parse_pitch, is_pitch)

to_note_str = _render(str_note)
to_interval_str = _render(str_ivl)
to_pitch_str = _render(str_pitch)


def pitch_op(
    convert: Callable[[object], Pitch | None], render: Callable[[Any], Any]
) -> Callable[[Callable[[Any], Any]], Callable[[Any], Any]]:
    """
    Build a decorator that lifts a function on pitches to names.

    Args:
        convert: Turns the argument into a pitch (or None)
        render: Turns a pitch result back into a name

    Returns:
        A decorator. The decorated function returns None when the argument
        cannot be converted.
    """

    def decorator(fn: Callable[[Any], Any]) -> Callable[[Any], Any]:
        @wraps(fn)
        def wrapper(value: Any) -> Any:
            p = convert(value)
            if p is None:
                return None
            result = fn(p)
            return result if is_pitch(value) else render(result)

        return wrapper

    return decorator


note_fn = pitch_op(as_note, to_note_str)
interval_fn = pitch_op(as_interval, to_interval_str)
pitch_fn = pitch_op(as_pitch, to_pitch_str)
