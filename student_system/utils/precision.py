"""
Single-precision narrowing for scores.

Python floats are IEEE-754 doubles. The legacy store keeps 32-bit scores, so
every score crossing into it is rounded to the nearest single-precision value
first. The result is still a Python float, but one that a 32-bit float can
represent exactly.
"""

from __future__ import annotations

import math
import struct

_FLOAT32 = struct.Struct("<f")


def to_single_precision(value: float) -> float:
    """
    Round a double to the nearest IEEE-754 single-precision value.

    Finite values outside the single-precision range become signed infinity.
    NaN and infinities pass through unchanged.
    """
    value = float(value)
    try:
        return _FLOAT32.unpack(_FLOAT32.pack(value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


__all__ = ["to_single_precision"]
