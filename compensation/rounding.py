"""Rounding shared by the calculators and market insights."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going toward positive infinity.

    Raises ``ValueError`` for infinite or NaN values, which arise when
    absurdly large inputs overflow the multiplication pipeline.
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot round non-finite compensation value {value!r}")
    return int(math.floor(value + 0.5))
