"""Half-up rounding shared by every price, percent and ratio in scanquote.

``round()`` rounds exact halves to the even neighbour (``round(3.125, 2)``
is ``3.12``).  Quotes round halves away from zero on the positive side, so
a multiplier of ``100 / 32`` is ``3.13``.
"""

from __future__ import annotations

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round *value* to *digits* decimals with halves rounded up.

    Computed as ``floor(value * 10**digits + 0.5) / 10**digits``, so a
    negative half moves toward positive infinity (``-2.5`` becomes ``-2.0``).
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot round non-finite value: {value}")
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale
