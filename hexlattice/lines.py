from __future__ import annotations

from .hex import Hex

# Keeps sample points off cell edges and vertices; zero-sum preserving.
_NUDGE_Q = 1e-6
_NUDGE_R = 1e-6


def lerp(a: Hex, b: Hex, t: float) -> Hex:
    """Linear interpolation between ``a`` and ``b`` with step ``t``."""

    return a.lerp(b, t)


def line_draw(a: Hex, b: Hex) -> list[Hex]:
    """Return the ``distance(a, b) + 1`` cells on the straight line from ``a`` to ``b``."""

    n = int(a.distance(b))
    a_nudge = Hex(a.q + _NUDGE_Q, a.r + _NUDGE_R, config=a.config, context=a.context)
    b_nudge = Hex(b.q + _NUDGE_Q, b.r + _NUDGE_R, config=a.config, context=a.context)
    steps = max(n, 1)
    return [a_nudge.lerp(b_nudge, i / steps).round() for i in range(n + 1)]
