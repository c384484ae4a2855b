"""Evaluate easing curves over a time grid."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from .easing import EasingFunction, get_easing

Sample = Tuple[float, float]


def sample_curve(
    ease: str | EasingFunction,
    begin: float = 0.0,
    change: float = 1.0,
    duration: float = 1.0,
    steps: int = 20,
) -> List[Sample]:
    """Return ``steps + 1`` evenly spaced ``(time, value)`` pairs.

    The grid always starts at ``0`` and ends exactly at ``duration``.
    """
    if steps < 1:
        raise ValueError(f"steps must be at least 1, got {steps}")
    func = get_easing(ease)
    times = np.linspace(0.0, duration, int(steps) + 1)
    return [(float(t), func(float(t), begin, change, duration)) for t in times]


def midpoint_gap(
    ease: str | EasingFunction,
    begin: float = 0.0,
    change: float = 1.0,
    duration: float = 1.0,
    eps: float = 1e-9,
) -> float:
    """Size of the jump between the two halves of the curve at ``duration / 2``."""
    func = get_easing(ease)
    half = duration / 2
    before = func(half - eps * duration, begin, change, duration)
    after = func(half + eps * duration, begin, change, duration)
    return abs(after - before)


__all__ = ["Sample", "sample_curve", "midpoint_gap"]
