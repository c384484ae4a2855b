from __future__ import annotations

from typing import Callable, Dict

import numpy as np

EasingFunction = Callable[[float, float, float, float], float]


def ease_in_out_elastic(t: float, b: float, c: float, d: float) -> float:
    """Elastic ease-in/out curve.

    ``t`` is the elapsed time, ``b`` the start value, ``c`` the change in
    value and ``d`` the duration.  A zero ``d`` produces ``nan``/``inf``
    instead of raising.
    """
    t, b, c, d = (np.float64(v) for v in (t, b, c, d))
    if t == 0:
        return float(b)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        t = t / (d / 2)
        if t == 2:
            return float(b + c)
        p = d * (0.3 * 1.5)
        a = c
        # Only true for a negative change since ``a`` starts out equal to ``c``.
        if a < abs(c):
            s = p / 4
        else:
            s = p / (2 * np.pi) * np.arcsin(c / a)
        if t < 1:
            t = t - 1
            return float(
                -0.5 * (a * np.power(2.0, 10 * t) * np.sin((t * d - s) * (2 * np.pi) / p)) + b
            )
        t = t - 1
        return float(
            a * np.power(2.0, -10 * t) * np.sin((t * d - s) * (2 * np.pi) / p) * 0.5 + c + b
        )


EASING_FUNCTIONS: Dict[str, EasingFunction] = {
    "ease-in-out-elastic": ease_in_out_elastic,
}


def get_easing(ease: str | EasingFunction) -> EasingFunction:
    """Return the easing function registered as ``ease``.

    Callables are passed through unchanged.
    """
    if isinstance(ease, str):
        if ease not in EASING_FUNCTIONS:
            raise KeyError(f"Unknown easing '{ease}'")
        return EASING_FUNCTIONS[ease]
    return ease


def normalized(ease: str | EasingFunction) -> Callable[[float], float]:
    """Wrap ``ease`` as a progress curve mapping ``[0, 1]`` onto ``[0, 1]``."""
    func = get_easing(ease)

    def curve(progress: float) -> float:
        return func(progress, 0.0, 1.0, 1.0)

    return curve


__all__ = [
    "EasingFunction",
    "ease_in_out_elastic",
    "EASING_FUNCTIONS",
    "get_easing",
    "normalized",
]
