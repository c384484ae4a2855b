"""Off-screen rendering of easing curves with pygame."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import List, Tuple

import pygame

from .easing import EasingFunction
from .sampling import sample_curve

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = (24, 24, 32)
GUIDE_COLOR = (90, 90, 110)
CURVE_COLOR = (255, 170, 60)
MARGIN = 10


def _plot_points(
    values: List[float], size: Tuple[int, int], bounds: Tuple[float, float], margin: int
) -> List[Tuple[int, int]]:
    w, h = size
    lo, hi = bounds
    span = hi - lo or 1.0
    last = max(len(values) - 1, 1)
    points = []
    for i, v in enumerate(values):
        if not math.isfinite(v):
            continue
        x = margin + (w - 2 * margin) * i / last
        y = h - margin - (h - 2 * margin) * (v - lo) / span
        points.append((int(round(x)), int(round(y))))
    return points


def render_curve(
    ease: str | EasingFunction,
    size: Tuple[int, int] = (320, 200),
    begin: float = 0.0,
    change: float = 1.0,
    duration: float = 1.0,
    samples: int = 200,
    color: Tuple[int, int, int] = CURVE_COLOR,
    background: Tuple[int, int, int] = BACKGROUND_COLOR,
    margin: int = MARGIN,
) -> pygame.Surface:
    """Draw ``ease`` on a new surface of ``size``.

    Guide lines mark ``begin`` and ``begin + change``.  The vertical range is
    widened to include any overshoot of the curve.
    """
    w, h = size
    if w <= 0 or h <= 0:
        raise ValueError(f"Invalid preview size {size!r}")
    if samples < 2:
        raise ValueError(f"samples must be at least 2, got {samples}")
    margin = max(0, min(margin, (min(w, h) - 1) // 2))

    values = [v for _, v in sample_curve(ease, begin, change, duration, samples - 1)]
    finite = [v for v in values if math.isfinite(v)]
    lo = min(finite + [begin, begin + change])
    hi = max(finite + [begin, begin + change])

    surf = pygame.Surface((w, h))
    surf.fill(background)
    for level in (begin, begin + change):
        (_, y), = _plot_points([level], size, (lo, hi), margin)
        pygame.draw.line(surf, GUIDE_COLOR, (margin, y), (w - margin, y))

    points = _plot_points(values, size, (lo, hi), margin)
    if len(points) < 2:
        logger.warning("Not enough finite samples to draw %s", getattr(ease, "__name__", ease))
        return surf
    pygame.draw.lines(surf, color, False, points, 2)
    return surf


def save_preview(path: str | Path, ease: str | EasingFunction, **kwargs) -> Path:
    """Render ``ease`` and write the image to ``path``."""
    path = Path(path)
    surf = render_curve(ease, **kwargs)
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        pygame.image.save(surf, str(path))
    except pygame.error as exc:
        raise OSError(f"Cannot save preview to {path}: {exc}") from exc
    logger.info("Saved preview to %s", path)
    return path


__all__ = ["render_curve", "save_preview", "BACKGROUND_COLOR", "GUIDE_COLOR", "CURVE_COLOR"]
