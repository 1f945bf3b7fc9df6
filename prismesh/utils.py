from __future__ import annotations
import logging
import time
from functools import wraps
from typing import Dict, Iterable, Tuple

from .config import LOOKUP_DIGITS

logger = logging.getLogger(__name__)


def timed(func):
    """Log the wall time of ``func`` at DEBUG level."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        t0 = time.perf_counter()
        result = func(*args, **kwargs)
        logger.debug("Elapsed time: %.3f s for %s", time.perf_counter() - t0, func.__name__)
        return result

    return wrapper


def point_key(x: float, y: float, ndp: int = LOOKUP_DIGITS) -> Tuple[float, float]:
    return (round(float(x), ndp), round(float(y), ndp))


def build_point_lookup(points: Iterable, ndp: int = LOOKUP_DIGITS) -> Dict[Tuple[float, float], int]:
    """Map rounded (x,y) -> index of the first point with those coordinates."""
    lut: Dict[Tuple[float, float], int] = {}
    for i, (x, y) in enumerate(points):
        lut.setdefault(point_key(x, y, ndp), i)
    return lut
