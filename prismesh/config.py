from __future__ import annotations
import dataclasses
import math
import numbers
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Sequence, Tuple

from .errors import ConfigurationError

XY = Tuple[float, float]

DEFAULT_LEVEL = 1
DEFAULT_HEIGHT = 1.0
DEFAULT_HOLE_RADIUS = 0.0
DEFAULT_STEINER_POINTS = 0

EPSILON = 0.001
MIN_POINT_DISTANCE = 100 * EPSILON  # consecutive exterior points closer than this are merged
CIRCLE_HOLE_POINTS = 200
STEINER_RADIUS_DIVISOR = 8.0
SMOOTHING_THRESHOLD = 0.99
LOOKUP_DIGITS = 12  # rounding used to match triangulator output back to input points


class Bounds(NamedTuple):
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> XY:
        return (0.5 * (self.min_x + self.max_x), 0.5 * (self.min_y + self.max_y))


@dataclass(frozen=True)
class MeshConfig:
    """Parameters of one full mesh build.

    ``holes`` and a positive ``hole_radius`` are mutually exclusive. When neither
    is given, ``steiner_points`` seed points are placed inside the region.
    """

    level: int = DEFAULT_LEVEL
    height: float = DEFAULT_HEIGHT
    hole_radius: float = DEFAULT_HOLE_RADIUS
    holes: Optional[Sequence[Sequence[XY]]] = None
    bounds: Optional[Bounds] = None
    steiner_points: int = DEFAULT_STEINER_POINTS

    def validate(self) -> "MeshConfig":
        if isinstance(self.level, bool) or not isinstance(self.level, numbers.Integral):
            raise ConfigurationError(f"level must be an integer, got {self.level!r}")
        if self.level < 0:
            raise ConfigurationError(f"level must be >= 0, got {self.level}")
        if not math.isfinite(self.height) or self.height <= 0.0:
            raise ConfigurationError(f"height must be finite and positive, got {self.height}")
        if not math.isfinite(self.hole_radius) or self.hole_radius < 0.0:
            raise ConfigurationError(f"hole_radius must be finite and >= 0, got {self.hole_radius}")
        if self.holes is not None and self.hole_radius > 0.0:
            raise ConfigurationError("explicit holes cannot be combined with a positive hole_radius")
        if isinstance(self.steiner_points, bool) or not isinstance(self.steiner_points, numbers.Integral):
            raise ConfigurationError(f"steiner_points must be an integer, got {self.steiner_points!r}")
        if self.steiner_points < 0:
            raise ConfigurationError(f"steiner_points must be >= 0, got {self.steiner_points}")
        if self.bounds is not None:
            bounds = Bounds(*self.bounds)
            if not all(math.isfinite(v) for v in bounds) or bounds.width <= 0.0 or bounds.height <= 0.0:
                raise ConfigurationError(f"bounds must have a positive extent, got {tuple(bounds)}")
        return self

    def replace(self, **changes) -> "MeshConfig":
        return dataclasses.replace(self, **changes)

    def hole_rings(self) -> Optional[List[List[XY]]]:
        if self.holes is None:
            return None
        return [[(float(x), float(y)) for x, y in ring] for ring in self.holes]
