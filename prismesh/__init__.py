from .config import Bounds, MeshConfig  # noqa: F401
from .errors import ConfigurationError, MeshError, TriangulationError  # noqa: F401
from .geometry import Point2, Point3  # noqa: F401
from .region import PlanarRegion  # noqa: F401
from .adapter_triangle import TriangulationResult, triangulate  # noqa: F401
from .mesh import Mesh  # noqa: F401
from .extrude import build_prism  # noqa: F401
from .subdivide import SubdivisionContext, subdivide  # noqa: F401
from .smoothing import classify_faces  # noqa: F401
from .assembly import MeshAssembly, build_mesh  # noqa: F401

__all__ = [
    'Bounds', 'MeshConfig',
    'ConfigurationError', 'MeshError', 'TriangulationError',
    'Point2', 'Point3',
    'PlanarRegion',
    'TriangulationResult', 'triangulate',
    'Mesh', 'build_prism',
    'SubdivisionContext', 'subdivide',
    'classify_faces',
    'MeshAssembly', 'build_mesh',
]
