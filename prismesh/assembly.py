"""
Full build: region -> triangulation -> prism -> subdivision levels -> smoothing groups.
"""
from __future__ import annotations
import logging
import math
from typing import Optional, Sequence

from .adapter_triangle import triangulate
from .config import XY, MeshConfig
from .extrude import build_prism
from .mesh import Mesh
from .region import PlanarRegion
from .smoothing import classify_faces
from .subdivide import SubdivisionContext, subdivide
from .utils import timed

logger = logging.getLogger(__name__)


def atlas_size(tex_coords_len: int):
    """Approximate square layout for a flat texcoord buffer of the given length."""
    width = max(int(math.sqrt(tex_coords_len)), 1)
    return width, tex_coords_len // width


@timed
def build_mesh(exterior: Sequence[XY], config: Optional[MeshConfig] = None) -> Mesh:
    """Build the closed, subdivided prism for ``exterior`` from scratch."""
    config = (config or MeshConfig()).validate()

    region = PlanarRegion.from_config(exterior, config)
    mesh = build_prism(triangulate(region), config.height, region.bounds)

    ctx = SubdivisionContext.for_mesh(mesh)
    for _ in range(config.level):
        mesh = subdivide(mesh, ctx)

    mesh.smoothing_groups = classify_faces(mesh)
    mesh.area_size = (region.bounds.width, region.bounds.height)
    mesh.atlas_size = atlas_size(len(mesh.tex_coords_flat))
    logger.info(
        "Built level %d mesh: %d vertices, %d texcoords, %d faces",
        mesh.level, mesh.num_vertices, mesh.num_tex_coords, mesh.num_faces,
    )
    return mesh


class MeshAssembly:
    """Holds an exterior ring and its current configuration.

    Nothing is rebuilt implicitly; ``configure`` and ``build`` return a freshly
    built mesh every time.
    """

    def __init__(self, exterior: Sequence[XY], config: Optional[MeshConfig] = None):
        self.exterior = [(float(x), float(y)) for x, y in exterior]
        self.config = (config or MeshConfig()).validate()

    def configure(self, **changes) -> Mesh:
        config = self.config.replace(**changes).validate()
        self.config = config
        return build_mesh(self.exterior, config)

    def build(self) -> Mesh:
        return build_mesh(self.exterior, self.config)
