class MeshError(Exception):
    """Base class for errors raised while building a prism mesh."""


class ConfigurationError(MeshError, ValueError):
    """Rejected build parameters, raised before any geometry work."""


class TriangulationError(MeshError, RuntimeError):
    """The triangulator returned a result that cannot be mapped onto the region."""
