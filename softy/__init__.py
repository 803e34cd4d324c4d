"""A small software renderer with its own vector, matrix and transform math."""

__version__ = "0.1.0"

__all__ = [
    "app",
    "buffer",
    "camera",
    "color",
    "events",
    "material",
    "mathutil",
    "matrix",
    "mesh",
    "pipeline",
    "property",
    "rasterizer",
    "shader",
    "transform",
    "vector",
    "vertex",
]