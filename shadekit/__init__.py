"""Transforms, surface mixing, Disney BSDF lobes and metal IOR tables for 3D rendering."""

__version__ = "0.1.0"

__all__ = [
    "transforms",
    "mix",
    "disney_lobes",
    "metal_ior_a",
    "metal_ior_b",
]