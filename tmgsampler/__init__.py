"""Exact HMC sampling of truncated Gaussians, with small 3-D linear algebra and XML helpers."""

__version__ = "0.1.0"
__all__ = ["xmlwriter", "eigen", "vector", "matrix", "transforms", "sampler"]