"""Spatial grid inventory: item manifests, stacking, hover highlighting and drag placement."""

__version__ = "0.1.0"