"""Configuration schema and validation for idgraph."""

from .schema import GraphConfig

__all__ = [
    "GraphConfig",
]
