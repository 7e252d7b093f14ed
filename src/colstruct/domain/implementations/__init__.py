"""Algorithmic implementations behind the analysis services."""

from .contact_grid import ContactGrid
from .pipeline_stages import (
    MapStage,
    FilterStage,
    OptionalStage,
    FlatMapStage,
    ChainedStage,
)

__all__ = [
    "ContactGrid",
    "MapStage",
    "FilterStage",
    "OptionalStage",
    "FlatMapStage",
    "ChainedStage",
]
