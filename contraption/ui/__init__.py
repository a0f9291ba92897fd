"""Rendering package for energized contraptions."""

from .layout import BoardGeometry, compute_geometry
from .toolkit import ContraptionUI, ensure_pygame, render_to_file

__all__ = [
    "BoardGeometry",
    "ContraptionUI",
    "compute_geometry",
    "ensure_pygame",
    "render_to_file",
]
