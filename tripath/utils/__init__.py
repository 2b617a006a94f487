"""Utility exports."""

from .maps import PATH_MARKS, ascii_grid_map

__all__ = ["PATH_MARKS", "ascii_grid_map"]
