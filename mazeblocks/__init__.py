"""Maze generation, block-pushing game logic and scene data for a small 3D puzzle game."""

__version__ = "0.1.0"