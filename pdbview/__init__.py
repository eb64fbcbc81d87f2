"""Module trees, list filters and selectable index lists for browsing PDB type information."""

__version__ = "0.4.1"