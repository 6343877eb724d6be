"""A grid-based tactics battlefield with units, weapons and an animated tile map."""

__version__ = "0.1.0"