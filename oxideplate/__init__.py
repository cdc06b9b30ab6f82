"""Plate reverb: delay lines, diffusers, damping filters, a stereo tank and a wet/dry effect."""

__version__ = "0.0.1"
__all__ = ["delay", "filters", "plate", "plugin"]