"""HTTP surface for the PawMap geo engine."""

__version__ = "0.1.0"
