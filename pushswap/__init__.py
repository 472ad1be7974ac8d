"""Two-stack integer sorting with a fixed instruction set, and a checker for instruction sequences."""

__version__ = "1.0.0"