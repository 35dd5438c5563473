"""Barnes-Hut galaxy simulation with an interactive 3D point viewer."""

__version__ = "0.1.0"