"""Robot Grid API: robots and items on a 2D grid, served over HTTP."""

__version__ = "1.0.0"
