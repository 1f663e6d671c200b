"""Extract and merge grammar productions across SQL dialect hierarchies."""

__version__ = "0.1.0"
