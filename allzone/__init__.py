"""Property listing store for the All Zone Corporate Services site."""

__version__ = "0.1.0"
