"""Generic lists, maps and an on-demand blocking task pool."""

__version__ = "0.1.0"