"""passpal - statistical analysis of password corpora."""

__version__ = "0.4.0"
