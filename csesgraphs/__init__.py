"""Grid and graph algorithms for classic programming problems, with a small command line solver."""

__version__ = "0.1.0"

__all__ = ["__version__"]