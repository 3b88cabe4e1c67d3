"""Console chat client with user accounts kept in text and binary files."""

__version__ = "0.1.0"
__all__ = ["__version__"]