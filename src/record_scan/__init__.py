"""Sequential read-and-display of fixed-length records from an indexed file."""

__version__ = "0.1.0"
