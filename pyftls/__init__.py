"""An ls-style directory lister with its supporting string, list and formatting helpers."""

__version__ = "0.1.0"