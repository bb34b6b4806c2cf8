"""Per-line printable ASCII character frequency counting, with threaded variants and a command line."""

__version__ = "0.1.0"
__all__ = ["cli", "frequency", "parallel"]