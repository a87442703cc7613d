"""Classic beginner programming exercises as reusable functions and small command-line tools."""

__version__ = "0.1.0"
__all__ = ["basics", "numtheory", "patterns", "matrix", "calculator"]