"""Two-stack integer sorting with a limited set of stack operations."""

__version__ = "1.0.0"
__all__ = ["cli", "parsing", "sorting", "stacks"]