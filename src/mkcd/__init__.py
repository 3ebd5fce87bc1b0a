"""Create a directory (with parents) and print its absolute path."""

__version__ = "0.1.0"
