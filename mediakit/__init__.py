"""A film library with authors, users and country restrictions, and matrix images that can be enlarged and rotated."""

__version__ = "0.1.0"