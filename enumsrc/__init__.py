"""Content sources for enum definitions: files, file systems and readable streams."""

__version__ = "0.4.2"
__all__ = ["sources"]