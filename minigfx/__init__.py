"""RGBA images, depth-sorted render queues, XPM42 textures, printf-style formatting and line reading."""

__version__ = "0.1.0"
__all__ = ["context", "errors", "image", "keys", "linereader", "printf", "util", "xpm42"]