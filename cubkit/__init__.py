"""Text, byte-buffer, linked-list, colour-name and XPM pixmap helpers."""

__version__ = "0.1.0"
__all__ = [
    "ascii",
    "colors",
    "cstring",
    "linked_list",
    "memory",
    "output",
    "wordtab",
    "xpm",
]