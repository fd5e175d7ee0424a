"""
Shared utility helpers for filesystem and string handling.
"""

from .filesystem import build_lock, copy_tree, reset_directory, write_text_file
from .text import escape_html, path_formatted, relative_segments, slugify

__all__ = [
    "build_lock",
    "copy_tree",
    "reset_directory",
    "write_text_file",
    "escape_html",
    "path_formatted",
    "relative_segments",
    "slugify",
]
