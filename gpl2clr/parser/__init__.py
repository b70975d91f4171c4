"""Parser module for GIMP palette (.gpl) files.

This module turns palette text into a :class:`~gpl2clr.palette.PaletteDocument`:
- ``parse_gpl_text`` parses text already in memory
- ``read_gpl_file`` reads a file from disk and parses it
"""

from .gpl import parse_gpl_text, read_gpl_file

__all__ = [
    "parse_gpl_text",
    "read_gpl_file",
]
