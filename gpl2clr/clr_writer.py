"""Serialize a palette into a macOS color list (.clr) file.

The binary format belongs to AppKit's ``NSColorList``, reached through PyObjC.
AppKit is imported lazily so that parsing and dry runs work on any platform.
"""

from __future__ import annotations

import os
from typing import Optional, Protocol, Sequence

from .errors import FileWritingError
from .palette import ColorEntry, PaletteDocument


class ColorListWriter(Protocol):
    """Anything able to write named colors to a native color list file."""

    def write(self, list_name: str, entries: Sequence[ColorEntry], path: str) -> None:
        ...


class AppKitColorListWriter:
    """Write color lists with ``NSColorList`` (macOS only)."""

    def write(self, list_name: str, entries: Sequence[ColorEntry], path: str) -> None:
        from AppKit import NSColor, NSColorList  # type: ignore
        from Foundation import NSURL  # type: ignore

        color_list = NSColorList.alloc().initWithName_(list_name)
        for entry in entries:
            color = NSColor.colorWithCalibratedRed_green_blue_alpha_(
                entry.red, entry.green, entry.blue, entry.alpha
            )
            # Same key twice replaces the earlier color in the native list
            color_list.setColor_forKey_(color, entry.name)

        url = NSURL.fileURLWithPath_(os.path.abspath(path))
        ok, error = color_list.writeToURL_error_(url, None)
        if not ok:
            raise OSError(f"NSColorList could not be written to {path}: {error}")


def color_list_name(path: str) -> str:
    """Name stored in the color list: the file's base name without extension."""
    return os.path.splitext(os.path.basename(path))[0]


def write_color_list(
    document: PaletteDocument,
    path: str,
    writer: Optional[ColorListWriter] = None,
) -> None:
    """Write ``document`` to ``path`` as a native color list.

    Raises
    ------
        FileWritingError: If the writer fails for any reason
    """
    if writer is None:
        writer = AppKitColorListWriter()
    try:
        writer.write(color_list_name(path), document.entries, path)
    except ImportError:
        # PyObjC not installed
        raise
    except Exception as e:
        raise FileWritingError(path) from e
