"""Output path helpers and the color library location."""

from __future__ import annotations

import os
from typing import Optional

from .config import CLR_EXTENSION, COLOR_LIBRARY_SUBDIR
from .errors import FileCreationError


def normalize_clr_path(path: str) -> str:
    """Append the ``.clr`` extension unless the path already ends with it."""
    return path if path.endswith(CLR_EXTENSION) else path + CLR_EXTENSION


def derive_output_path(gpl_path: str, clr_path: Optional[str] = None) -> str:
    """Return the color list path for a conversion.

    An explicit, non-empty ``clr_path`` wins. Otherwise the input extension is
    replaced by ``.clr`` next to the input file.
    """
    if clr_path:
        return normalize_clr_path(clr_path)
    base, _ = os.path.splitext(os.path.abspath(gpl_path))
    return base + CLR_EXTENSION


def validate_output_path(path: str) -> str:
    """Check that the directory receiving ``path`` exists and is writable."""
    directory = os.path.dirname(os.path.abspath(path))
    if not os.path.isdir(directory) or not os.access(directory, os.W_OK):
        raise FileCreationError(directory)
    return path


def get_color_library_dir(home: Optional[str] = None) -> str:
    """Return ``~/Library/Colors`` for ``home`` (default: the current user)."""
    if home is None:
        home = os.path.expanduser("~")
    return os.path.join(home, COLOR_LIBRARY_SUBDIR)
