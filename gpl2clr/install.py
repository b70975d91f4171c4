"""Install a color list into the user's color library directory."""

from __future__ import annotations

import logging
import os
import shutil
from typing import Optional


def install_palette_to_library(
    clr_path: str, library_dir: str, logger: Optional[logging.Logger] = None
) -> str:
    """Copy ``clr_path`` into ``library_dir`` and return the destination path.

    The library directory is created when missing. An existing file with the same
    name is left untouched and ``FileExistsError`` is raised.
    """
    logger = logger or logging.getLogger(__name__)

    if not os.path.isdir(library_dir):
        logger.info(f"Creating color library directory: {library_dir}")
        os.makedirs(library_dir, exist_ok=True)

    destination = os.path.join(library_dir, os.path.basename(clr_path))
    if os.path.exists(destination):
        raise FileExistsError(f"Color list already installed: {destination}")

    shutil.copyfile(clr_path, destination)
    return destination
