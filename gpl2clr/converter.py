"""Conversion driver: GPL file in, macOS color list out.

Each failure is reported as a single printed line and the function returns
``None``; nothing is raised to the caller.
"""

from __future__ import annotations

from typing import Optional

from .clr_writer import ColorListWriter, write_color_list
from .errors import GPLConversionError
from .install import install_palette_to_library
from .parser import read_gpl_file
from .paths import derive_output_path, get_color_library_dir, validate_output_path
from .verbose_utils import get_verbose_logger

DRY_RUN_MESSAGE = "Dry run: Conversion completed without creating files."


def convert_gpl_to_clr(
    gpl_path: str,
    clr_path: Optional[str] = None,
    install: bool = False,
    verbose: bool = False,
    dry_run: bool = False,
    writer: Optional[ColorListWriter] = None,
    library_dir: Optional[str] = None,
) -> Optional[str]:
    """Convert a GIMP palette file into a macOS ``.clr`` color list.

    Parameters
    ----------
    gpl_path : str
        Path to the input ``.gpl`` file.
    clr_path : str, optional
        Output path. ``.clr`` is appended when missing. Defaults to the input
        path with its extension replaced by ``.clr``.
    install : bool
        Copy the written file into the color library directory.
    verbose : bool
        Print step-by-step progress to stdout.
    dry_run : bool
        Parse only. No file is created or installed.
    writer : ColorListWriter, optional
        Native serializer. Defaults to the AppKit writer.
    library_dir : str, optional
        Color library directory used by ``install``. Defaults to
        ``~/Library/Colors``.

    Returns
    -------
    str or None
        Path of the written color list, or ``None`` for a dry run or a failure.
    """
    logger = get_verbose_logger(__name__, verbose)

    try:
        logger.info(f"Parsing GPL file: {gpl_path}")
        document = read_gpl_file(gpl_path)

        logger.info("Parsed colors:")
        for entry in document:
            red, green, blue = entry.rgb255()
            logger.info(f"- {entry.name}: R{red}, G{green}, B{blue}")

        if dry_run:
            print(DRY_RUN_MESSAGE)
            return None

        output_path = validate_output_path(derive_output_path(gpl_path, clr_path))

        logger.info(f"Creating CLR file: {output_path}")
        write_color_list(document, output_path, writer=writer)
        print(f"Color list created: {output_path}")

        if install:
            if library_dir is None:
                library_dir = get_color_library_dir()
            logger.info(f"Installing palette to {library_dir}")
            destination = install_palette_to_library(output_path, library_dir, logger)
            print(f"Installed palette to {destination}")

        return output_path

    except GPLConversionError as e:
        print(e)
    except Exception as e:
        print(f"An unexpected error occurred: {e}")
    return None
