"""GIMP palette text parser.

Parsing is all-or-nothing: the first malformed data line aborts the parse and no
partial document is returned.
"""

from __future__ import annotations

import re
from typing import List, Optional

from ..config import COMMENT_PREFIX, DEFAULT_COLOR_NAME, GPL_HEADER, METADATA_PREFIXES
from ..errors import InvalidFileError, InvalidFormatError, ParsingError
from ..palette import ColorEntry, PaletteDocument

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int(token: str) -> Optional[int]:
    if _INTEGER_RE.fullmatch(token) is None:
        return None
    return int(token)


def _is_skipped(trimmed: str) -> bool:
    return (
        not trimmed
        or trimmed.startswith(COMMENT_PREFIX)
        or trimmed.startswith(METADATA_PREFIXES)
    )


def parse_gpl_text(text: str) -> PaletteDocument:
    """Parse the content of a GIMP palette file.

    Args:
        text: Complete file content

    Returns
    -------
        PaletteDocument with one entry per data line, in file order

    Raises
    ------
        InvalidFormatError: If the text is empty or lacks the header line
        ParsingError: If a data line does not start with three integers
    """
    # Empty segments are dropped, so blank leading lines never count as the header
    lines = [line for line in text.split("\n") if line]

    if not lines:
        raise InvalidFormatError("The file is empty.")
    if not lines[0].startswith(GPL_HEADER):
        raise InvalidFormatError(f"The file does not start with '{GPL_HEADER}'.")

    entries: List[ColorEntry] = []
    for line in lines[1:]:
        trimmed = line.strip()
        if _is_skipped(trimmed):
            continue

        tokens = [token for token in trimmed.split(" ") if token]
        if len(tokens) < 3:
            raise ParsingError(line)
        red, green, blue = (_parse_int(token) for token in tokens[:3])
        if red is None or green is None or blue is None:
            raise ParsingError(line)

        name = " ".join(tokens[3:])
        if not name:
            name = DEFAULT_COLOR_NAME.format(index=len(entries) + 1)

        entries.append(ColorEntry.from_rgb255(name, red, green, blue))

    return PaletteDocument(entries=tuple(entries))


def read_gpl_file(path: str) -> PaletteDocument:
    """Read a GIMP palette file as UTF-8 and parse it."""
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidFileError(path) from e

    return parse_gpl_text(content)
