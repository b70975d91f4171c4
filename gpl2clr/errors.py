"""Error types raised while converting a GIMP palette to a color list.

``str()`` of every error is the one-line diagnostic shown to the user.
"""

from __future__ import annotations


class GPLConversionError(Exception):
    """Base error for a single conversion attempt."""


class InvalidFileError(GPLConversionError):
    """Raised when the GPL file cannot be read or decoded."""

    def __init__(self, path: str = "") -> None:
        self.path = path
        super().__init__("Error: Invalid GPL file or unable to read file.")


class InvalidFormatError(GPLConversionError):
    """Raised when the file is empty or lacks the 'GIMP Palette' header."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Error: Invalid GPL file format. Reason: {reason}")


class ParsingError(GPLConversionError):
    """Raised when a data line does not start with three integers."""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(
            "Error: Unable to parse color data from the GPL file. "
            f"Invalid line: {line}"
        )


class FileCreationError(GPLConversionError):
    """Raised when the output directory is missing or not writable."""

    def __init__(self, directory: str = "") -> None:
        self.directory = directory
        super().__init__(
            "Error: Unable to create the CLR file. Check output directory permissions."
        )


class FileWritingError(GPLConversionError):
    """Raised when the color list cannot be serialized to disk."""

    def __init__(self, path: str = "") -> None:
        self.path = path
        super().__init__("Error: Unable to write to the CLR file.")


class ArgumentError(Exception):
    """Base error for command-line argument problems."""


class MissingGPLPathError(ArgumentError):
    def __init__(self) -> None:
        super().__init__("Error: Missing GPL file path.")


class UnrecognizedOptionError(ArgumentError):
    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"Error: Unrecognized option '{option}'.")
