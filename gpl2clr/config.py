"""Configuration constants for gpl2clr.

The tool has no configuration file; everything it needs is defined here.
"""

import os

# First line of every GIMP palette file must start with this token
GPL_HEADER = "GIMP Palette"

# Body lines starting with any of these prefixes are ignored
COMMENT_PREFIX = "#"
METADATA_PREFIXES = ("Name:", "Columns:")

# Channel integers are divided by this value to get normalized floats
CHANNEL_SCALE = 255.0

# Alpha written for every color in the native list
DEFAULT_ALPHA = 1.0

CLR_EXTENSION = ".clr"

# Per-user directory scanned by the macOS color picker, relative to home
COLOR_LIBRARY_SUBDIR = os.path.join("Library", "Colors")

# Name synthesized for data lines without a name, filled with the 1-based ordinal
DEFAULT_COLOR_NAME = "Color {index}"
