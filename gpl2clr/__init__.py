"""gpl2clr: convert GIMP palettes (.gpl) to macOS color lists (.clr)."""

__version__ = "0.1.0"
