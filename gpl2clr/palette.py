"""In-memory color model produced by the GPL parser.

A :class:`PaletteDocument` is built once from a palette file, never modified,
and handed to the color-list writer.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .config import CHANNEL_SCALE, DEFAULT_ALPHA


class ColorEntry(BaseModel):
    """One palette swatch with normalized RGB channels.

    Channels are not clamped: integers outside 0-255 in the source file give
    values outside [0, 1], and the native writer decides what to do with them.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    red: float
    green: float
    blue: float

    @classmethod
    def from_rgb255(cls, name: str, red: int, green: int, blue: int) -> "ColorEntry":
        return cls(
            name=name,
            red=red / CHANNEL_SCALE,
            green=green / CHANNEL_SCALE,
            blue=blue / CHANNEL_SCALE,
        )

    @property
    def alpha(self) -> float:
        return DEFAULT_ALPHA

    def rgb255(self) -> Tuple[int, int, int]:
        """Return the channels as display integers."""
        return (
            round(self.red * CHANNEL_SCALE),
            round(self.green * CHANNEL_SCALE),
            round(self.blue * CHANNEL_SCALE),
        )


class PaletteDocument(BaseModel):
    """Ordered, immutable sequence of colors in file order.

    Entries are never merged, even when names or colors repeat.
    """

    model_config = ConfigDict(frozen=True)

    entries: Tuple[ColorEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ColorEntry]:  # type: ignore[override]
        return iter(self.entries)

    def __getitem__(self, index: int) -> ColorEntry:
        return self.entries[index]

    def names(self) -> List[str]:
        return [entry.name for entry in self.entries]
