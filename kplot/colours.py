"""Colour configuration for plot elements."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional


class ColourType(Enum):
    """How a colour is specified."""

    DEFAULT = auto()
    PALETTE = auto()
    PATTERN = auto()


@dataclass
class ColourConfig:
    """A colour: a default to be resolved, a palette index or a pattern."""

    type: ColourType = ColourType.DEFAULT
    palette: int = 0
    pattern: Optional[Any] = None

    def init_palette(self, palette: int) -> None:
        """Resolve a default colour to the palette entry ``palette``.

        Palette and pattern colours are left as they are; a pattern colour
        must carry a pattern.
        """
        if self.type is ColourType.DEFAULT:
            self.type = ColourType.PALETTE
            self.palette = palette
        elif self.type is ColourType.PATTERN and self.pattern is None:
            raise ValueError("pattern colour has no pattern")