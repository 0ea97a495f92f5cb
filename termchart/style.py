from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import re
from typing import Union

from termchart.errors import ChartConfigError

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


class Color(Enum):
    """Terminal palette colors; values are the SGR foreground codes."""

    RESET = 39
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    GRAY = 37
    DARK_GRAY = 90
    LIGHT_RED = 91
    LIGHT_GREEN = 92
    LIGHT_YELLOW = 93
    LIGHT_BLUE = 94
    LIGHT_MAGENTA = 95
    LIGHT_CYAN = 96
    WHITE = 97


@dataclass(frozen=True)
class Rgb:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not isinstance(channel, int) or channel < 0 or channel > 255:
                raise ChartConfigError("rgb channels must be integers in [0, 255]")

    @classmethod
    def from_hex(cls, value: str) -> "Rgb":
        if not _HEX_COLOR.match(value):
            raise ChartConfigError(f"hex color must be #RRGGBB, got {value!r}")
        return cls(r=int(value[1:3], 16), g=int(value[3:5], 16), b=int(value[5:7], 16))


ColorLike = Union[Color, Rgb]


def parse_color(value: object) -> ColorLike:
    """Resolve a palette name, `#RRGGBB` string, `Color` or `Rgb` into a color."""

    if isinstance(value, (Color, Rgb)):
        return value
    if isinstance(value, str):
        raw = value.strip()
        if raw.startswith("#"):
            return Rgb.from_hex(raw)
        key = raw.upper().replace("-", "_").replace(" ", "_")
        try:
            return Color[key]
        except KeyError:
            raise ChartConfigError(f"unknown color: {value!r}") from None
    if isinstance(value, (tuple, list)) and len(value) == 3:
        return Rgb(*(int(channel) for channel in value))
    raise ChartConfigError(f"unsupported color value: {value!r}")
