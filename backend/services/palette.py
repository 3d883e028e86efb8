"""Widget color palette offered to the canvas."""

import re
from enum import Enum
from typing import Tuple


PALETTE_HEX = {
    "sky_blue":       0x00CFFF,
    "hot_pink":       0xFF5C93,
    "bright_yellow":  0xFFEB3B,
    "lime_green":     0xAEEA00,
    "vibrant_orange": 0xFF6D00,
}


class WidgetColor(str, Enum):
    SKY_BLUE = "sky_blue"
    HOT_PINK = "hot_pink"
    BRIGHT_YELLOW = "bright_yellow"
    LIME_GREEN = "lime_green"
    VIBRANT_ORANGE = "vibrant_orange"

    @property
    def hex_value(self) -> int:
        return PALETTE_HEX[self.value]

    @property
    def hex_code(self) -> str:
        return f"#{self.hex_value:06X}"

    @property
    def rgb(self) -> Tuple[float, float, float]:
        """sRGB components in [0, 1]."""
        value = self.hex_value
        red = ((value & 0xFF0000) >> 16) / 255
        green = ((value & 0x00FF00) >> 8) / 255
        blue = (value & 0x0000FF) / 255
        return red, green, blue

    def rgba(self, alpha: float = 1.0) -> Tuple[float, float, float, float]:
        return (*self.rgb, alpha)

    @classmethod
    def parse(cls, name: str) -> "WidgetColor":
        """
        Look up a color by its value (``sky_blue``) or its camel-case
        name (``skyBlue``).
        """
        key = re.sub(r"(?<!^)(?=[A-Z])", "_", name.strip()).lower()
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown widget color: {name!r}") from None

    def to_dict(self) -> dict:
        return {
            "name": self.value,
            "hex": self.hex_code,
            "rgb": list(self.rgb),
        }
