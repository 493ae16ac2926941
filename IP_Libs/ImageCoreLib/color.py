"""
Color value model for Image Processor.

Classes:
    Color: Immutable RGB color with channels clamped to 0-255

Functions:
    clamp_channel: Truncate a channel value toward zero and clamp it to 0-255
"""

import math
from dataclasses import dataclass
from typing import Tuple

from IP_Libs.constants import CHANNEL_MAX, CHANNEL_MIN

RgbColor = Tuple[int, int, int]


def clamp_channel(value: float) -> int:
    """
    Convert a computed channel value to a valid channel.

    The value is truncated toward zero first, then saturated into
    the 0-255 range, so -3.7 becomes 0 and 300.9 becomes 255.

    Args:
        value: Integer or float channel value

    Returns:
        Integer channel value in 0-255
    """
    truncated = math.trunc(value)
    if truncated < CHANNEL_MIN:
        return CHANNEL_MIN
    if truncated > CHANNEL_MAX:
        return CHANNEL_MAX
    return truncated


@dataclass(frozen=True)
class Color:
    """RGB color. Channels are clamped on construction."""

    red: int
    green: int
    blue: int

    def __post_init__(self):
        object.__setattr__(self, "red", clamp_channel(self.red))
        object.__setattr__(self, "green", clamp_channel(self.green))
        object.__setattr__(self, "blue", clamp_channel(self.blue))

    def to_tuple(self) -> RgbColor:
        return self.red, self.green, self.blue

    @classmethod
    def from_tuple(cls, values) -> "Color":
        """Build a color from the first three entries of an RGB(A) sequence."""
        return cls(int(values[0]), int(values[1]), int(values[2]))


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
