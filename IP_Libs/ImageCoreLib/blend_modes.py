"""
Pixel compositing modes for Image Processor.

A BlendMode combines a foreground color with a background color, channel by
channel. Every formula result is truncated toward zero before it becomes a
channel value.

Modes:
    transparency: fg * factor + bg * (1 - factor)
    multiply:     fg * bg / 255
    screen:       255 - (255 - fg) * (255 - bg) / 255
    none:         fg (background ignored)

Example:
    >>> mode = parse_blend_mode("screen")
    >>> mode.combine(Color(100, 0, 0), Color(100, 0, 0))
    Color(red=160, green=0, blue=0)
"""

from dataclasses import dataclass
from typing import Literal

from IP_Libs.ImageCoreLib.color import Color
from IP_Libs.constants import (
    BLEND_MULTIPLY,
    BLEND_NONE,
    BLEND_SCREEN,
    BLEND_TRANSPARENCY,
    CHANNEL_MAX,
    DEFAULT_TRANSPARENCY_FACTOR,
)

BlendKind = Literal["transparency", "multiply", "screen", "none"]


def _clamp_factor(factor: float) -> float:
    if factor < 0.0:
        return 0.0
    if factor >= 1.0:
        return 1.0
    return float(factor)


@dataclass(frozen=True)
class BlendMode:
    """Compositing strategy.

    Attributes:
        kind: One of 'transparency', 'multiply', 'screen', 'none'
        factor: Foreground weight for 'transparency', clamped to 0.0-1.0
    """
    kind: BlendKind = BLEND_NONE
    factor: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "factor", _clamp_factor(self.factor))

    def combine(self, fg: Color, bg: Color) -> Color:
        if self.kind == BLEND_TRANSPARENCY:
            keep = 1 - self.factor
            return Color(
                fg.red * self.factor + bg.red * keep,
                fg.green * self.factor + bg.green * keep,
                fg.blue * self.factor + bg.blue * keep,
            )

        if self.kind == BLEND_MULTIPLY:
            return Color(
                fg.red * bg.red / 255.0,
                fg.green * bg.green / 255.0,
                fg.blue * bg.blue / 255.0,
            )

        if self.kind == BLEND_SCREEN:
            return Color(
                CHANNEL_MAX - (CHANNEL_MAX - fg.red) * (CHANNEL_MAX - bg.red) / 255.0,
                CHANNEL_MAX - (CHANNEL_MAX - fg.green) * (CHANNEL_MAX - bg.green) / 255.0,
                CHANNEL_MAX - (CHANNEL_MAX - fg.blue) * (CHANNEL_MAX - bg.blue) / 255.0,
            )

        if self.kind == BLEND_NONE:
            return fg

        raise ValueError(f"Unsupported blend mode: {self.kind}")


def Transparency(factor: float = DEFAULT_TRANSPARENCY_FACTOR) -> BlendMode:
    """Create a transparency blend with the given foreground weight."""
    return BlendMode(BLEND_TRANSPARENCY, factor)


MULTIPLY = BlendMode(BLEND_MULTIPLY)
SCREEN = BlendMode(BLEND_SCREEN)
NO_BLEND = BlendMode(BLEND_NONE)


def parse_blend_mode(token: str) -> BlendMode:
    """
    Map a descriptor token to a blend mode.

    Unknown tokens fall back to NO_BLEND; this never raises.

    Args:
        token: Blend mode keyword

    Returns:
        The matching BlendMode
    """
    if token == BLEND_TRANSPARENCY:
        return Transparency(DEFAULT_TRANSPARENCY_FACTOR)
    if token == BLEND_MULTIPLY:
        return MULTIPLY
    if token == BLEND_SCREEN:
        return SCREEN
    return NO_BLEND
