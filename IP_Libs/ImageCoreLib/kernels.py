"""
Convolution kernels and windows for Image Processor.

A Kernel is a fixed-size weight matrix. A Window is the image patch of the
same size that the kernel is multiplied against. ``kernel * window`` sums the
weighted channels and produces a single Color.

Example:
    >>> window = image.window(10, 10, BLUR.width, BLUR.height)
    >>> color = BLUR * window

Classes:
    Kernel: Row-major weight matrix
    Window: Row-major patch of colors

Constants:
    SHARPEN, BLUR, EDGE, EMBOSS: Predefined 3x3 kernels
    PREDEFINED_KERNELS: The predefined kernels by descriptor keyword
"""

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from IP_Libs.ImageCoreLib.color import Color
from IP_Libs.constants import (
    BLUR_WEIGHTS,
    CMD_BLUR,
    CMD_EDGE,
    CMD_EMBOSS,
    CMD_SHARPEN,
    EDGE_WEIGHTS,
    EMBOSS_WEIGHTS,
    KERNEL_SIZE,
    SHARPEN_WEIGHTS,
)
from IP_Libs.errors import DimensionMismatchError


def _check_shape(name: str, width: int, height: int, count: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"{name} dimensions must be positive, got {width} x {height}")
    if count != width * height:
        raise ValueError(
            f"{name} of {width} x {height} needs {width * height} values, got {count}"
        )


@dataclass(frozen=True)
class Window:
    """Image patch convolved against a kernel of the same size.

    Attributes:
        width: Patch width
        height: Patch height
        values: width * height colors in row-major order
    """
    width: int
    height: int
    values: Tuple[Color, ...]

    def __post_init__(self):
        object.__setattr__(self, "values", tuple(self.values))
        _check_shape("Window", self.width, self.height, len(self.values))


@dataclass(frozen=True)
class Kernel:
    """Convolution weights.

    Weights are used as given. Call ``normalize()`` to scale them so that
    they sum to 1.0.

    Attributes:
        width: Kernel width
        height: Kernel height
        values: width * height weights in row-major order
    """
    width: int
    height: int
    values: Tuple[float, ...]

    def __post_init__(self):
        object.__setattr__(self, "values", tuple(float(value) for value in self.values))
        _check_shape("Kernel", self.width, self.height, len(self.values))

    @classmethod
    def square(cls, size: int, values: Sequence[float]) -> "Kernel":
        return cls(size, size, tuple(values))

    def total(self) -> float:
        return sum(self.values)

    def normalize(self) -> "Kernel":
        """
        Scale the weights so they sum to 1.0.

        Returns:
            A new normalized Kernel, or this kernel if the weights sum to zero
        """
        total = self.total()
        if total == 0.0:
            return self
        return Kernel(self.width, self.height, tuple(value / total for value in self.values))

    def __mul__(self, window: Window) -> Color:
        """
        Convolve this kernel with a window of the same size.

        Each channel is the sum of weight * channel over all positions,
        truncated toward zero and saturated to 0-255 by Color.

        Raises:
            DimensionMismatchError: If the window size differs from the kernel size
        """
        if not isinstance(window, Window):
            return NotImplemented

        if self.width != window.width or self.height != window.height:
            raise DimensionMismatchError(
                f"Kernel and window must have the same dimensions: "
                f"{self.width} x {self.height} vs {window.width} x {window.height}"
            )

        red = 0.0
        green = 0.0
        blue = 0.0
        for weight, color in zip(self.values, window.values):
            red += color.red * weight
            green += color.green * weight
            blue += color.blue * weight

        return Color(red, green, blue)


SHARPEN = Kernel.square(KERNEL_SIZE, SHARPEN_WEIGHTS).normalize()
BLUR = Kernel.square(KERNEL_SIZE, BLUR_WEIGHTS).normalize()
EDGE = Kernel.square(KERNEL_SIZE, EDGE_WEIGHTS)
EMBOSS = Kernel.square(KERNEL_SIZE, EMBOSS_WEIGHTS)

PREDEFINED_KERNELS: Dict[str, Kernel] = {
    CMD_SHARPEN: SHARPEN,
    CMD_BLUR: BLUR,
    CMD_EDGE: EDGE,
    CMD_EMBOSS: EMBOSS,
}
