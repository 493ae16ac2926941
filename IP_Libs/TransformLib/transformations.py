"""
Image transformations for Image Processor.

Every transformation is an immutable value. ``apply_transformation`` turns it
into a pure function from Image to Image: the input image is never modified,
and any change to pixel data produces a new frozen Image.

Errors inside a transformation (a crop outside the image, a blend between
images of different sizes) are handed to the reporter and the input image is
returned unchanged.

Classes:
    Crop: Extract a rectangle
    Blend: Composite a foreground image over the input
    Invert: Replace each channel c with 255 - c
    Grayscale: Replace each channel with the channel average
    KernelFilter: Convolve the image with a kernel
    Noop: Identity

Functions:
    apply_transformation: Apply any transformation to an image
    map_pixels: Build a new image by mapping every pixel through a function
"""

from dataclasses import dataclass
from typing import Callable, Union

from IP_Libs.ImageCoreLib.blend_modes import BlendMode
from IP_Libs.ImageCoreLib.color import Color
from IP_Libs.ImageCoreLib.image_models import Image
from IP_Libs.ImageCoreLib.kernels import Kernel
from IP_Libs.constants import CHANNEL_MAX
from IP_Libs.errors import BoundsError, DimensionMismatchError, Reporter, report_error


@dataclass(frozen=True)
class Crop:
    x: int
    y: int
    w: int
    h: int


@dataclass(frozen=True)
class Blend:
    fg_image: Image
    mode: BlendMode


@dataclass(frozen=True)
class Invert:
    pass


@dataclass(frozen=True)
class Grayscale:
    pass


@dataclass(frozen=True)
class KernelFilter:
    kernel: Kernel


@dataclass(frozen=True)
class Noop:
    pass


Transformation = Union[Crop, Blend, Invert, Grayscale, KernelFilter, Noop]


def map_pixels(image: Image, pixel_fn: Callable[[Color], Color]) -> Image:
    """
    Apply a color function to every pixel.

    Args:
        image: Source image (not modified)
        pixel_fn: Function mapping a source color to the output color

    Returns:
        New frozen Image of the same size
    """
    return Image.from_colors(
        image.width,
        image.height,
        [pixel_fn(color) for color in image.colors()],
    )


def _invert_color(color: Color) -> Color:
    return Color(
        CHANNEL_MAX - color.red,
        CHANNEL_MAX - color.green,
        CHANNEL_MAX - color.blue,
    )


def _grayscale_color(color: Color) -> Color:
    average = (color.red + color.green + color.blue) // 3
    return Color(average, average, average)


def _apply_crop(crop: Crop, image: Image, reporter: Reporter) -> Image:
    try:
        return image.crop(crop.x, crop.y, crop.w, crop.h)
    except BoundsError:
        reporter(BoundsError(
            f"coordinates are out of bounds. Max coordinates: {image.width} {image.height}"
        ))
        return image


def _apply_blend(blend: Blend, image: Image, reporter: Reporter) -> Image:
    fg_image = blend.fg_image
    if fg_image.size != image.size:
        reporter(DimensionMismatchError(
            f"images don't have the same sizes: "
            f"{fg_image.width} x {fg_image.height} vs {image.width} x {image.height}"
        ))
        return image

    result = Image.black(image.width, image.height)
    for y in range(image.height):
        for x in range(image.width):
            result.set_color(
                x, y,
                blend.mode.combine(fg_image.get_color(x, y), image.get_color(x, y)),
            )
    return result.freeze()


def _apply_kernel_filter(kernel_filter: KernelFilter, image: Image) -> Image:
    kernel = kernel_filter.kernel
    return Image.from_colors(
        image.width,
        image.height,
        [
            kernel * image.window(x, y, kernel.width, kernel.height)
            for y in range(image.height)
            for x in range(image.width)
        ],
    )


def apply_transformation(
    transformation: Transformation,
    image: Image,
    reporter: Reporter = report_error,
) -> Image:
    """
    Apply a transformation to an image.

    Args:
        transformation: One of Crop, Blend, Invert, Grayscale, KernelFilter, Noop
        image: Input image (never modified)
        reporter: Receives errors recovered from during the transformation

    Returns:
        The transformed image, or the input image when the transformation
        is a Noop or failed

    Raises:
        TypeError: If transformation is not a known transformation type
    """
    if isinstance(transformation, Crop):
        return _apply_crop(transformation, image, reporter)

    if isinstance(transformation, Blend):
        return _apply_blend(transformation, image, reporter)

    if isinstance(transformation, Invert):
        return map_pixels(image, _invert_color)

    if isinstance(transformation, Grayscale):
        return map_pixels(image, _grayscale_color)

    if isinstance(transformation, KernelFilter):
        return _apply_kernel_filter(transformation, image)

    if isinstance(transformation, Noop):
        return image

    raise TypeError(f"Unsupported transformation: {type(transformation).__name__}")
