"""
ImageCoreLib - Core image data model

This module provides the color and image models, blend modes,
convolution kernels and the image codec for the Image Processor project.
"""

from IP_Libs.ImageCoreLib.color import BLACK, WHITE, Color, clamp_channel
from IP_Libs.ImageCoreLib.kernels import (
    BLUR,
    EDGE,
    EMBOSS,
    PREDEFINED_KERNELS,
    SHARPEN,
    Kernel,
    Window,
)
from IP_Libs.ImageCoreLib.image_models import Image
from IP_Libs.ImageCoreLib.blend_modes import (
    MULTIPLY,
    NO_BLEND,
    SCREEN,
    BlendMode,
    Transparency,
    parse_blend_mode,
)
from IP_Libs.ImageCoreLib.image_codec import (
    image_from_array,
    image_to_array,
    load_image,
    save_image,
)

__all__ = [
    "BLACK",
    "WHITE",
    "Color",
    "clamp_channel",
    "Kernel",
    "Window",
    "SHARPEN",
    "BLUR",
    "EDGE",
    "EMBOSS",
    "PREDEFINED_KERNELS",
    "Image",
    "BlendMode",
    "Transparency",
    "MULTIPLY",
    "SCREEN",
    "NO_BLEND",
    "parse_blend_mode",
    "load_image",
    "save_image",
    "image_from_array",
    "image_to_array",
]
