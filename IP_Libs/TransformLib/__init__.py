"""
TransformLib - Image transformations

This module provides the transformation types, the descriptor parser
and the keyword registry for the Image Processor project.
"""

from IP_Libs.TransformLib.transformations import (
    Blend,
    Crop,
    Grayscale,
    Invert,
    KernelFilter,
    Noop,
    Transformation,
    apply_transformation,
    map_pixels,
)
from IP_Libs.TransformLib.transform_registry import (
    ParseContext,
    TransformRegistry,
    get_default_registry,
    register_default_builders,
)
from IP_Libs.TransformLib.descriptor_parser import parse_transformation

__all__ = [
    "Blend",
    "Crop",
    "Grayscale",
    "Invert",
    "KernelFilter",
    "Noop",
    "Transformation",
    "apply_transformation",
    "map_pixels",
    "ParseContext",
    "TransformRegistry",
    "get_default_registry",
    "register_default_builders",
    "parse_transformation",
]
