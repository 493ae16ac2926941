"""
Transformation Builder Registry.

This module provides a registry mapping descriptor keywords (the first word
of a descriptor such as "crop 0 0 10 10") to builder functions that turn the
remaining words into a Transformation.

Classes:
    ParseContext: Collaborators available to builders while parsing
    TransformRegistry: Registry for transformation builders

Functions:
    get_default_registry: Get the global default registry (singleton)
    register_default_builders: Register all built-in descriptor keywords
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from IP_Libs.ImageCoreLib.blend_modes import parse_blend_mode
from IP_Libs.ImageCoreLib.image_codec import load_image
from IP_Libs.ImageCoreLib.image_models import Image
from IP_Libs.ImageCoreLib.kernels import PREDEFINED_KERNELS
from IP_Libs.TransformLib.transformations import (
    Blend,
    Crop,
    Grayscale,
    Invert,
    KernelFilter,
    Noop,
    Transformation,
)
from IP_Libs.constants import (
    BLEND_USAGE,
    CMD_BLEND,
    CMD_CROP,
    CMD_GRAYSCALE,
    CMD_INVERT,
    CROP_USAGE,
)
from IP_Libs.errors import LoadError, ParseError, Reporter, report_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseContext:
    """Collaborators used while building a transformation.

    Attributes:
        loader: Loads an image from a path (used by 'blend')
        reporter: Receives errors for malformed descriptors
    """
    loader: Callable[[str], Image] = load_image
    reporter: Reporter = report_error


# Type alias for builder function
BuilderFunction = Callable[[Sequence[str], ParseContext], Transformation]


class TransformRegistry:
    """
    Registry for transformation builders.

    Example:
        >>> registry = TransformRegistry()
        >>> registry.register("invert", build_invert)
        >>> builder = registry.get_builder("invert")
        >>> transformation = builder([], ParseContext())
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._builders: Dict[str, BuilderFunction] = {}

    def register(self, keyword: str, builder: BuilderFunction) -> None:
        """
        Register a builder for a descriptor keyword.

        Args:
            keyword: First word of the descriptor (e.g. "crop")
            builder: Callable accepting (arguments, context)

        Raises:
            ValueError: If keyword is empty or builder is not callable
            RuntimeError: If keyword is already registered
        """
        keyword = str(keyword).strip()

        if not keyword:
            raise ValueError("keyword cannot be empty")

        if not callable(builder):
            raise ValueError(f"builder must be callable, got {type(builder)}")

        if keyword in self._builders:
            raise RuntimeError(f"Keyword '{keyword}' is already registered")

        self._builders[keyword] = builder

        logger.debug(f"Registered builder for keyword: {keyword}")

    def get_builder(self, keyword: str) -> BuilderFunction:
        """
        Get the builder for a keyword.

        Raises:
            KeyError: If keyword is not registered
        """
        keyword = str(keyword).strip()

        if keyword not in self._builders:
            available = ", ".join(self.list_keywords())
            raise KeyError(
                f"No builder registered for keyword '{keyword}'. "
                f"Available keywords: {available}"
            )

        return self._builders[keyword]

    def has_builder(self, keyword: str) -> bool:
        return str(keyword).strip() in self._builders

    def list_keywords(self) -> List[str]:
        """Sorted list of all registered keywords."""
        return sorted(self._builders.keys())


def build_crop(args: Sequence[str], context: ParseContext) -> Transformation:
    try:
        x, y, w, h = (int(value) for value in args[:4])
    except ValueError:
        context.reporter(ParseError(CROP_USAGE))
        return Noop()
    return Crop(x, y, w, h)


def build_blend(args: Sequence[str], context: ParseContext) -> Transformation:
    if len(args) < 2:
        context.reporter(ParseError(BLEND_USAGE))
        return Noop()

    path, mode = args[0], args[1]
    try:
        fg_image = context.loader(path)
    except (LoadError, OSError) as e:
        context.reporter(LoadError(f"Image cannot be found: {path} ({e})"))
        return Noop()

    return Blend(fg_image, parse_blend_mode(mode))


def build_invert(args: Sequence[str], context: ParseContext) -> Transformation:
    return Invert()


def build_grayscale(args: Sequence[str], context: ParseContext) -> Transformation:
    return Grayscale()


def _kernel_builder(keyword: str) -> BuilderFunction:
    kernel = PREDEFINED_KERNELS[keyword]

    def build_kernel_filter(args: Sequence[str], context: ParseContext) -> Transformation:
        return KernelFilter(kernel)

    return build_kernel_filter


# Global singleton registry
_default_registry: Optional[TransformRegistry] = None


def get_default_registry() -> TransformRegistry:
    """
    Get the global default registry (singleton).

    Creates the registry on first call and registers the built-in keywords.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = TransformRegistry()
        register_default_builders(_default_registry)

    return _default_registry


def register_default_builders(registry: TransformRegistry) -> None:
    """
    Register all built-in descriptor keywords.

    This function registers:
    - crop x y w h
    - blend path mode
    - invert, grayscale
    - one kernel filter per predefined kernel (sharpen, blur, edge, emboss)

    Args:
        registry: The registry to register builders with
    """
    registry.register(CMD_CROP, build_crop)
    registry.register(CMD_BLEND, build_blend)
    registry.register(CMD_INVERT, build_invert)
    registry.register(CMD_GRAYSCALE, build_grayscale)

    for keyword in PREDEFINED_KERNELS:
        registry.register(keyword, _kernel_builder(keyword))

    logger.info("Registered default transformation builders")
