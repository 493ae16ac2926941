"""
Descriptor parsing for Image Processor.

A descriptor is a whitespace-separated command such as ``"crop 0 10 100 200"``
or ``"blend paris.jpg transparency"``. The first word selects the
transformation through the registry; the remaining words are its arguments.

Parsing never raises. Malformed arguments to a known keyword are reported
and yield a Noop; unknown keywords silently yield a Noop.

Example:
    >>> parse_transformation("crop 0 10 100 200")
    Crop(x=0, y=10, w=100, h=200)
    >>> parse_transformation("master yoda")
    Noop()
"""

import logging
from typing import Callable, Optional

from IP_Libs.ImageCoreLib.image_codec import load_image
from IP_Libs.ImageCoreLib.image_models import Image
from IP_Libs.TransformLib.transform_registry import (
    ParseContext,
    TransformRegistry,
    get_default_registry,
)
from IP_Libs.TransformLib.transformations import Noop, Transformation
from IP_Libs.errors import Reporter, report_error

logger = logging.getLogger(__name__)


def parse_transformation(
    descriptor: str,
    loader: Callable[[str], Image] = load_image,
    reporter: Reporter = report_error,
    registry: Optional[TransformRegistry] = None,
) -> Transformation:
    """
    Parse a descriptor into a transformation.

    Args:
        descriptor: Text command, e.g. "crop 0 0 10 10"
        loader: Loads foreground images for 'blend'
        reporter: Receives ParseError / LoadError diagnostics
        registry: Keyword registry (default: the global registry)

    Returns:
        The parsed Transformation, or Noop for unknown or malformed input
    """
    words = descriptor.split()
    if not words:
        return Noop()

    if registry is None:
        registry = get_default_registry()

    keyword, args = words[0], words[1:]
    if not registry.has_builder(keyword):
        logger.debug(f"Unknown descriptor keyword '{keyword}', using Noop")
        return Noop()

    builder = registry.get_builder(keyword)
    return builder(args, ParseContext(loader=loader, reporter=reporter))
