"""
Error types and diagnostic reporting for Image Processor.

Transformation errors are recovered where they happen: the failing
operation hands the error to a reporter and returns its input unchanged.
Codec errors (LoadError, OSError) propagate to the caller.

Classes:
    ImageProcessingError: Base class for all image processing errors
    ParseError: Malformed descriptor arguments
    BoundsError: Coordinates or rectangle outside the image extent
    DimensionMismatchError: Operands with different dimensions
    LoadError: Image file missing or undecodable
    FrozenImageError: Write attempted on an image exposed to callers

Functions:
    report_error: Default reporter, logs the error
"""

import logging
from typing import Callable

logger = logging.getLogger(__name__)


class ImageProcessingError(Exception):
    """Base class for all image processing errors."""


class ParseError(ImageProcessingError, ValueError):
    """Raised when a descriptor has missing or malformed arguments."""


class BoundsError(ImageProcessingError, IndexError):
    """Raised when coordinates fall outside the image."""


class DimensionMismatchError(ImageProcessingError, ValueError):
    """Raised when two operands do not have the same width and height."""


class LoadError(ImageProcessingError, OSError):
    """Raised when an image cannot be loaded from disk."""


class FrozenImageError(ImageProcessingError, RuntimeError):
    """Raised when writing a pixel of a frozen image."""


Reporter = Callable[[Exception], None]


def report_error(error: Exception) -> None:
    """
    Report a recovered error through the logging system.

    Args:
        error: The error that was recovered from
    """
    logger.warning(f"{type(error).__name__}: {error}")
