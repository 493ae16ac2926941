"""
Image file loading and saving for Image Processor.

Decoding and encoding are done by Pillow; pixel data moves between Pillow
and the Image model through numpy arrays.

Functions:
    load_image: Decode an image file into a frozen Image
    save_image: Encode an Image to disk
    image_to_array: Convert an Image to an (height, width, 3) uint8 array
    image_from_array: Convert an (height, width, 3) array to a frozen Image
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

import numpy as np
from PIL import Image as PILImage

from IP_Libs.ImageCoreLib.color import Color
from IP_Libs.ImageCoreLib.image_models import Image
from IP_Libs.constants import DEFAULT_OUTPUT_FORMAT, IMAGE_MODE
from IP_Libs.errors import LoadError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def image_from_array(array: Any) -> Image:
    """
    Build a frozen Image from an RGB array.

    Args:
        array: Array of shape (height, width, 3) or (height, width, 4)

    Returns:
        Frozen Image (alpha, if present, is dropped)

    Raises:
        ValueError: If the array does not have 3 dimensions with 3+ channels
    """
    data = np.asarray(array)
    if data.ndim != 3 or data.shape[2] < 3:
        raise ValueError(f"Expected an array of shape (height, width, 3), got {data.shape}")

    height, width = data.shape[0], data.shape[1]
    rows = data[:, :, :3].reshape(-1, 3).tolist()
    return Image.from_colors(width, height, [Color.from_tuple(row) for row in rows])


def image_to_array(image: Image) -> np.ndarray:
    """Convert an Image to a (height, width, 3) uint8 array."""
    data = np.array([color.to_tuple() for color in image.colors()], dtype=np.uint8)
    return data.reshape(image.height, image.width, 3)


def load_image(path: PathLike) -> Image:
    """
    Load an image file from disk.

    Args:
        path: Path to an image file in any format Pillow can open

    Returns:
        Frozen Image in RGB

    Raises:
        LoadError: If the file is missing or cannot be decoded
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise LoadError(f"Image file not found: {file_path}")

    try:
        with PILImage.open(file_path) as img:
            array = np.asarray(img.convert(IMAGE_MODE), dtype=np.uint8)
    except Exception as e:
        raise LoadError(f"Failed to load image from {file_path}: {str(e)}") from e

    image = image_from_array(array)
    logger.info(f"Loaded {file_path} ({image.width} x {image.height})")
    return image


def save_image(image: Image, path: PathLike, image_format: Optional[str] = None) -> Path:
    """
    Save an Image to disk.

    The format is taken from ``image_format``, otherwise from the file
    suffix. Files without a suffix Pillow recognizes are written as PNG.
    Formats Pillow can read but not write are rejected.

    Args:
        image: Image to save
        path: Destination file path
        image_format: Optional Pillow format name (e.g. 'PNG', 'JPEG')

    Returns:
        The path written to

    Raises:
        OSError: If the format cannot be written or the file cannot be written
    """
    file_path = Path(path)

    # Also loads the Pillow plugins that fill PILImage.SAVE
    registered = PILImage.registered_extensions()
    if image_format is None:
        image_format = registered.get(file_path.suffix.lower(), DEFAULT_OUTPUT_FORMAT)
    image_format = image_format.upper()

    if image_format not in PILImage.SAVE:
        raise OSError(f"Cannot write {image_format} images: {file_path}")

    pil_image = PILImage.fromarray(image_to_array(image))
    try:
        pil_image.save(file_path, format=image_format)
    except (KeyError, ValueError) as e:
        raise OSError(f"Failed to save image to {file_path}: {str(e)}") from e
    logger.info(f"Saved {image.width} x {image.height} image to {file_path}")
    return file_path
