"""
Session state for Image Processor.

An ImageSession holds the current image. Transformations never edit that
image; applying a descriptor replaces it with the transformation result.

Classes:
    ImageSession: Current image plus load, save and apply operations
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, Optional, Tuple, Union

from IP_Libs.ImageCoreLib.image_codec import load_image, save_image
from IP_Libs.ImageCoreLib.image_models import Image
from IP_Libs.TransformLib.descriptor_parser import parse_transformation
from IP_Libs.TransformLib.transform_registry import TransformRegistry
from IP_Libs.TransformLib.transformations import Transformation, apply_transformation
from IP_Libs.constants import NO_IMAGE_MESSAGE
from IP_Libs.errors import Reporter, report_error

logger = logging.getLogger(__name__)


class ImageSession:
    """
    Holder of the current image.

    Example:
        >>> session = ImageSession()
        >>> session.load("photo.png")
        >>> session.apply("grayscale")
        >>> session.save("photo_gray.png")
    """

    def __init__(
        self,
        image: Optional[Image] = None,
        loader: Callable[[str], Image] = load_image,
        saver: Callable[[Image, str], object] = save_image,
        reporter: Reporter = report_error,
        registry: Optional[TransformRegistry] = None,
    ):
        self._image = image
        self._loader = loader
        self._saver = saver
        self._reporter = reporter
        self._registry = registry

    @property
    def image(self) -> Optional[Image]:
        return self._image

    @property
    def has_image(self) -> bool:
        return self._image is not None

    def _require_image(self) -> Image:
        if self._image is None:
            raise RuntimeError(NO_IMAGE_MESSAGE)
        return self._image

    def load(self, path: Union[str, Path]) -> Image:
        """
        Load an image and make it the current image.

        Raises:
            LoadError: If the image cannot be loaded (current image is kept)
        """
        self._image = self._loader(str(path))
        return self._image

    def save(self, path: Union[str, Path]) -> None:
        """
        Save the current image.

        Raises:
            RuntimeError: If no image is loaded
            OSError: If the file cannot be written
        """
        self._saver(self._require_image(), str(path))

    def size(self) -> Tuple[int, int]:
        """
        Raises:
            RuntimeError: If no image is loaded
        """
        return self._require_image().size

    def parse(self, descriptor: str) -> Transformation:
        return parse_transformation(
            descriptor,
            loader=self._loader,
            reporter=self._reporter,
            registry=self._registry,
        )

    def apply_transformation(self, transformation: Transformation) -> Image:
        """
        Apply a transformation and replace the current image with the result.

        Raises:
            RuntimeError: If no image is loaded
        """
        result = apply_transformation(transformation, self._require_image(), self._reporter)
        self._image = result
        return result

    def apply(self, descriptor: str) -> Image:
        """
        Parse a descriptor and apply it to the current image.

        Raises:
            RuntimeError: If no image is loaded
        """
        self._require_image()
        transformation = self.parse(descriptor)
        logger.debug(f"Applying {transformation!r}")
        return self.apply_transformation(transformation)

    def run_pipeline(self, descriptors: Iterable[str]) -> Image:
        """
        Apply several descriptors in order.

        A descriptor that fails is reported and leaves the image as it was;
        the remaining descriptors still run.
        """
        image = self._require_image()
        for descriptor in descriptors:
            image = self.apply(descriptor)
        return image
