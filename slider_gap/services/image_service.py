from pathlib import Path
from typing import Tuple, Union

import cv2
import numpy as np

from ..models.image import Image
from ..repositories.image_repository import ImageRepository


class ImageService:
    """Decoding and pixel helpers.  No gap-finding logic."""
    def __init__(self):
        self.image_repository = ImageRepository()

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load(self, path: Union[str, Path]) -> Image:
        """Load a single image from disk into an Image object."""
        return self.image_repository.load(path)

    def decode(self, payload: str) -> Image:
        """Decode a base64 / data URI payload into an Image object."""
        return self.image_repository.decode_base64(payload)

    @staticmethod
    def _to_grayscale(img_pixels: np.ndarray) -> np.ndarray:
        if img_pixels.ndim == 2:
            return img_pixels
        return cv2.cvtColor(img_pixels, cv2.COLOR_RGB2GRAY)

    def to_grayscale(self, img: Image) -> Image:
        """
        Return a new single-channel Image; brightness only, chrominance dropped.
        """
        return self.create_image(self._to_grayscale(img.pixels), img.path)

    def get_image_dimensions(self, img: Image) -> Tuple[int, int]:
        """(height, width) of an image."""
        return self.image_repository.retrieve_image_dimensions(img)
