import base64
import binascii
import re
from io import BytesIO
from pathlib import Path
from typing import Tuple, Union

import cv2
import numpy as np
from PIL import Image as PILImage, UnidentifiedImageError

from ..models.image import Image

_DATA_URI_PREFIX = re.compile(r"^data:image/\w+;base64,")
_WHITESPACE = re.compile(r"\s+")


class ImageRepository:
    """
    Handles decoding and file I/O for Image entities.
    """

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    @staticmethod
    def retrieve_image_dimensions(img: Image) -> Tuple[int, int]:
        return img.pixels.shape[:2]

    @staticmethod
    def strip_data_uri(payload: str) -> str:
        """Drop a leading 'data:image/<kind>;base64,' if present."""
        return _DATA_URI_PREFIX.sub("", payload.strip(), count=1)

    def decode_base64(self, payload: str) -> Image:
        """
        Decode a base64 (or data URI) string into an RGB Image.

        Raises:
            ValueError: payload is not base64 or not a readable image.
        """
        try:
            body = _WHITESPACE.sub("", self.strip_data_uri(payload))
            raw = base64.b64decode(body, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"Base64 decoding failed: {e}") from e

        try:
            with PILImage.open(BytesIO(raw)) as pil_img:
                arr = np.array(pil_img.convert("RGB"))
        except (UnidentifiedImageError, PILImage.DecompressionBombError, OSError) as e:
            raise ValueError(f"Pillow could not open image data: {e}") from e

        return self.create_image(arr)

    @staticmethod
    def load(path: Union[str, Path], rgb: bool = True) -> Image:
        path = Path(path)
        arr_bgr = cv2.imread(str(path), cv2.IMREAD_COLOR)
        if arr_bgr is None:
            raise FileNotFoundError(f"Image not found or unreadable: {path}")

        arr = arr_bgr[:, :, ::-1] if rgb else arr_bgr
        return Image(pixels=np.ascontiguousarray(arr), path=path)
