from __future__ import annotations
import logging
import os

from dotenv import load_dotenv

from ..models.gap_result import GapResult
from ..models.image import Image
from ..pipeline.locate_gap import DROP_THRESHOLD, EDGE_MARGIN, scan_gap
from .image_service import ImageService

logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()


class GapLocatorService:
    """
    Finds the gap column for a background / slider pair.
    *   Tuning constants are read once here and passed down explicitly;
        the scan itself never looks at the environment.
    *   The slider image is only measured, its pixels are never compared.
    """
    def __init__(
        self,
        edge_margin: int | None = None,
        drop_threshold: int | None = None,
        image_service: ImageService | None = None,
    ):
        self.image_service = image_service or ImageService()
        self.EDGE_MARGIN = (
            edge_margin if edge_margin is not None
            else int(os.getenv("GAP_EDGE_MARGIN", str(EDGE_MARGIN)))
        )
        self.DROP_THRESHOLD = (
            drop_threshold if drop_threshold is not None
            else int(os.getenv("GAP_DROP_THRESHOLD", str(DROP_THRESHOLD)))
        )

    def locate(self, background: Image, slider: Image, slider_y: int) -> GapResult:
        """
        Args:
            background (Image): background with the gap, RGB or grayscale.
            slider (Image): the puzzle piece, used for its width/height only.
            slider_y (int): top row of the gap.

        Returns:
            GapResult with the chosen column and its diagnostics.
        """
        gray = self.image_service.to_grayscale(background)
        bg_h, bg_w = self.image_service.get_image_dimensions(gray)
        slider_h, slider_w = self.image_service.get_image_dimensions(slider)

        result = scan_gap(
            gray.pixels, bg_w, bg_h, slider_w, slider_h, slider_y,
            edge_margin=self.EDGE_MARGIN,
            drop_threshold=self.DROP_THRESHOLD,
        )

        logger.info(
            f"Gap located at x={result.x} (score={result.score}, "
            f"background={bg_w}x{bg_h}, slider={slider_w}x{slider_h}, y={slider_y})"
        )
        if not result.confident:
            logger.warning(
                f"No confident gap found for background {bg_w}x{bg_h} "
                f"with slider {slider_w}x{slider_h}; returning default x={result.x}"
            )
        return result

    def locate_base64(self, bg_payload: str, slider_payload: str, slider_y: int) -> GapResult:
        """
        Same as locate() for base64 / data URI encoded images.

        Raises:
            ValueError: either payload cannot be decoded.
        """
        background = self.image_service.decode(bg_payload)
        slider = self.image_service.decode(slider_payload)
        return self.locate(background, slider, slider_y)
