from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np


@dataclass
class Image:
    """
    Simple data object: pixels (+ optional source path for bookkeeping).
    No decoding logic outside the repository.
    """
    pixels: np.ndarray # Shape (H, W, 3) RGB or (H, W) grayscale, dtype uint8.
    path: Path | None = None # Source of the image, None when decoded from base64.
