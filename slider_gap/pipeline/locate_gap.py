# pipeline/locate_gap.py
from typing import Tuple

import numpy as np

from ..models.gap_result import GapResult

# Columns skipped next to the piece's resting position and the right edge.
EDGE_MARGIN = 5
# Smallest per-row brightness drop that counts towards a column score.
DROP_THRESHOLD = 15


def scan_window(width: int, slider_width: int, edge_margin: int = EDGE_MARGIN) -> Tuple[int, int]:
    """Half-open range [start_x, end_x) of candidate columns."""
    # column 0 has no left neighbour
    start_x = max(slider_width + edge_margin, 1)
    end_x = width - slider_width - edge_margin
    return start_x, end_x


def column_scores(
    grid: np.ndarray,
    width: int,
    height: int,
    slider_width: int,
    slider_height: int,
    slider_y: int,
    *,
    edge_margin: int = EDGE_MARGIN,
    drop_threshold: int = DROP_THRESHOLD,
) -> Tuple[int, np.ndarray]:
    """
    Score every candidate column of the scan window.

    For column x the score is the sum, over the rows of the band
    [slider_y, slider_y + slider_height) that lie inside the image, of
    I(x-1, y) - I(x, y) wherever that drop exceeds *drop_threshold*.
    Brightening and small drops contribute nothing.

    Returns:
        (start_x, scores) where scores[i] belongs to column start_x + i.
        scores is empty when the window is empty.
    """
    start_x, end_x = scan_window(width, slider_width, edge_margin)
    if end_x <= start_x:
        return start_x, np.zeros(0, dtype=np.int64)

    top = max(slider_y, 0)
    bottom = min(slider_y + slider_height, height)
    if bottom <= top:
        return start_x, np.zeros(end_x - start_x, dtype=np.int64)

    # Signed copy: uint8 subtraction would wrap around.
    band = np.asarray(grid)[top:bottom].astype(np.int64)
    drops = band[:, start_x - 1:end_x - 1] - band[:, start_x:end_x]
    drops[drops <= drop_threshold] = 0
    return start_x, drops.sum(axis=0)


def scan_gap(
    grid: np.ndarray,
    width: int,
    height: int,
    slider_width: int,
    slider_height: int,
    slider_y: int,
    *,
    edge_margin: int = EDGE_MARGIN,
    drop_threshold: int = DROP_THRESHOLD,
) -> GapResult:
    """
    Pick the column with the strictly greatest score; ties keep the leftmost.

    Degenerate input never raises:
        • empty window          → x = 0, confident = False
        • every column scores 0 → x = leftmost window column, confident = False
    """
    start_x, scores = column_scores(
        grid, width, height, slider_width, slider_height, slider_y,
        edge_margin=edge_margin, drop_threshold=drop_threshold,
    )
    if scores.size == 0:
        return GapResult(x=0, score=-1, confident=False)

    best = int(np.argmax(scores))  # first occurrence wins ties
    best_score = int(scores[best])
    return GapResult(x=start_x + best, score=best_score, confident=best_score > 0)


def locate_gap(
    grid: np.ndarray,
    width: int,
    height: int,
    slider_width: int,
    slider_height: int,
    slider_y: int,
    *,
    edge_margin: int = EDGE_MARGIN,
    drop_threshold: int = DROP_THRESHOLD,
) -> int:
    """Return the x offset of the gap's left edge in a grayscale grid."""
    return scan_gap(
        grid, width, height, slider_width, slider_height, slider_y,
        edge_margin=edge_margin, drop_threshold=drop_threshold,
    ).x
