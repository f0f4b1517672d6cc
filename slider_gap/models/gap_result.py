from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class GapResult:
    """
    Outcome of one gap scan.
    `x` is what callers send back; `score` and `confident` are diagnostics.
    """
    x: int            # Chosen column (left edge of the gap)
    score: int        # Accumulated brightness drop of that column, -1 if nothing was scanned
    confident: bool   # False when the window was empty or every column scored 0

    def as_dict(self) -> dict:
        return {"x": self.x, "score": self.score, "confident": self.confident}
