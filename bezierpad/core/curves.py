from typing import Sequence

from .math import Point, lerp


def de_casteljau(pts: Sequence[Point], t: float) -> Point:
    """
    Evaluate the Bézier curve defined by `pts` at parameter `t`.

    Adjacent points are blended `len(pts) - 1` times until one remains.
    At t=0 and t=1 the blend reduces to a copy, so the endpoints are
    reproduced exactly.
    """
    if not pts:
        raise ValueError("de_casteljau needs at least one control point")
    work = list(pts)
    for r in range(1, len(work)):
        for j in range(len(work) - r):
            work[j] = lerp(work[j], work[j + 1], t)
    x, y = work[0]
    return float(x), float(y)


def _check_sample_count(sample_count) -> None:
    if not isinstance(sample_count, int) or isinstance(sample_count, bool) or sample_count <= 0:
        raise ValueError(f"sample_count must be a positive int, got {sample_count!r}")


def sample_parameters(sample_count: int) -> list[float]:
    """`sample_count + 1` uniform parameters, 0 and 1 included."""
    return [i / sample_count for i in range(sample_count + 1)]


def evaluate(pts: Sequence[Point], sample_count: int) -> list[Point]:
    """
    Sample the curve through `pts` at `sample_count + 1` uniform parameters.
    Returns [] for fewer than 2 control points. O(sample_count * n^2).
    """
    _check_sample_count(sample_count)
    if len(pts) < 2:
        return []
    return [de_casteljau(pts, t) for t in sample_parameters(sample_count)]


class CurveEvaluator:
    """
    One sampling policy, fixed for a session.
      - CurveEvaluator(100): 101 samples, t = i/100
      - CurveEvaluator.from_step(1e-4): fixed parameter step, ~10000 samples
    """

    def __init__(self, sample_count: int = 100):
        _check_sample_count(sample_count)
        self.sample_count = sample_count

    @classmethod
    def from_step(cls, step: float) -> "CurveEvaluator":
        if not (0.0 < step <= 1.0):
            raise ValueError(f"step must be in (0, 1], got {step!r}")
        # integer count so t=1 is hit exactly instead of accumulating float error
        return cls(max(1, round(1.0 / step)))

    def evaluate(self, pts: Sequence[Point]) -> list[Point]:
        return evaluate(pts, self.sample_count)

    def __call__(self, pts: Sequence[Point]) -> list[Point]:
        return self.evaluate(pts)

    def __repr__(self):
        return f"CurveEvaluator(sample_count={self.sample_count})"
