"""Stroke path smoothing for handwriting canvas input."""

from collections import deque
from typing import Deque, Iterable, List, Optional, Tuple

Point = Tuple[float, float]


class PathSmoother:
    """Exponentially weighted moving average over the most recent points.

    The newest point has weight 1 and each older point is scaled by a further
    ``(1 - smoothing)``.
    """

    def __init__(self, smoothing: float = 0.2, max_points: int = 5) -> None:
        if not 0.0 <= smoothing < 1.0:
            raise ValueError("smoothing must be in [0.0, 1.0)")
        if max_points < 1:
            raise ValueError("max_points must be at least 1")
        self.smoothing = smoothing
        self.max_points = max_points
        self._points: Deque[Point] = deque(maxlen=max_points)

    def add_point(self, x: float, y: float) -> Point:
        self._points.append((float(x), float(y)))
        return self._smoothed_point()

    def _smoothed_point(self) -> Point:
        n = len(self._points)
        if n < 2:
            return self._points[-1]

        x_sum = y_sum = weight_sum = 0.0
        for i, (px, py) in enumerate(self._points):
            weight = (1 - self.smoothing) ** (n - 1 - i)
            x_sum += px * weight
            y_sum += py * weight
            weight_sum += weight
        return (x_sum / weight_sum, y_sum / weight_sum)

    def reset(self) -> None:
        self._points.clear()

    def __len__(self) -> int:
        return len(self._points)


def smooth_stroke(
    points: Iterable[Point],
    smoother: Optional[PathSmoother] = None,
) -> List[Point]:
    """Smooth one stroke, resetting the smoother first."""
    smoother = smoother or PathSmoother()
    smoother.reset()
    return [smoother.add_point(x, y) for x, y in points]
