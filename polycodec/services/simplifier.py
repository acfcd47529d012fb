"""
Douglas-Peucker simplification adapted for level encoding.

Rather than simply dropping points, the simplifier records for every kept
point the distance from the chord it was measured against. Those distances
are later bucketed into zoom levels by the encoder.
"""

import math
from typing import List, Optional, Sequence, Tuple
from polycodec.core.logging_config import logger
from polycodec.schemas.polyline import EncodingConfig
from polycodec.utils.points import LatLngLike


class SimplificationResult:
    """Container for a simplification pass."""

    def __init__(self, distances: List[Optional[float]], abs_max_dist: float):
        self.distances = distances  # None = not retained by the reduction
        self.abs_max_dist = abs_max_dist

    @property
    def retained(self) -> List[bool]:
        last = len(self.distances) - 1
        return [
            dist is not None or i == 0 or i == last
            for i, dist in enumerate(self.distances)
        ]

    @property
    def retained_count(self) -> int:
        return sum(self.retained)


def segment_distance(
    point: LatLngLike,
    start: LatLngLike,
    end: LatLngLike,
    segment_length: float
) -> float:
    """
    Distance between point and the segment [start, end] in lat/lng space.

    Args:
        point: Point being measured
        start: Segment start
        end: Segment end
        segment_length: Squared chord length of the segment

    Returns:
        Euclidean distance in degrees
    """
    if segment_length == 0:
        return math.hypot(point.lat() - start.lat(), point.lng() - start.lng())

    u = (
        (point.lat() - start.lat()) * (end.lat() - start.lat())
        + (point.lng() - start.lng()) * (end.lng() - start.lng())
    ) / segment_length

    if u <= 0:
        return math.hypot(point.lat() - start.lat(), point.lng() - start.lng())
    if u >= 1:
        return math.hypot(point.lat() - end.lat(), point.lng() - end.lng())
    return math.hypot(
        point.lat() - start.lat() - u * (end.lat() - start.lat()),
        point.lng() - start.lng() - u * (end.lng() - start.lng()),
    )


def simplify(points: Sequence[LatLngLike], config: EncodingConfig) -> SimplificationResult:
    """
    Run the reduction with an explicit stack of index ranges.

    Args:
        points: Ordered points exposing lat() and lng()
        config: Encoding configuration (only very_small is used here)

    Returns:
        SimplificationResult with per-index distances and the largest
        distance observed anywhere in the line
    """
    distances: List[Optional[float]] = [None] * len(points)
    abs_max_dist = 0.0

    if len(points) <= 2:
        return SimplificationResult(distances, abs_max_dist)

    stack: List[Tuple[int, int]] = [(0, len(points) - 1)]
    ranges_visited = 0

    while stack:
        lo, hi = stack.pop()
        ranges_visited += 1
        max_dist = 0.0
        max_loc = lo
        start = points[lo]
        end = points[hi]
        segment_length = (end.lat() - start.lat()) ** 2 + (end.lng() - start.lng()) ** 2

        for i in range(lo + 1, hi):
            dist = segment_distance(points[i], start, end, segment_length)
            if dist > max_dist:
                max_dist = dist
                max_loc = i
                if max_dist > abs_max_dist:
                    abs_max_dist = max_dist

        if max_dist > config.very_small:
            distances[max_loc] = max_dist
            stack.append((lo, max_loc))
            stack.append((max_loc, hi))

    result = SimplificationResult(distances, abs_max_dist)
    logger.debug(
        f"Simplified {len(points)} points to {result.retained_count} "
        f"({ranges_visited} ranges, abs_max_dist={abs_max_dist:.6f})"
    )
    return result
