"""
Polyline encoder with zoom levels.

Combines the simplifier with the coordinate codec: points retained by the
reduction are encoded as deltas, and each one gets a level code derived from
the distance that justified keeping it.
"""

from typing import Optional, Sequence, Tuple
from polycodec.core.logging_config import logger
from polycodec.schemas.polyline import EncodingConfig, EncodedPolyline
from polycodec.services.simplifier import SimplificationResult, simplify
from polycodec.utils.points import LatLngLike, points_to_latlngs
from polycodec.utils.polyline import encode_coordinates, encode_number


class PolylineEncoder:
    """Encodes point sequences into (points, levels) string pairs."""

    def __init__(self, config: Optional[EncodingConfig] = None):
        self.config = config if config is not None else EncodingConfig()
        num_levels = self.config.num_levels
        self.zoom_level_breaks: Tuple[float, ...] = tuple(
            self.config.very_small * self.config.zoom_factor ** (num_levels - i - 1)
            for i in range(num_levels)
        )

    def compute_level(self, distance: float) -> int:
        """
        Map a significance distance to a zoom level.

        Returns the first level whose break the distance reaches. The walk is
        clamped at num_levels - 1 so it can never run past the last break.
        """
        level = 0
        if distance > self.config.very_small:
            last = self.config.num_levels - 1
            while level < last and distance < self.zoom_level_breaks[level]:
                level += 1
        return level

    def _level_code(self, distance: float) -> str:
        return encode_number(self.config.num_levels - self.compute_level(distance) - 1)

    def encode_levels(
        self,
        points: Sequence[LatLngLike],
        distances: Sequence[Optional[float]],
        abs_max_dist: float
    ) -> str:
        """
        Encode one level per retained point, in point order.

        Args:
            points: The full point sequence
            distances: Per-index significance (None = not retained)
            abs_max_dist: Largest distance seen during simplification

        Returns:
            Encoded levels string
        """
        if not points:
            return ""

        if self.config.force_endpoints:
            endpoint_code = encode_number(self.config.num_levels - 1)
        else:
            endpoint_code = self._level_code(abs_max_dist)

        encoded_levels = [endpoint_code]
        for i in range(1, len(points) - 1):
            if distances[i] is not None:
                encoded_levels.append(self._level_code(distances[i]))
        if len(points) > 1:
            encoded_levels.append(endpoint_code)

        return "".join(encoded_levels)

    def simplify(self, points: Sequence[LatLngLike]) -> SimplificationResult:
        return simplify(points, self.config)

    def encode(self, points: Sequence[LatLngLike]) -> EncodedPolyline:
        """
        Simplify and encode a polyline.

        Args:
            points: Ordered points exposing lat() and lng()

        Returns:
            EncodedPolyline with parallel points and levels strings
        """
        return self.encode_simplified(points, self.simplify(points))

    def encode_simplified(
        self,
        points: Sequence[LatLngLike],
        result: SimplificationResult
    ) -> EncodedPolyline:
        """Encode points using a simplification already computed for them."""
        encoded = EncodedPolyline(
            encoded_points=encode_coordinates(points, result.retained),
            encoded_levels=self.encode_levels(points, result.distances, result.abs_max_dist),
        )
        logger.debug(
            f"Encoded {len(points)} points ({result.retained_count} retained) "
            f"into {len(encoded.encoded_points)} chars"
        )
        return encoded

    def encode_pairs(self, pairs: Sequence[Sequence[float]]) -> EncodedPolyline:
        """Encode raw (lat, lng) pairs."""
        return self.encode(points_to_latlngs(pairs))


def encode(points: Sequence[LatLngLike], config: EncodingConfig) -> EncodedPolyline:
    return PolylineEncoder(config).encode(points)
