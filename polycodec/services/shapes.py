"""
Shapely adapters for the polyline codec.

Shapely stores coordinates as (x, y) = (lng, lat), the reverse of the
(lat, lng) order used by the encoded polyline format.
"""

from typing import List, Sequence, Union
from shapely.geometry import LineString, LinearRing, Polygon
from polycodec.core.exceptions import GeometryError
from polycodec.schemas.polyline import EncodedPolyline
from polycodec.services.encoder import PolylineEncoder
from polycodec.utils.points import LatLng
from polycodec.utils.polyline import decode_polyline


def _xy(lat: float, lng: float):
    return (lng, lat)


def latlngs_from_geometry(geometry: Union[LineString, LinearRing]) -> List[LatLng]:
    """Convert a LineString or LinearRing into codec points."""
    return [LatLng(y, x) for x, y, *_ in geometry.coords]


def decode_to_linestring(encoded: str) -> LineString:
    coords = decode_polyline(encoded, point_factory=_xy)
    if len(coords) < 2:
        raise GeometryError(f"A line needs at least 2 points, decoded {len(coords)}")
    return LineString(coords)


def decode_to_polygon(encoded_rings: Sequence[str]) -> Polygon:
    """
    Decode a multi-ring shape into a Polygon.

    Args:
        encoded_rings: Encoded shell followed by any encoded holes

    Returns:
        Polygon built from the decoded rings

    Raises:
        FormatError: If any ring is malformed
        GeometryError: If a ring has fewer than 3 distinct points
    """
    if not encoded_rings:
        raise GeometryError("A polygon needs at least one ring")

    rings = []
    for index, encoded in enumerate(encoded_rings):
        coords = decode_polyline(encoded, point_factory=_xy)
        if len(set(coords)) < 3:
            raise GeometryError(
                f"Ring {index} needs at least 3 distinct points, decoded {len(set(coords))}"
            )
        rings.append(coords)

    return Polygon(rings[0], holes=rings[1:])


def encode_linestring(line: LineString, encoder: PolylineEncoder) -> EncodedPolyline:
    return encoder.encode(latlngs_from_geometry(line))


def encode_polygon(polygon: Polygon, encoder: PolylineEncoder) -> List[EncodedPolyline]:
    """Encode the exterior ring, then each interior ring, as separate polylines."""
    rings = [polygon.exterior, *polygon.interiors]
    return [encoder.encode(latlngs_from_geometry(ring)) for ring in rings]
