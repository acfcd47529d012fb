"""
Polyline encoding utility.
Implements the Encoded Polyline Algorithm Format (precision 5).
ref: https://developers.google.com/maps/documentation/utilities/polylinealgorithm

Coordinates are scaled with floor() rather than round(), so values are
truncated toward negative infinity at the fifth decimal place.
"""
import math
from typing import List, Sequence, Tuple

from polycodec.core.exceptions import FormatError
from polycodec.utils.points import LatLng, LatLngLike, PointFactory

PRECISION = 1e5
CHAR_OFFSET = 63
MAX_CHAR = 126


def encode_coordinates(points: Sequence[LatLngLike], retained: Sequence[bool]) -> str:
    """
    Encode the retained points into a polyline string.

    Args:
        points: Points exposing lat() and lng()
        retained: Mask parallel to points; only True entries are encoded

    Returns:
        Encoded polyline string.
    """
    result = []
    prev_lat = 0
    prev_lng = 0

    for point, keep in zip(points, retained):
        if not keep:
            continue

        lat_e5 = math.floor(point.lat() * PRECISION)
        lng_e5 = math.floor(point.lng() * PRECISION)

        d_lat = lat_e5 - prev_lat
        d_lng = lng_e5 - prev_lng

        prev_lat = lat_e5
        prev_lng = lng_e5

        result.append(encode_signed_number(d_lat))
        result.append(encode_signed_number(d_lng))

    return "".join(result)


def encode_polyline(points: Sequence[Tuple[float, float]]) -> str:
    """Encode every (lat, lng) pair, without simplification."""
    latlngs = [LatLng(lat, lng) for lat, lng in points]
    return encode_coordinates(latlngs, [True] * len(latlngs))


def encode_number(num: int) -> str:
    """Encode a non-negative integer as 5-bit chunks, low bits first."""
    if num < 0:
        raise ValueError(f"encode_number expects a non-negative value, got {num}")

    result = []
    while num >= 0x20:
        result.append(chr((0x20 | (num & 0x1f)) + CHAR_OFFSET))
        num >>= 5
    result.append(chr(num + CHAR_OFFSET))

    return "".join(result)


def encode_signed_number(num: int) -> str:
    """Zig-zag a signed value, then encode it."""
    sgn_num = num << 1
    if num < 0:
        sgn_num = ~sgn_num
    return encode_number(sgn_num)


def _read_number(encoded: str, index: int) -> Tuple[int, int]:
    """Read one unsigned value starting at index; returns (value, next_index)."""
    start = index
    result = 0
    shift = 0
    while True:
        if index >= len(encoded):
            raise FormatError("Encoded string ends in the middle of a value", start)
        code = ord(encoded[index])
        if code < CHAR_OFFSET or code > MAX_CHAR:
            raise FormatError(f"Invalid character {encoded[index]!r}", index)
        chunk = code - CHAR_OFFSET
        index += 1
        result |= (chunk & 0x1f) << shift
        shift += 5
        if chunk < 0x20:
            return result, index


def _read_signed_number(encoded: str, index: int) -> Tuple[int, int]:
    value, index = _read_number(encoded, index)
    if value & 1:
        return ~(value >> 1), index
    return value >> 1, index


def decode_polyline(encoded: str, point_factory: PointFactory = LatLng) -> list:
    """
    Decode a polyline string into points.

    Args:
        encoded: Encoded polyline string
        point_factory: Callable building a point from (lat, lng)

    Returns:
        List of points built by point_factory

    Raises:
        FormatError: If the string is truncated or holds invalid characters
    """
    points = []
    index = 0
    lat = 0
    lng = 0

    while index < len(encoded):
        d_lat, index = _read_signed_number(encoded, index)
        d_lng, index = _read_signed_number(encoded, index)
        lat += d_lat
        lng += d_lng
        points.append(point_factory(lat * 1e-5, lng * 1e-5))

    return points


def decode_levels(encoded_levels: str) -> List[int]:
    """Decode a levels string into its unsigned values."""
    levels = []
    index = 0
    while index < len(encoded_levels):
        value, index = _read_number(encoded_levels, index)
        levels.append(value)
    return levels


def decode_rings(encoded_rings: Sequence[str], point_factory: PointFactory = LatLng) -> List[list]:
    """Decode each ring of a multi-ring shape."""
    return [decode_polyline(ring, point_factory) for ring in encoded_rings]


def escape_literal(encoded: str) -> str:
    """Double every backslash so the string survives a second layer of escaping."""
    return encoded.replace("\\", "\\\\")
