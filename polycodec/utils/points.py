"""
Point capability used by the polyline codec.

The encoder only needs two accessors, ``lat()`` and ``lng()``, so any
coordinate type exposing them can be encoded directly. Decoding builds points
through a caller-supplied factory taking ``(lat, lng)``.
"""
from dataclasses import dataclass
from typing import Callable, Iterable, List, Protocol, Sequence, TypeVar

P = TypeVar("P")

PointFactory = Callable[[float, float], P]


class LatLngLike(Protocol):
    def lat(self) -> float: ...

    def lng(self) -> float: ...


@dataclass(frozen=True)
class LatLng:
    """Default immutable point in decimal degrees."""
    latitude: float
    longitude: float

    def lat(self) -> float:
        return self.latitude

    def lng(self) -> float:
        return self.longitude

    def as_tuple(self):
        return (self.latitude, self.longitude)


def points_to_latlngs(
    pairs: Iterable[Sequence[float]],
    point_factory: PointFactory = LatLng
) -> List[P]:
    """
    Convert raw (lat, lng) pairs into point objects.

    Args:
        pairs: Iterable of (latitude, longitude) pairs
        point_factory: Callable building a point from (lat, lng)

    Returns:
        List of points in the same order
    """
    return [point_factory(pair[0], pair[1]) for pair in pairs]
