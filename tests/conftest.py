import math

import pytest

from polycodec.utils.points import LatLng

# Reference line from the encoded polyline format documentation
GOLDEN_PAIRS = [(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)]
GOLDEN_POINTS = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"


@pytest.fixture
def golden_points():
    return [LatLng(lat, lng) for lat, lng in GOLDEN_PAIRS]


@pytest.fixture
def wavy_line():
    """A long, gently curving track around Seattle."""
    return [
        LatLng(47.6 + 0.01 * math.sin(i / 15.0), -122.3 + i * 0.0005)
        for i in range(600)
    ]
