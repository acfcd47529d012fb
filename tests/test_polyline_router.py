import pytest
from fastapi.testclient import TestClient

from main import app
from polycodec.utils.polyline import encode_polyline
from conftest import GOLDEN_PAIRS, GOLDEN_POINTS


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_encode_golden(client):
    response = client.post("/api/polyline/encode", json={"points": GOLDEN_PAIRS})
    assert response.status_code == 200
    body = response.json()
    assert body["encoded_points"] == GOLDEN_POINTS
    assert body["encoded_levels"] == "POP"
    assert body["points_literal"] == GOLDEN_POINTS
    assert body["point_count"] == 3
    assert body["retained_count"] == 3


def test_encode_with_options(client):
    response = client.post(
        "/api/polyline/encode",
        json={"points": GOLDEN_PAIRS, "config": {"force_endpoints": False}},
    )
    assert response.status_code == 200
    assert response.json()["encoded_levels"] == "OOO"


def test_encode_drops_collinear_points(client):
    response = client.post("/api/polyline/encode", json={"points": [[0, 0], [1, 1], [2, 2]]})
    body = response.json()
    assert body["point_count"] == 3
    assert body["retained_count"] == 2


def test_encode_empty_line(client):
    response = client.post("/api/polyline/encode", json={"points": []})
    assert response.status_code == 200
    assert response.json()["encoded_points"] == ""
    assert response.json()["retained_count"] == 0


@pytest.mark.parametrize("options", [
    {"num_levels": 0},
    {"num_levels": 1200},
    {"num_levels": 1000000000},
    {"zoom_factor": 1.0},
    {"very_small": -1},
])
def test_encode_invalid_options(client, options):
    response = client.post("/api/polyline/encode", json={"points": GOLDEN_PAIRS, "config": options})
    assert response.status_code == 400


def test_decode_golden(client):
    response = client.post("/api/polyline/decode", json={"encoded": GOLDEN_POINTS})
    assert response.status_code == 200
    body = response.json()
    assert body["point_count"] == 3
    assert body["points"][2]["lat"] == pytest.approx(43.252, abs=1e-5)
    assert body["points"][2]["lng"] == pytest.approx(-126.453, abs=1e-5)


def test_decode_truncated(client):
    response = client.post("/api/polyline/decode", json={"encoded": "_p~iF"})
    assert response.status_code == 400


def test_decode_shape(client):
    square = [(0.0, 0.0), (0.0, 2.0), (2.0, 2.0), (2.0, 0.0), (0.0, 0.0)]
    response = client.post("/api/polyline/decode-shape", json={"rings": [encode_polyline(square)]})
    assert response.status_code == 200
    body = response.json()
    assert body["geometry"]["type"] == "Polygon"
    assert body["ring_count"] == 1
    assert body["area"] == pytest.approx(4.0, abs=1e-6)


def test_decode_shape_degenerate(client):
    response = client.post(
        "/api/polyline/decode-shape",
        json={"rings": [encode_polyline([(0.0, 0.0), (1.0, 1.0)])]},
    )
    assert response.status_code == 400


def test_decode_shape_requires_rings(client):
    response = client.post("/api/polyline/decode-shape", json={"rings": []})
    assert response.status_code == 422


@pytest.mark.parametrize("body", [
    '{"points": [[Infinity, 0], [1, 1]]}',
    '{"points": [[0, NaN], [1, 1]]}',
    '{"points": [[0, -Infinity]]}',
])
def test_encode_rejects_non_finite_coordinates(client, body):
    response = client.post(
        "/api/polyline/encode",
        content=body,
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422


@pytest.mark.parametrize("point", [[90.5, 0], [-91, 0], [0, 180.1], [0, -181]])
def test_encode_rejects_out_of_range_coordinates(client, point):
    response = client.post("/api/polyline/encode", json={"points": [[0, 0], point]})
    assert response.status_code == 422


def test_encode_accepts_coordinate_bounds(client):
    response = client.post("/api/polyline/encode", json={"points": [[-90, -180], [90, 180]]})
    assert response.status_code == 200
    assert response.json()["retained_count"] == 2
