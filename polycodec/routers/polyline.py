from fastapi import APIRouter
from polycodec.schemas.polyline import (
    DecodeRequest,
    DecodeResponse,
    DecodeShapeRequest,
    DecodeShapeResponse,
    EncodeRequest,
    EncodeResponse,
)
from polycodec.services.polyline import polyline_service
from polycodec.core.logging_config import logger

router = APIRouter()


@router.post("/encode", response_model=EncodeResponse)
def encode_polyline(request_data: EncodeRequest):
    """
    Simplify and encode a line.

    Args:
        request_data: Points as (lat, lng) pairs plus optional encoding options

    Returns:
        Encoded points and levels strings

    Raises:
        HTTPException 400: If the encoding options are invalid

    Example:
        ```json
        {
            "points": [[38.5, -120.2], [40.7, -120.95], [43.252, -126.453]],
            "config": {"num_levels": 18, "force_endpoints": true}
        }
        ```
    """
    logger.info(f"Encoding polyline: points={len(request_data.points)}")
    return polyline_service.encode(request_data)


@router.post("/decode", response_model=DecodeResponse)
def decode_polyline(request_data: DecodeRequest):
    """
    Decode an encoded polyline into points.

    Raises:
        HTTPException 400: If the encoded string is malformed
    """
    return polyline_service.decode(request_data.encoded)


@router.post("/decode-shape", response_model=DecodeShapeResponse)
def decode_shape(request_data: DecodeShapeRequest):
    """
    Decode a multi-ring shape (shell first, then holes) into a GeoJSON polygon.

    Raises:
        HTTPException 400: If a ring is malformed or has fewer than 3 distinct points
    """
    logger.info(f"Decoding shape: rings={len(request_data.rings)}")
    return polyline_service.decode_shape(request_data.rings)
