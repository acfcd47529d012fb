from fastapi import HTTPException, status
from shapely.geometry import mapping
from polycodec.core.config import settings
from polycodec.core.exceptions import ConfigurationError, PolylineError
from polycodec.core.logging_config import logger
from polycodec.schemas.common import Location
from polycodec.schemas.polyline import (
    DecodeResponse,
    DecodeShapeResponse,
    EncodeResponse,
    EncodeRequest,
    EncodingConfig,
    EncodingOptions,
)
from polycodec.services.encoder import PolylineEncoder
from polycodec.services.shapes import decode_to_polygon
from polycodec.utils.points import points_to_latlngs
from polycodec.utils.polyline import decode_polyline


class PolylineService:
    """
    Service layer for the polyline endpoints.

    Translates codec errors into HTTP errors and fills unset encoding
    options from the service settings.
    """

    def __init__(self):
        self.default_config = settings.encoding_config()
        self.default_encoder = PolylineEncoder(self.default_config)

    def build_config(self, options: EncodingOptions = None) -> EncodingConfig:
        """
        Merge request options over the service defaults.

        Raises:
            HTTPException 400: If the merged configuration is invalid
        """
        if options is None:
            return self.default_config

        overrides = options.model_dump(exclude_none=True)
        try:
            return EncodingConfig(**{**self.default_config.model_dump(), **overrides})
        except ConfigurationError as e:
            logger.warning(f"Rejected encoding options {overrides}: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e)
            )

    def encode(self, request: EncodeRequest) -> EncodeResponse:
        config = self.build_config(request.config)
        encoder = self.default_encoder if config == self.default_config else PolylineEncoder(config)

        points = points_to_latlngs(request.points)
        result = encoder.simplify(points)
        encoded = encoder.encode_simplified(points, result)
        logger.info(f"Encoded polyline: points={len(points)}, chars={len(encoded.encoded_points)}")

        return EncodeResponse(
            encoded_points=encoded.encoded_points,
            encoded_levels=encoded.encoded_levels,
            points_literal=encoded.points_literal(),
            point_count=len(points),
            retained_count=result.retained_count,
        )

    def decode(self, encoded: str) -> DecodeResponse:
        """
        Decode an encoded polyline.

        Raises:
            HTTPException 400: If the string is malformed
        """
        try:
            points = decode_polyline(encoded, point_factory=lambda lat, lng: Location(lat=lat, lng=lng))
        except PolylineError as e:
            logger.warning(f"Rejected encoded polyline: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e)
            )
        return DecodeResponse(points=points, point_count=len(points))

    def decode_shape(self, rings: list) -> DecodeShapeResponse:
        """
        Decode a shell and its holes into a GeoJSON polygon.

        Raises:
            HTTPException 400: If a ring is malformed or degenerate
        """
        try:
            polygon = decode_to_polygon(rings)
        except PolylineError as e:
            logger.warning(f"Rejected encoded shape: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e)
            )
        return DecodeShapeResponse(
            geometry=mapping(polygon),
            ring_count=len(rings),
            area=polygon.area,
        )


polyline_service = PolylineService()
