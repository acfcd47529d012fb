import math
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, List, Tuple, Dict, Any

from polycodec.core.exceptions import ConfigurationError
from polycodec.schemas.common import Latitude, Location, Longitude
from polycodec.utils.polyline import escape_literal

# Upper bound on num_levels
MAX_NUM_LEVELS = 64


class EncodingConfig(BaseModel):
    """
    Immutable settings for simplification and level encoding.

    Invalid values raise ConfigurationError (not a pydantic ValidationError)
    so callers can tell a bad configuration apart from a malformed request.
    """
    model_config = ConfigDict(frozen=True)

    num_levels: int = 18
    zoom_factor: float = 2.0
    very_small: float = 0.00001
    force_endpoints: bool = True

    @field_validator("num_levels")
    @classmethod
    def _check_num_levels(cls, value: int) -> int:
        if value <= 0:
            raise ConfigurationError(f"num_levels must be positive, got {value}")
        if value > MAX_NUM_LEVELS:
            raise ConfigurationError(f"num_levels must be at most {MAX_NUM_LEVELS}, got {value}")
        return value

    @field_validator("zoom_factor")
    @classmethod
    def _check_zoom_factor(cls, value: float) -> float:
        if not value > 1:
            raise ConfigurationError(f"zoom_factor must be greater than 1, got {value}")
        return value

    @field_validator("very_small")
    @classmethod
    def _check_very_small(cls, value: float) -> float:
        if not value > 0:
            raise ConfigurationError(f"very_small must be positive, got {value}")
        return value

    @model_validator(mode="after")
    def _check_coarsest_break(self):
        try:
            coarsest = self.very_small * self.zoom_factor ** (self.num_levels - 1)
        except OverflowError:
            coarsest = math.inf
        if not math.isfinite(coarsest):
            raise ConfigurationError(
                f"Coarsest zoom break overflows: very_small={self.very_small}, "
                f"zoom_factor={self.zoom_factor}, num_levels={self.num_levels}"
            )
        return self


class EncodedPolyline(BaseModel):
    model_config = ConfigDict(frozen=True)

    encoded_points: str
    encoded_levels: str

    def points_literal(self) -> str:
        """Encoded points with backslashes doubled, for embedding in JSON or source literals."""
        return escape_literal(self.encoded_points)


# API Schemas
class EncodingOptions(BaseModel):
    """Per-request overrides; unset fields fall back to the service settings."""
    num_levels: Optional[int] = None
    zoom_factor: Optional[float] = None
    very_small: Optional[float] = None
    force_endpoints: Optional[bool] = None


class EncodeRequest(BaseModel):
    points: List[Tuple[Latitude, Longitude]] = Field(..., description="Ordered (lat, lng) pairs")
    config: Optional[EncodingOptions] = None

class EncodeResponse(BaseModel):
    encoded_points: str
    encoded_levels: str
    points_literal: str
    point_count: int
    retained_count: int

class DecodeRequest(BaseModel):
    encoded: str

class DecodeResponse(BaseModel):
    points: List[Location]
    point_count: int

class DecodeShapeRequest(BaseModel):
    rings: List[str] = Field(..., min_length=1, description="Encoded shell followed by encoded holes")

class DecodeShapeResponse(BaseModel):
    geometry: Dict[str, Any]
    ring_count: int
    area: float
