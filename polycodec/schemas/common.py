from pydantic import BaseModel, Field
from typing import Annotated

Latitude = Annotated[float, Field(ge=-90, le=90, allow_inf_nan=False, description="Latitude")]
Longitude = Annotated[float, Field(ge=-180, le=180, allow_inf_nan=False, description="Longitude")]

class Location(BaseModel):
    # Unbounded: decoded strings can carry any coordinate
    lat: float = Field(..., description="Latitude")
    lng: float = Field(..., description="Longitude")

class HealthResponse(BaseModel):
    status: str
    environment: str
