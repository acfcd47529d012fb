from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from polycodec.core.config import settings
from polycodec.routers import polyline
from polycodec.schemas.common import HealthResponse

app = FastAPI(
    title="Polyline Codec API",
    version="1.0.0",
    redirect_slashes=False
)

# Configure CORS for map frontends
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(polyline.router, prefix="/api/polyline", tags=["Polyline"])


@app.get("/health", response_model=HealthResponse)
def health_check():
    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT
    }
