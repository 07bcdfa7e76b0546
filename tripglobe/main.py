import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from tripglobe.routers import trips, planner, cities, offers
from tripglobe.config import settings, cloud_config

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s"
)

# Initialize FastAPI app
app = FastAPI(
    title="TripGlobe API",
    version="0.1.0",
    description="Trip planning, itinerary editing and travel lookup API for the globe planner"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins if not cloud_config.IS_CLOUD_RUN else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(trips.router, prefix="/api/v1")
app.include_router(planner.router, prefix="/api/v1")
app.include_router(cities.router)
app.include_router(offers.router)

@app.get("/health")
def health_check():
    """Health check endpoint for Cloud Run and monitoring"""
    return {
        "status": "ok",
        "message": "TripGlobe API is running",
        "environment": "cloud-run" if cloud_config.IS_CLOUD_RUN else "local",
    }

@app.get("/")
def root():
    """Root endpoint with API information"""
    return {
        "name": "TripGlobe API",
        "version": "0.1.0",
        "docs_url": "/docs",
        "health_url": "/health"
    }

if __name__ == "__main__":
    import uvicorn
    port = cloud_config.PORT if cloud_config.IS_CLOUD_RUN else settings.port
    uvicorn.run(app, host="0.0.0.0", port=port)
