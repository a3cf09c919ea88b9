import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sarkari_match.config import settings
from sarkari_match.database import connect_to_storage, close_storage
from sarkari_match.routes import jobs_router, eligibility_router, alerts_router, saved_router

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await connect_to_storage()
    logger.info(f"Connected to {settings.storage_backend} storage")
    yield
    # Shutdown
    await close_storage()
    logger.info("Storage closed")


app = FastAPI(
    title=settings.app_name,
    description="Eligibility matching for government job postings",
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    return {"message": f"{settings.app_name} is running", "version": settings.app_version}


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "sarkari-match", "storage": settings.storage_backend}


app.include_router(jobs_router, prefix=settings.api_prefix)
app.include_router(eligibility_router, prefix=settings.api_prefix)
app.include_router(alerts_router, prefix=settings.api_prefix)
app.include_router(saved_router, prefix=settings.api_prefix)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("sarkari_match.main:app", host="0.0.0.0", port=8000, reload=True)
