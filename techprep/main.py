"""
FastAPI application entry point
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from techprep.app.api.v1 import resume, tech_questions
from techprep.app.core.config import settings
from techprep.app.core.logging_config import setup_logging
from techprep.app.db.base import Base
from techprep.app.db.session import engine
from techprep.app.utils import cache

# Import models so they register with Base.metadata
import techprep.app.models  # noqa: F401

logger = setup_logging()

# Create database tables
try:
    Base.metadata.create_all(bind=engine)
except Exception as e:
    logger.error("Database error: %s", e)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await cache.connect()
    yield
    await cache.close()


# Initialize FastAPI app
app = FastAPI(
    title="TechPrep API",
    description="Resume upload and technical interview question API",
    version=settings.app_version,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(resume.router, prefix="/api", tags=["resume"])
app.include_router(tech_questions.router, prefix="/api")


@app.get("/")
def read_root():
    """Root endpoint"""
    return {"message": "TechPrep API", "version": settings.app_version}


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
