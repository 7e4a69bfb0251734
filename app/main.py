"""Main FastAPI application"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api import buglist
from app.config import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Starting Backlog buglist sync service")
    if not settings.backlog_url:
        logger.warning("BACKLOG_URL is not set; buglist endpoints will answer 400")
    yield
    logger.info("Stopping Backlog buglist sync service")


app = FastAPI(
    title="Backlog Buglist Sync",
    description="Keep a local buglist in sync with a Backlog project",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(buglist.router)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "Backlog Buglist Sync"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
