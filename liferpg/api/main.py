"""
FastAPI Application

Main entry point for the Life RPG brain dump API.
Handles application lifecycle and router mounting.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from loguru import logger

from liferpg.core.brain_dump_processor import BrainDumpProcessor
from liferpg.api.routes import health_router, classify_router, brain_dumps_router
from liferpg.api.routes.health import API_VERSION
from liferpg.utils.observability import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle: startup and shutdown events.

    Startup:
    - Configure logging
    - Initialize BrainDumpProcessor (connects to MongoDB, creates indexes)

    Shutdown:
    - Disconnect from MongoDB
    """
    configure_logging()
    logger.info("Starting Life RPG brain dump API...")

    processor = BrainDumpProcessor()
    await processor.initialize()

    app.state.processor = processor

    logger.info("API server ready")

    yield

    logger.info("Shutting down API server...")
    await processor.shutdown()
    logger.info("Shutdown complete")


app = FastAPI(
    title="Life RPG Brain Dump API",
    description="Turns brain dumps into quests, tasks, notes and reminders",
    version=API_VERSION,
    lifespan=lifespan
)

app.include_router(health_router)
app.include_router(classify_router)
app.include_router(brain_dumps_router)
