"""
FastAPI Dependencies

Reusable dependencies shared by the brain dump routes.
"""
from fastapi import Request, HTTPException, status
from loguru import logger

from liferpg.core.brain_dump_processor import BrainDumpProcessor


def get_processor(request: Request) -> BrainDumpProcessor:
    """
    Stateless routes only need the processor object itself.

    Raises:
        HTTPException: 503 if the application has not started a processor
    """
    processor = getattr(request.app.state, "processor", None)
    if processor is None:
        logger.error("BrainDumpProcessor missing from application state")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Processor not initialized"
        )
    return processor


def get_ready_processor(request: Request) -> BrainDumpProcessor:
    """
    Routes touching MongoDB need a processor whose repositories exist.

    Raises:
        HTTPException: 503 if persistence is not initialized
    """
    processor = get_processor(request)
    if not processor.is_ready:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Persistence not initialized"
        )
    return processor
