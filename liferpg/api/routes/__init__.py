"""
API Routes

Modular route definitions for the brain dump API.
"""
from liferpg.api.routes.health import router as health_router
from liferpg.api.routes.classify import router as classify_router
from liferpg.api.routes.brain_dumps import router as brain_dumps_router

__all__ = [
    "health_router",
    "classify_router",
    "brain_dumps_router",
]
