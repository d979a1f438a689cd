"""API routes."""

from mintpad.infrastructure.api.routes.collections_router import router as collections_router
from mintpad.infrastructure.api.routes.compression_router import router as compression_router
from mintpad.infrastructure.api.routes.launch_router import router as launch_router
from mintpad.infrastructure.api.routes.phases_router import router as phases_router
from mintpad.infrastructure.api.routes.time_router import router as time_router

__all__ = [
    "collections_router",
    "compression_router",
    "launch_router",
    "phases_router",
    "time_router",
]
