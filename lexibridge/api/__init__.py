# API endpoints and routers

from .translation_endpoints import router as translation_router
from .dictionary_endpoints import router as dictionary_router
from .health_endpoints import router as health_router

__all__ = [
    "translation_router",
    "dictionary_router",
    "health_router",
]
