from smallworld.api.bridges import router as bridges_router
from smallworld.api.health import router as health_router

__all__ = [
    "bridges_router",
    "health_router",
]
