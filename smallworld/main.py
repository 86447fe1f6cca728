from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from smallworld.api import bridges_router, health_router
from smallworld.config import settings

app = FastAPI(
    title=settings.app_name,
    version=pkg_version("smallworld"),
    debug=settings.debug,
)

app.include_router(bridges_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
