# File: foxy_admin/main.py
from __future__ import annotations

import logging
import os
from importlib import import_module
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.routing import APIRouter
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from foxy_admin.core.settings import Settings, get_settings
from foxy_admin.core.store import JsonStore
from foxy_admin.core.version import load_descriptor

logger = logging.getLogger("foxy_admin")

APP_VERSION = os.getenv("APP_VERSION", "0.1.0")

ROUTERS = (
    "foxy_admin.routers.version",
    "foxy_admin.routers.pages",
    "foxy_admin.routers.products",
    "foxy_admin.routers.orders",
    "foxy_admin.routers.quotes",
)


def try_import_router(module_path: str) -> Optional[APIRouter]:
    try:
        mod = import_module(module_path)
    except ImportError as e:
        logger.warning("Router import failed: %s (%s)", module_path, e)
        return None
    router = getattr(mod, "router", None)
    if isinstance(router, APIRouter):
        return router
    logger.warning("Module %s has no 'router'", module_path)
    return None


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    version = load_descriptor(
        settings.VERSION_FILE,
        service=settings.SERVICE_NAME,
        environment=settings.ENVIRONMENT,
        fallback_image=settings.FALLBACK_IMAGE,
    )
    logger.info(
        "Starting %s image=%s build_time=%s commit=%s env=%s",
        settings.SERVICE_NAME, version.image, version.build_time, version.git_commit, version.environment,
    )

    app = FastAPI(title=settings.SERVICE_NAME, version=APP_VERSION)
    app.state.settings = settings
    app.state.version = version
    app.state.templates = Jinja2Templates(directory=settings.TEMPLATES_DIR)
    app.state.store = JsonStore(settings.DATA_DIR)

    if Path(settings.STATIC_DIR).is_dir():
        app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")
    else:
        # /static/* then falls through to the default 404
        logger.warning("Static directory %s does not exist; /static disabled", settings.STATIC_DIR)

    for m in ROUTERS:
        r = try_import_router(m)
        if r:
            app.include_router(r)
            logger.info("Mounted router %s", m)
    return app
