# File: foxy_admin/routers/version.py
from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, Request

from foxy_admin.core.version import VersionDescriptor

router = APIRouter(tags=["version"])


@router.get("/info")
def info(request: Request) -> Dict[str, str]:
    descriptor: VersionDescriptor = request.app.state.version
    return descriptor.to_dict()


@router.get("/health")
def health(request: Request) -> Dict[str, str]:
    # no dependency checks; the descriptor state never affects health
    return {"status": "healthy", "service": request.app.state.settings.SERVICE_NAME}
