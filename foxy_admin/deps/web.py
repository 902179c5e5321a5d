# File: foxy_admin/deps/web.py
from __future__ import annotations

from fastapi import Request

from foxy_admin.core.store import JsonStore


def get_store(request: Request) -> JsonStore:
    return request.app.state.store


def render(request: Request, name: str, status_code: int = 200, **context):
    """Render a template with the settings and version descriptor always in scope."""
    templates = request.app.state.templates
    return templates.TemplateResponse(
        request,
        name,
        {"settings": request.app.state.settings, "version": request.app.state.version, **context},
        status_code=status_code,
    )
