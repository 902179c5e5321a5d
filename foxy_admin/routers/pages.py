# File: foxy_admin/routers/pages.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from foxy_admin.core.models import Product, normalize_image_url
from foxy_admin.core.store import PRODUCTS, JsonStore, StoreError
from foxy_admin.deps.web import get_store, render

router = APIRouter(tags=["pages"])

logger = logging.getLogger("foxy_admin.pages")

CAROUSEL_SIZE = 6

TOOLS = [
    {"name": "Products", "href": "/products"},
    {"name": "Orders", "href": "/orders"},
    {"name": "Badge quotes", "href": "/quotes"},
    {"name": "Badge calculator", "href": "/calculator"},
    {"name": "Version info (JSON)", "href": "/info"},
    {"name": "Health (JSON)", "href": "/health"},
]


@router.get("/", response_class=HTMLResponse)
def dashboard(request: Request, store: JsonStore = Depends(get_store)):
    try:
        featured = [Product(**p) for p in store.all(PRODUCTS)][:CAROUSEL_SIZE]
    except StoreError as e:
        # the dashboard still renders without the carousel
        logger.warning("Dashboard carousel unavailable: %s", e)
        featured = []
    for p in featured:
        p.image_url = normalize_image_url(p.image_url)
    return render(request, "dashboard.html", tools=TOOLS, featured=featured)


@router.get("/calculator", response_class=HTMLResponse)
def calculator(request: Request):
    return render(request, "calculator.html")
