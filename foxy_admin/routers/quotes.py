# File: foxy_admin/routers/quotes.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse
from pydantic import BaseModel

from foxy_admin.core.models import (
    QUOTE_STATUSES,
    BadgeQuote,
    clamp_paging,
    paginate,
    quote_display,
    utc_now_iso,
)
from foxy_admin.core.store import BADGE_QUOTES, JsonStore, StoreError, is_valid_id
from foxy_admin.deps.web import get_store, render

router = APIRouter(prefix="/quotes", tags=["quotes"])

logger = logging.getLogger("foxy_admin.quotes")

IMAGE_TYPES = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
}


class QuoteOperationResponse(BaseModel):
    success: bool
    message: str
    quote_id: Optional[str] = None


@router.get("", response_class=HTMLResponse)
def list_quotes(
    request: Request,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
    status_filter: str = "all",
    store: JsonStore = Depends(get_store),
):
    page, size = clamp_paging(page, page_size)
    error_message = ""
    try:
        docs = store.all(BADGE_QUOTES)
    except StoreError as e:
        docs = []
        error_message = f"Database error fetching quotes: {e}"
    if status_filter != "all":
        docs = [d for d in docs if d.get("status") == status_filter]
    quotes = sorted((BadgeQuote(**d) for d in docs), key=lambda q: q.created_at, reverse=True)

    skip = (page - 1) * size
    return render(
        request, "quotes.html",
        quotes=[quote_display(q) for q in quotes[skip:skip + size]],
        pagination=paginate(page, size, len(quotes)),
        page_size=size,
        status_filter=status_filter,
        statuses=QUOTE_STATUSES,
        error_message=error_message,
    )


@router.post("/update-status", response_model=QuoteOperationResponse)
def update_quote_status(
    quote_id: str = Form(...),
    status: str = Form(...),
    store: JsonStore = Depends(get_store),
):
    if status not in QUOTE_STATUSES:
        return QuoteOperationResponse(success=False, message="Invalid status")
    if not is_valid_id(quote_id):
        return QuoteOperationResponse(success=False, message="Invalid quote ID")
    try:
        matched = store.update(BADGE_QUOTES, quote_id, {"status": status, "updated_at": utc_now_iso()})
    except StoreError as e:
        return QuoteOperationResponse(success=False, message=f"Database error: {e}")
    if not matched:
        return QuoteOperationResponse(success=False, message="Quote not found")
    logger.info("Quote %s status -> %s", quote_id, status)
    return QuoteOperationResponse(success=True, message=f"Quote status updated to {status}", quote_id=quote_id)


@router.get("/image/{filename}")
def serve_badge_image(request: Request, filename: str):
    """Customer-uploaded badge artwork; only `badge_*` files directly inside UPLOADS_DIR."""
    if not filename.startswith("badge_") or ".." in filename or "/" in filename or "\\" in filename:
        raise HTTPException(status_code=400, detail="Invalid image name")
    path = Path(request.app.state.settings.UPLOADS_DIR) / filename
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Image not found")
    ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    return FileResponse(
        path,
        media_type=IMAGE_TYPES.get(ext, "application/octet-stream"),
        headers={"Cache-Control": "private, max-age=3600"},
    )
