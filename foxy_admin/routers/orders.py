# File: foxy_admin/routers/orders.py
from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from foxy_admin.core.models import (
    ATTENTION_ORDER_STATUSES,
    OPEN_ORDER_STATUSES,
    ORDER_UPDATE_STATUSES,
    Order,
    clamp_paging,
    order_display,
    paginate,
    utc_now_iso,
)
from foxy_admin.core.store import COMPLETED_ORDERS, ORDERS, JsonStore, StoreError, is_valid_id
from foxy_admin.deps.web import get_store, render

router = APIRouter(prefix="/orders", tags=["orders"])

logger = logging.getLogger("foxy_admin.orders")


class OrderOperationResponse(BaseModel):
    success: bool
    message: str
    order_id: Optional[str] = None


def collect_orders(store: JsonStore, show_completed: bool) -> List[Order]:
    """
    Orders from both collections, newest first. Without `show_completed`
    only the ones that still need attention are kept.
    """
    open_docs = store.all(ORDERS)
    done_docs = store.all(COMPLETED_ORDERS)
    if not show_completed:
        open_docs = [d for d in open_docs if d.get("status") in OPEN_ORDER_STATUSES]
        done_docs = [d for d in done_docs if d.get("status") in ATTENTION_ORDER_STATUSES]
    orders = [Order(**d) for d in open_docs + done_docs]
    orders.sort(key=lambda o: o.created_at, reverse=True)
    return orders


@router.get("", response_class=HTMLResponse)
def list_orders(
    request: Request,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
    show_completed: str = "false",
    store: JsonStore = Depends(get_store),
):
    completed = show_completed == "true"
    page, size = clamp_paging(page, page_size)
    error_message = ""
    try:
        orders = collect_orders(store, completed)
    except StoreError as e:
        orders = []
        error_message = f"Database error fetching orders: {e}"
    logger.info("Listing orders: total=%d show_completed=%s page=%d", len(orders), completed, page)

    skip = (page - 1) * size
    return render(
        request, "orders.html",
        orders=[order_display(o) for o in orders[skip:skip + size]],
        pagination=paginate(page, size, len(orders)),
        page_size=size,
        show_completed=completed,
        statuses=ORDER_UPDATE_STATUSES,
        error_message=error_message,
    )


@router.post("/update-status", response_model=OrderOperationResponse)
def update_order_status(
    order_id: str = Form(...),
    status: str = Form(...),
    store: JsonStore = Depends(get_store),
):
    if status not in ORDER_UPDATE_STATUSES:
        return OrderOperationResponse(success=False, message="Invalid status")
    if not is_valid_id(order_id):
        return OrderOperationResponse(success=False, message="Invalid order ID")

    fields = {"status": status, "updated_at": utc_now_iso()}
    try:
        # an order may sit in either collection
        matched = store.update(ORDERS, order_id, fields) or store.update(COMPLETED_ORDERS, order_id, fields)
    except StoreError as e:
        return OrderOperationResponse(success=False, message=f"Database error: {e}")
    if not matched:
        return OrderOperationResponse(success=False, message="Order not found in either collection")
    logger.info("Order %s status -> %s", order_id, status)
    return OrderOperationResponse(success=True, message=f"Order status updated to {status}", order_id=order_id)
