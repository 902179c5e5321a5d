# File: foxy_admin/core/models.py
from __future__ import annotations

import datetime as dt
import math
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

ORDER_UPDATE_STATUSES = ("paid", "processing", "shipped", "completed", "cancelled")
# open orders live in "orders"; paid ones move to "completed_orders"
OPEN_ORDER_STATUSES = ("pending", "failed", "cancelled")
ATTENTION_ORDER_STATUSES = ("paid", "processing", "shipped")

QUOTE_STATUSES = ("pending", "quoted", "accepted", "completed", "cancelled")


def utc_now_iso() -> str:
    return dt.datetime.now(dt.timezone.utc).isoformat().replace("+00:00", "Z")


# ======================================================================
# Products
# ======================================================================

class Product(BaseModel):
    id: str
    name: str
    image_url: str = ""
    price: str = "0.00"
    quantity: int = 0
    description: str = ""
    adoptable: bool = False


class ProductForm(BaseModel):
    name: str = ""
    price: str = ""
    quantity: str = ""
    description: str = ""
    image_url: str = ""
    adoptable: Optional[str] = None  # "on" when the checkbox is ticked


class ProductFormError(ValueError):
    pass


def normalize_image_url(url: str) -> str:
    if not url or url.startswith("/"):
        return url
    return f"/{url}"


def validate_product_form(form: ProductForm) -> Tuple[float, int]:
    if not form.name.strip():
        raise ProductFormError("Product name cannot be empty")
    if len(form.name) > 255:
        raise ProductFormError("Product name must be less than 255 characters")

    try:
        price = float(form.price.strip())
    except ValueError:
        raise ProductFormError("Price must be a valid number") from None
    if not math.isfinite(price):
        raise ProductFormError("Price must be a valid number")
    if price < 0:
        raise ProductFormError("Price cannot be negative")
    if price > 999999.99:
        raise ProductFormError("Price cannot exceed £999,999.99")

    try:
        quantity = int(form.quantity.strip())
    except ValueError:
        raise ProductFormError("Quantity must be a valid number") from None
    if quantity < 0:
        raise ProductFormError("Quantity cannot be negative")
    if quantity > 999999:
        raise ProductFormError("Quantity cannot exceed 999,999")

    if len(form.description) > 5000:
        raise ProductFormError("Description must be less than 5,000 characters")

    return price, quantity


def product_fields(form: ProductForm, quantity: int) -> Dict[str, Any]:
    return {
        "name": form.name.strip(),
        "price": form.price.strip(),
        "quantity": quantity,
        "description": form.description,
        "image_url": normalize_image_url(form.image_url.strip()),
        "adoptable": form.adoptable is not None,
    }


# ======================================================================
# Orders
# ======================================================================

class ShippingAddress(BaseModel):
    line1: str = ""
    line2: Optional[str] = None
    city: str = ""
    postcode: str = ""
    country: str = ""


class OrderItem(BaseModel):
    product_id: str
    name: str
    quantity: int
    price: float
    line_total: float


class Order(BaseModel):
    id: str
    order_reference: str
    customer_name: str
    customer_email: str
    shipping_address: ShippingAddress = Field(default_factory=ShippingAddress)
    items: List[OrderItem] = Field(default_factory=list)
    subtotal: float = 0.0
    shipping_cost: float = 0.0
    total: float = 0.0
    currency: str = "GBP"
    status: str = "pending"
    created_at: str = ""
    updated_at: str = ""


# ======================================================================
# Badge quotes
# ======================================================================

class BadgeQuote(BaseModel):
    id: str
    num_colors: str
    double_sided: bool = False
    print_size: str = ""
    thickness: str = ""
    email: str = ""
    image_path: Optional[str] = None
    estimated_price: float = 0.0
    created_at: str = ""
    updated_at: str = ""
    status: str = "pending"


# ======================================================================
# Display helpers
# ======================================================================

def format_created_at(value: str) -> str:
    """'2025-01-01T12:00:00Z' -> '2025-01-01 12:00'; unparseable input is returned as-is."""
    try:
        parsed = dt.datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (ValueError, AttributeError):
        return value
    return parsed.strftime("%Y-%m-%d %H:%M")


def status_class(status: str, known: Tuple[str, ...]) -> str:
    return f"status-{status}" if status in known else "status-unknown"


def order_display(order: Order) -> Dict[str, Any]:
    data = order.model_dump()
    data["shipping_address"]["line2"] = order.shipping_address.line2 or ""
    data["formatted_total"] = f"£{order.total:.2f}"
    data["formatted_created_at"] = format_created_at(order.created_at)
    data["status_class"] = status_class(order.status, ORDER_UPDATE_STATUSES)
    return data


def quote_display(quote: BadgeQuote) -> Dict[str, Any]:
    data = quote.model_dump()
    data["double_sided"] = "yes" if quote.double_sided else "no"
    data["sided_text"] = "Double-sided" if quote.double_sided else "Single-sided"
    data["formatted_price"] = f"£{quote.estimated_price:.2f}"
    data["formatted_created_at"] = format_created_at(quote.created_at)
    data["status_class"] = status_class(quote.status, QUOTE_STATUSES)
    return data


class Pagination(BaseModel):
    current_page: int
    total_pages: int
    has_prev: bool
    has_next: bool
    start_item: int
    end_item: int
    total_items: int


def clamp_paging(page: Optional[int], page_size: Optional[int]) -> Tuple[int, int]:
    page = max(page or 1, 1)
    size = page_size or DEFAULT_PAGE_SIZE
    return page, min(max(size, 1), MAX_PAGE_SIZE)


def paginate(current_page: int, page_size: int, total_items: int) -> Pagination:
    total_pages = 1 if total_items == 0 else math.ceil(total_items / page_size)
    if total_items == 0:
        start_item, end_item = 0, 0
    else:
        start_item = (current_page - 1) * page_size + 1
        end_item = min(current_page * page_size, total_items)
    return Pagination(
        current_page=current_page,
        total_pages=total_pages,
        has_prev=current_page > 1,
        has_next=current_page < total_pages,
        start_item=start_item,
        end_item=end_item,
        total_items=total_items,
    )
