# File: foxy_admin/routers/products.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import BaseModel

from foxy_admin.core.models import (
    Product,
    ProductForm,
    ProductFormError,
    normalize_image_url,
    product_fields,
    validate_product_form,
)
from foxy_admin.core.store import PRODUCTS, JsonStore, StoreError, is_valid_id
from foxy_admin.deps.web import get_store, render

router = APIRouter(prefix="/products", tags=["products"])

logger = logging.getLogger("foxy_admin.products")

SUCCESS_MESSAGES = {
    "created": "Product created",
    "updated": "Product updated",
    "deleted": "Product deleted",
}


class ProductOperationResponse(BaseModel):
    success: bool
    message: str
    product_id: Optional[str] = None


def product_form(
    name: str = Form(""),
    price: str = Form(""),
    quantity: str = Form(""),
    description: str = Form(""),
    image_url: str = Form(""),
    adoptable: Optional[str] = Form(None),
) -> ProductForm:
    return ProductForm(
        name=name, price=price, quantity=quantity,
        description=description, image_url=image_url, adoptable=adoptable,
    )


def _load_product(store: JsonStore, product_id: str) -> Product:
    if not is_valid_id(product_id):
        raise HTTPException(status_code=400, detail="Invalid product ID")
    try:
        raw = store.get(PRODUCTS, product_id)
    except StoreError as e:
        raise HTTPException(status_code=500, detail=f"Database error: {e}")
    if raw is None:
        raise HTTPException(status_code=404, detail="Product not found")
    product = Product(**raw)
    product.image_url = normalize_image_url(product.image_url)
    return product


@router.get("", response_class=HTMLResponse)
def list_products(request: Request, success: str = "", store: JsonStore = Depends(get_store)):
    error_message = ""
    try:
        products = [Product(**p) for p in store.all(PRODUCTS)]
    except StoreError as e:
        products = []
        error_message = f"Database error: {e}"
    for p in products:
        p.image_url = normalize_image_url(p.image_url)
    return render(
        request, "products.html",
        products=products,
        success_message=SUCCESS_MESSAGES.get(success, ""),
        error_message=error_message,
    )


@router.get("/new", response_class=HTMLResponse)
def show_create_form(request: Request):
    return render(request, "product_form.html", product=None, form=ProductForm(), error_message="")


@router.post("/new")
def create_product(request: Request, form: ProductForm = Depends(product_form), store: JsonStore = Depends(get_store)):
    try:
        _, quantity = validate_product_form(form)
        created = store.insert(PRODUCTS, product_fields(form, quantity))
    except (ProductFormError, StoreError) as e:
        return render(request, "product_form.html", status_code=400, product=None, form=form, error_message=str(e))
    logger.info("Created product %s (%s)", created["id"], created["name"])
    return RedirectResponse("/products?success=created", status_code=303)


@router.get("/edit/{product_id}", response_class=HTMLResponse)
def show_edit_form(request: Request, product_id: str, store: JsonStore = Depends(get_store)):
    product = _load_product(store, product_id)
    form = ProductForm(
        name=product.name, price=product.price, quantity=str(product.quantity),
        description=product.description, image_url=product.image_url,
        adoptable="on" if product.adoptable else None,
    )
    return render(request, "product_form.html", product=product, form=form, error_message="")


@router.post("/edit/{product_id}")
def update_product(
    request: Request,
    product_id: str,
    form: ProductForm = Depends(product_form),
    store: JsonStore = Depends(get_store),
):
    product = _load_product(store, product_id)
    try:
        _, quantity = validate_product_form(form)
        matched = store.update(PRODUCTS, product_id, product_fields(form, quantity))
    except (ProductFormError, StoreError) as e:
        return render(request, "product_form.html", status_code=400, product=product, form=form, error_message=str(e))
    if not matched:
        raise HTTPException(status_code=404, detail="Product not found")
    logger.info("Updated product %s", product_id)
    return RedirectResponse("/products?success=updated", status_code=303)


@router.delete("/delete/{product_id}", response_model=ProductOperationResponse)
def delete_product(product_id: str, store: JsonStore = Depends(get_store)):
    if not is_valid_id(product_id):
        return ProductOperationResponse(success=False, message="Invalid product ID")
    try:
        deleted = store.delete(PRODUCTS, product_id)
    except StoreError as e:
        return ProductOperationResponse(success=False, message=f"Database error: {e}")
    if not deleted:
        return ProductOperationResponse(success=False, message="Product not found")
    return ProductOperationResponse(success=True, message="Product deleted successfully", product_id=product_id)
