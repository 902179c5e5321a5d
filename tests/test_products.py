# File: tests/test_products.py
from __future__ import annotations

import json

import pytest

from foxy_admin.core.models import ProductForm, ProductFormError, validate_product_form

PRODUCTS = "/products"

FORM = {"name": "Fox Badge", "price": "4.50", "quantity": "10", "description": "Enamel fox", "image_url": "img/fox.png"}

def _stored(data_dir):
    return json.loads((data_dir / "products.json").read_text(encoding="utf-8"))

def test_list_empty(test_client):
    r = test_client.get(PRODUCTS)
    assert r.status_code == 200
    assert "No products yet." in r.text

def test_create_and_list(test_client, data_dir):
    r = test_client.post(PRODUCTS + "/new", data=FORM, follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/products?success=created"

    [p] = _stored(data_dir)
    assert p["name"] == "Fox Badge"
    assert p["quantity"] == 10
    assert p["image_url"] == "/img/fox.png"
    assert p["adoptable"] is False

    page = test_client.get(PRODUCTS + "?success=created")
    assert "Product created" in page.text
    assert "Fox Badge" in page.text

def test_create_invalid_rerenders_form(test_client, data_dir):
    r = test_client.post(PRODUCTS + "/new", data={**FORM, "price": "-1"})
    assert r.status_code == 400
    assert "Price cannot be negative" in r.text
    assert not (data_dir / "products.json").exists()

def test_edit_form_and_update(test_client, seed, data_dir):
    seed("products", [{"id": "p1", "name": "Old", "price": "1.00", "quantity": 1}])
    r = test_client.get(PRODUCTS + "/edit/p1")
    assert r.status_code == 200
    assert 'value="Old"' in r.text

    r = test_client.post(PRODUCTS + "/edit/p1", data={**FORM, "adoptable": "on"}, follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/products?success=updated"
    [p] = _stored(data_dir)
    assert p["name"] == "Fox Badge"
    assert p["adoptable"] is True

def test_edit_unknown_and_bad_id(test_client):
    assert test_client.get(PRODUCTS + "/edit/missing").status_code == 404
    assert test_client.get(PRODUCTS + "/edit/bad%20id!").status_code == 400
    assert test_client.post(PRODUCTS + "/edit/missing", data=FORM).status_code == 404

def test_update_invalid_keeps_product(test_client, seed, data_dir):
    seed("products", [{"id": "p1", "name": "Old", "price": "1.00", "quantity": 1}])
    r = test_client.post(PRODUCTS + "/edit/p1", data={**FORM, "quantity": "lots"})
    assert r.status_code == 400
    assert "Quantity must be a valid number" in r.text
    assert _stored(data_dir)[0]["name"] == "Old"

def test_delete(test_client, seed, data_dir):
    seed("products", [{"id": "p1", "name": "Old"}, {"id": "p2", "name": "Keep"}])
    r = test_client.delete(PRODUCTS + "/delete/p1")
    assert r.json() == {"success": True, "message": "Product deleted successfully", "product_id": "p1"}
    assert [p["id"] for p in _stored(data_dir)] == ["p2"]

    r = test_client.delete(PRODUCTS + "/delete/p1")
    assert r.json()["success"] is False
    assert r.json()["message"] == "Product not found"

def test_list_reports_corrupt_store(test_client, data_dir):
    (data_dir / "products.json").write_text("{not json", encoding="utf-8")
    r = test_client.get(PRODUCTS)
    assert r.status_code == 200
    assert "Database error" in r.text

@pytest.mark.parametrize("overrides, message", [
    ({"name": "  "}, "Product name cannot be empty"),
    ({"name": "a" * 256}, "Product name must be less than 255 characters"),
    ({"price": "abc"}, "Price must be a valid number"),
    ({"price": "nan"}, "Price must be a valid number"),
    ({"price": "1000000.00"}, "Price cannot exceed £999,999.99"),
    ({"quantity": "-5"}, "Quantity cannot be negative"),
    ({"quantity": "1000000"}, "Quantity cannot exceed 999,999"),
    ({"description": "a" * 5001}, "Description must be less than 5,000 characters"),
])
def test_validate_product_form_rejects(overrides, message):
    form = ProductForm(**{**FORM, **overrides})
    with pytest.raises(ProductFormError, match=message):
        validate_product_form(form)

def test_validate_product_form_zero_values():
    assert validate_product_form(ProductForm(name="Free", price="0.00", quantity="0")) == (0.0, 0)
