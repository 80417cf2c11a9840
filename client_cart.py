"""
Browser-side state for the storefront.

Each storefront visitor gets a session id (cookie) that keys a small dict of
"browser storage": the client cart, products the visitor added themselves and
the order confirmations shown after checkout. None of it is shared with the
API's server-side cart.
"""

import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

FREE_SHIPPING_THRESHOLD = 6700
SHIPPING_FEE = 800
TAX_RATE = 0.08

_STORAGE: Dict[str, Dict[str, Any]] = {}


def _empty_storage() -> Dict[str, Any]:
    return {"cart": [], "products": [], "orders": []}


def get_storage(session_id: str) -> Dict[str, Any]:
    return _STORAGE.setdefault(session_id, _empty_storage())


def peek_storage(session_id: str) -> Dict[str, Any]:
    """Storage for reading only; unknown sessions get a blank dict that is not kept."""
    return _STORAGE.get(session_id) or _empty_storage()


def save_storage(session_id: str, storage: Dict[str, Any]) -> None:
    _STORAGE[session_id] = storage


def reset_storage() -> None:
    _STORAGE.clear()


def order_summary(items: List[Dict[str, Any]]) -> Dict[str, float]:
    subtotal = sum(item["product"]["price"] * item["quantity"] for item in items)
    shipping = 0 if subtotal > FREE_SHIPPING_THRESHOLD else SHIPPING_FEE
    tax = subtotal * TAX_RATE
    return {
        "subtotal": round(subtotal, 2),
        "shipping": shipping,
        "tax": round(tax, 2),
        "total": round(subtotal + shipping + tax, 2),
    }


class ClientCart:
    """The visitor's cart, kept in their browser storage."""

    def __init__(self, storage: Dict[str, Any]):
        self.storage = storage

    @property
    def items(self) -> List[Dict[str, Any]]:
        return self.storage["cart"]

    def find(self, product_id: int) -> Optional[Dict[str, Any]]:
        return next((item for item in self.items if item["product_id"] == product_id), None)

    def add(self, product: Optional[Dict[str, Any]], quantity: int = 1) -> bool:
        """Add ``quantity`` of ``product``, capped at its stock; returns False when nothing was added."""
        if not product or product.get("stock", 0) == 0:
            return False
        existing = self.find(product["id"])
        if existing:
            existing["quantity"] = min(existing["quantity"] + quantity, product["stock"])
        else:
            self.items.append({
                "product_id": product["id"],
                "quantity": min(quantity, product["stock"]),
                "product": {k: product.get(k) for k in ("id", "title", "price", "image", "stock")},
            })
        return True

    def update_quantity(self, product_id: int, quantity: int) -> None:
        item = self.find(product_id)
        if item:
            item["quantity"] = max(1, quantity)

    def remove(self, product_id: int) -> None:
        self.storage["cart"] = [item for item in self.items if item["product_id"] != product_id]

    def clear(self) -> None:
        self.storage["cart"] = []

    def in_stock_items(self) -> List[Dict[str, Any]]:
        return [item for item in self.items if item["product"]["stock"] > 0]

    def out_of_stock_items(self) -> List[Dict[str, Any]]:
        return [item for item in self.items if item["product"]["stock"] == 0]

    def count(self) -> int:
        return sum(item["quantity"] for item in self.items)

    def total(self) -> float:
        return round(sum(item["product"]["price"] * item["quantity"] for item in self.items), 2)

    def summary(self) -> Dict[str, float]:
        return order_summary(self.in_stock_items())


def local_products(storage: Dict[str, Any]) -> List[Dict[str, Any]]:
    return storage["products"]


def add_local_product(storage: Dict[str, Any], fields: Dict[str, Any]) -> Dict[str, Any]:
    """Store a visitor-created product. It never reaches the API catalog."""
    product = {
        "id": int(time.time() * 1000),
        "title": fields["title"],
        "price": float(fields["price"]),
        "description": fields.get("description", ""),
        "image": fields.get("image", ""),
        "category": fields.get("category", ""),
        "stock": int(fields.get("stock") or 0),
        "tags": [t.strip() for t in (fields.get("tags") or "").split(",") if t.strip()],
        "stars": float(fields.get("stars") or 5),
    }
    # Two products added within the same millisecond would collide
    existing = {p["id"] for p in storage["products"]}
    while product["id"] in existing:
        product["id"] += 1
    storage["products"].append(product)
    return product


def record_order(storage: Dict[str, Any], cart: ClientCart, shipping_address: Dict[str, str]) -> Dict[str, Any]:
    """Turn the in-stock part of the cart into a confirmation and empty the cart."""
    items = cart.in_stock_items()
    order = {
        "id": len(storage["orders"]) + 1,
        "items": items,
        "summary": order_summary(items),
        "shipping_address": shipping_address,
        "status": "confirmed",
        "created_at": datetime.now(timezone.utc).isoformat(),
    }
    storage["orders"].append(order)
    cart.clear()
    return order


def find_order(storage: Dict[str, Any], order_id: int) -> Optional[Dict[str, Any]]:
    return next((o for o in storage["orders"] if o["id"] == order_id), None)
