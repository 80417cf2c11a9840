from client_cart import (
    _STORAGE,
    ClientCart,
    add_local_product,
    find_order,
    get_storage,
    order_summary,
    peek_storage,
    record_order,
    save_storage,
)
from seed_data import PRODUCTS

EREN = PRODUCTS[0]
SOLD_OUT = dict(PRODUCTS[1], id=50, stock=0)


def make_cart():
    return ClientCart(get_storage("visitor"))


def test_add_and_increment():
    cart = make_cart()
    assert cart.add(EREN, 1)
    assert cart.add(EREN, 2)
    assert len(cart.items) == 1
    assert cart.count() == 3
    assert cart.total() == round(89.99 * 3, 2)


def test_out_of_stock_and_unknown_products_are_not_added():
    cart = make_cart()
    assert not cart.add(SOLD_OUT, 1)
    assert not cart.add(None, 1)
    assert cart.items == []


def test_quantity_never_drops_below_one():
    cart = make_cart()
    cart.add(EREN, 2)
    cart.update_quantity(EREN["id"], 0)
    assert cart.find(EREN["id"])["quantity"] == 1
    cart.update_quantity(EREN["id"], -4)
    assert cart.find(EREN["id"])["quantity"] == 1


def test_update_missing_item_is_ignored():
    cart = make_cart()
    cart.update_quantity(99, 3)
    assert cart.items == []


def test_remove_and_clear():
    cart = make_cart()
    cart.add(EREN, 1)
    cart.add(PRODUCTS[2], 1)
    cart.remove(EREN["id"])
    assert [i["product_id"] for i in cart.items] == [PRODUCTS[2]["id"]]
    cart.clear()
    assert cart.items == []


def test_stock_split_uses_snapshot():
    cart = make_cart()
    cart.add(EREN, 1)
    cart.items.append({"product_id": 50, "quantity": 1, "product": {"id": 50, "title": "Gone", "price": 10.0, "image": "", "stock": 0}})
    assert [i["product_id"] for i in cart.in_stock_items()] == [EREN["id"]]
    assert [i["product_id"] for i in cart.out_of_stock_items()] == [50]
    assert cart.summary()["subtotal"] == 89.99


def test_summary_charges_shipping_below_threshold():
    items = [{"product": {"price": 100.0}, "quantity": 2}]
    assert order_summary(items) == {"subtotal": 200.0, "shipping": 800, "tax": 16.0, "total": 1016.0}


def test_summary_free_shipping_above_threshold():
    items = [{"product": {"price": 7000.0}, "quantity": 1}]
    summary = order_summary(items)
    assert summary["shipping"] == 0
    assert summary["total"] == 7560.0


def test_local_products_parse_form_values():
    storage = get_storage("maker")
    product = add_local_product(storage, {
        "title": "Gojo Acrylic Stand",
        "price": "12.5",
        "stock": "4",
        "tags": "jjk, gojo , ,stand",
        "category": "figures",
    })
    again = add_local_product(storage, {"title": "Second", "price": 1, "stock": 1})
    assert product["tags"] == ["jjk", "gojo", "stand"]
    assert product["price"] == 12.5
    assert product["stock"] == 4
    assert product["stars"] == 5
    assert again["id"] != product["id"]
    assert len(storage["products"]) == 2


def test_record_order_clears_cart():
    storage = get_storage("buyer")
    cart = ClientCart(storage)
    cart.add(EREN, 2)
    order = record_order(storage, cart, {"full_name": "Eren"})
    assert order["id"] == 1
    assert order["status"] == "confirmed"
    assert order["summary"]["subtotal"] == 179.98
    assert cart.items == []
    assert find_order(storage, 1) is order
    assert find_order(storage, 2) is None


def test_storage_is_per_session():
    get_storage("a")["cart"].append({"product_id": 1})
    assert get_storage("b")["cart"] == []


def test_quantity_is_capped_at_stock():
    cart = make_cart()
    cart.add(EREN, 40)
    assert cart.find(EREN["id"])["quantity"] == EREN["stock"]
    cart.add(EREN, 1)
    assert cart.find(EREN["id"])["quantity"] == EREN["stock"]


def test_peeking_unknown_session_keeps_nothing():
    storage = peek_storage("stranger")
    storage["cart"].append({"product_id": 1})
    assert "stranger" not in _STORAGE
    save_storage("stranger", storage)
    assert get_storage("stranger")["cart"] == [{"product_id": 1}]
