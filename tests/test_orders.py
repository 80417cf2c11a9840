def test_order_from_cart_clears_cart(client, auth, shipping):
    client.post("/api/cart/add", json={"productId": 1, "quantity": 2}, headers=auth)
    client.post("/api/cart/add", json={"productId": 3, "quantity": 1}, headers=auth)

    resp = client.post("/api/orders", json={"shippingAddress": shipping}, headers=auth)
    assert resp.status_code == 201
    order = resp.json()
    assert order["id"] == 1
    assert order["userId"] == 1
    assert order["status"] == "confirmed"
    assert order["total"] == round(89.99 * 2 + 12.99, 2)
    assert order["shippingAddress"]["city"] == "Shiganshina"
    assert [i["productId"] for i in order["items"]] == [1, 3]
    assert order["createdAt"]

    assert client.get("/api/cart", headers=auth).json() == []


def test_order_with_explicit_items_and_total(client, auth, shipping):
    items = [{
        "productId": 2,
        "quantity": 1,
        "product": {"id": 2, "title": "Demon Slayer Tanjiro Poster", "price": 24.99, "image": "", "stock": 50},
    }]
    resp = client.post("/api/orders", json={"shippingAddress": shipping, "items": items, "total": 30}, headers=auth)
    assert resp.status_code == 201
    assert resp.json()["total"] == 30


def test_order_with_empty_cart(client, auth, shipping):
    resp = client.post("/api/orders", json={"shippingAddress": shipping}, headers=auth)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Cart is empty"


def test_order_requires_shipping_address(client, auth, shipping):
    client.post("/api/cart/add", json={"productId": 1, "quantity": 1}, headers=auth)
    resp = client.post("/api/orders", json={}, headers=auth)
    assert resp.status_code == 400
    assert client.get("/api/cart", headers=auth).json() != []


def test_order_requires_auth(client, shipping):
    assert client.post("/api/orders", json={"shippingAddress": shipping}).status_code == 401


def test_order_ids_are_monotonic_across_users(client, register, shipping):
    first = register(email="bertholdt@animestore.io")
    second = register(email="annie@animestore.io")
    ids = []
    for headers in (first, second, first):
        client.post("/api/cart/add", json={"productId": 6, "quantity": 1}, headers=headers)
        ids.append(client.post("/api/orders", json={"shippingAddress": shipping}, headers=headers).json()["id"])
    assert ids == [1, 2, 3]


def test_users_only_see_their_own_orders(client, register, shipping):
    first = register(email="ymir@animestore.io")
    second = register(email="historia@animestore.io")
    client.post("/api/cart/add", json={"productId": 6, "quantity": 1}, headers=first)
    order_id = client.post("/api/orders", json={"shippingAddress": shipping}, headers=first).json()["id"]

    assert [o["id"] for o in client.get("/api/orders", headers=first).json()] == [order_id]
    assert client.get("/api/orders", headers=second).json() == []
    assert client.get(f"/api/orders/{order_id}", headers=first).status_code == 200
    resp = client.get(f"/api/orders/{order_id}", headers=second)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Order not found"
