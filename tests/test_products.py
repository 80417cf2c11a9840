def test_list_products_defaults(client):
    resp = client.get("/api/products")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 6
    assert body["page"] == 1
    assert body["totalPages"] == 1
    assert [p["id"] for p in body["products"]] == [1, 2, 3, 4, 5, 6]


def test_filter_by_category(client):
    body = client.get("/api/products", params={"category": "figures"}).json()
    assert {p["id"] for p in body["products"]} == {1, 4}
    assert body["total"] == 2


def test_search_matches_title_description_and_tags(client):
    by_title = client.get("/api/products", params={"search": "LUFFY"}).json()
    assert [p["id"] for p in by_title["products"]] == [4]

    by_tag = client.get("/api/products", params={"search": "wall-art"}).json()
    assert [p["id"] for p in by_tag["products"]] == [2]

    by_description = client.get("/api/products", params={"search": "led light"}).json()
    assert [p["id"] for p in by_description["products"]] == [6]


def test_price_bounds_are_inclusive(client):
    body = client.get("/api/products", params={"minPrice": 19.99, "maxPrice": 75.99}).json()
    assert {p["id"] for p in body["products"]} == {2, 4, 5}


def test_pagination(client):
    body = client.get("/api/products", params={"page": 2, "limit": 4}).json()
    assert [p["id"] for p in body["products"]] == [5, 6]
    assert body["total"] == 6
    assert body["totalPages"] == 2


def test_page_past_the_end_is_empty(client):
    body = client.get("/api/products", params={"page": 5, "limit": 4}).json()
    assert body["products"] == []
    assert body["total"] == 6


def test_sort_by_price(client):
    low = client.get("/api/products", params={"sort": "price-low"}).json()["products"]
    assert [p["price"] for p in low] == sorted(p["price"] for p in low)
    high = client.get("/api/products", params={"sort": "price-high"}).json()["products"]
    assert high[0]["id"] == 1


def test_unknown_sort_is_rejected(client):
    resp = client.get("/api/products", params={"sort": "random"})
    assert resp.status_code == 400


def test_invalid_page_is_bad_request(client):
    resp = client.get("/api/products", params={"page": 0})
    assert resp.status_code == 400
    assert "page" in resp.json()["detail"]


def test_get_product(client):
    resp = client.get("/api/products/3")
    assert resp.status_code == 200
    product = resp.json()
    assert product["title"] == "Naruto Kunai Keychain"
    assert product["stock"] == 100
    assert "naruto" in product["tags"]


def test_get_missing_product(client):
    resp = client.get("/api/products/999")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Product not found"


def test_get_product_with_non_numeric_id(client):
    assert client.get("/api/products/abc").status_code == 400


def test_blog_listing_and_filters(client):
    posts = client.get("/api/blog").json()
    assert len(posts) == 6
    assert posts[0]["publishedAt"] == "2024-01-15"

    guides = client.get("/api/blog", params={"category": "Guides"}).json()
    assert {p["id"] for p in guides} == {2, 4}

    found = client.get("/api/blog", params={"search": "keychain"}).json()
    assert [p["id"] for p in found] == [6]


def test_blog_post_detail(client):
    assert client.get("/api/blog/1").json()["readTime"] == 8
    assert client.get("/api/blog/42").status_code == 404


def test_health(client):
    body = client.get("/health").json()
    assert body["status"] == "healthy"
    assert set(body) == {"status", "timestamp"}
