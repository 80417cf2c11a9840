import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

import main
from errors import install_error_handlers


def test_unexpected_error_is_logged_and_hidden(monkeypatch, caplog):
    def broken(*args, **kwargs):
        raise RuntimeError("catalog exploded")

    monkeypatch.setattr(main, "get_documents", broken)
    client = TestClient(main.app, raise_server_exceptions=False)
    with caplog.at_level(logging.ERROR, logger="errors"):
        resp = client.get("/api/products")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Server error"}
    assert "catalog exploded" not in resp.text
    assert any("/api/products" in record.getMessage() for record in caplog.records)


def test_http_errors_keep_their_status(client):
    resp = client.get("/api/blog/404")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Post not found"}


def test_validation_error_detail_names_the_field():
    app = FastAPI()
    install_error_handlers(app)

    @app.get("/items/{item_id}")
    def read_item(item_id: int, limit: int = 10):
        return {"item_id": item_id, "limit": limit}

    client = TestClient(app)
    resp = client.get("/items/1", params={"limit": "lots"})
    assert resp.status_code == 400
    assert resp.json()["detail"].startswith("limit: ")
    assert client.get("/items/one").json()["detail"].startswith("item_id: ")
