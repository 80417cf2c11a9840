"""
Storefront

Server-rendered pages for shoppers: catalog browsing, a cart kept in the
visitor's browser storage, checkout, the blog and an "add product" form
whose products stay in that visitor's storage.

Run with:
    uvicorn storefront:app --port 3000
"""

import logging
from typing import Any, Dict, List, Optional
from uuid import uuid4

from fastapi import FastAPI, Form, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, RedirectResponse

import pages
from catalog import filter_posts, filter_products, sort_products, with_default_stars
from client_cart import ClientCart, add_local_product, find_order, local_products, peek_storage, record_order, save_storage
from config import configure_logging, settings
from database import get_documents

logger = logging.getLogger(__name__)

SESSION_COOKIE = "animestore_session"

app = FastAPI(title="Anime Store", docs_url=None, redoc_url=None)


class Visit:
    """The current visitor's session id, browser storage and cart."""

    def __init__(self, request: Request):
        self.session_id = request.cookies.get(SESSION_COOKIE) or uuid4().hex
        self.storage = peek_storage(self.session_id)
        self.cart = ClientCart(self.storage)

    def save(self) -> None:
        save_storage(self.session_id, self.storage)

    def products(self) -> List[Dict[str, Any]]:
        return [with_default_stars(p) for p in get_documents("product") + local_products(self.storage)]

    def find_product(self, product_id: int) -> Optional[Dict[str, Any]]:
        return next((p for p in self.products() if p["id"] == product_id), None)

    def page(self, html: str, status_code: int = 200) -> HTMLResponse:
        return self._remember(HTMLResponse(html, status_code=status_code))

    def redirect(self, url: str) -> RedirectResponse:
        return self._remember(RedirectResponse(url, status_code=303))

    def _remember(self, response):
        response.set_cookie(SESSION_COOKIE, self.session_id, httponly=True, samesite="lax")
        return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    visit = Visit(request)
    return visit.page(pages.not_found_page("The submitted form was invalid.", visit.cart.count()), status_code=400)


@app.get("/", response_class=HTMLResponse)
def home(request: Request):
    visit = Visit(request)
    posts = sorted(get_documents("blog_post"), key=lambda p: p["published_at"], reverse=True)
    return visit.page(pages.home_page(visit.products()[:6], posts[:3], visit.cart.count()))


@app.get("/products", response_class=HTMLResponse)
def products(
    request: Request,
    category: str = "",
    search: str = "",
    min_price: Optional[float] = Query(None, alias="minPrice"),
    max_price: Optional[float] = Query(None, alias="maxPrice"),
    sort_by: str = Query("title", alias="sortBy"),
):
    visit = Visit(request)
    found = filter_products(visit.products(), category or None, search or None, min_price, max_price)
    try:
        found = sort_products(found, sort_by)
    except ValueError:
        found = sort_products(found, "title")
    filters = {
        "category": category,
        "search": search,
        "min_price": min_price,
        "max_price": max_price,
        "sort_by": sort_by,
    }
    return visit.page(pages.products_page(found, filters, visit.cart.count()))


@app.get("/products/{product_id}", response_class=HTMLResponse)
def product_detail(request: Request, product_id: int):
    visit = Visit(request)
    product = visit.find_product(product_id)
    if not product:
        return visit.page(pages.not_found_page("Product not found", visit.cart.count()), status_code=404)
    return visit.page(pages.product_detail_page(product, visit.cart.count()))


@app.get("/add-product", response_class=HTMLResponse)
def add_product_form(request: Request):
    visit = Visit(request)
    return visit.page(pages.add_product_page(visit.cart.count()))


@app.post("/add-product")
def add_product(
    request: Request,
    title: str = Form(...),
    description: str = Form(""),
    price: float = Form(..., ge=0),
    image: str = Form(""),
    category: str = Form(""),
    stock: int = Form(..., ge=0),
    tags: str = Form(""),
    stars: float = Form(5, ge=1, le=5),
):
    visit = Visit(request)
    if not title.strip():
        return visit.page(pages.add_product_page(visit.cart.count(), error="Title is required"), status_code=400)
    product = add_local_product(visit.storage, {
        "title": title.strip(),
        "description": description,
        "price": price,
        "image": image,
        "category": category,
        "stock": stock,
        "tags": tags,
        "stars": stars,
    })
    visit.save()
    logger.debug("Session %s added local product %s", visit.session_id, product["id"])
    return visit.redirect("/products")


# Cart
@app.get("/cart", response_class=HTMLResponse)
def cart(request: Request):
    visit = Visit(request)
    html = pages.cart_page(
        visit.cart.in_stock_items(),
        visit.cart.out_of_stock_items(),
        visit.cart.summary(),
        visit.cart.count(),
    )
    return visit.page(html)


@app.post("/cart/add")
def cart_add(request: Request, product_id: int = Form(..., alias="productId"), quantity: int = Form(1, ge=1)):
    visit = Visit(request)
    if visit.cart.add(visit.find_product(product_id), quantity):
        visit.save()
    return visit.redirect("/cart")


@app.post("/cart/update")
def cart_update(request: Request, product_id: int = Form(..., alias="productId"), quantity: int = Form(...)):
    visit = Visit(request)
    visit.cart.update_quantity(product_id, quantity)
    return visit.redirect("/cart")


@app.post("/cart/remove")
def cart_remove(request: Request, product_id: int = Form(..., alias="productId")):
    visit = Visit(request)
    visit.cart.remove(product_id)
    return visit.redirect("/cart")


# Checkout
@app.get("/checkout", response_class=HTMLResponse)
def checkout_form(request: Request):
    visit = Visit(request)
    if not visit.cart.in_stock_items():
        return visit.redirect("/cart")
    return visit.page(pages.checkout_page(visit.cart.summary(), visit.cart.count()))


@app.post("/checkout")
def checkout(
    request: Request,
    full_name: str = Form(""),
    address: str = Form(""),
    city: str = Form(""),
    postal_code: str = Form(""),
    country: str = Form(""),
    phone: str = Form(""),
):
    visit = Visit(request)
    if not visit.cart.in_stock_items():
        return visit.redirect("/cart")
    shipping = {
        "full_name": full_name.strip(),
        "address": address.strip(),
        "city": city.strip(),
        "postal_code": postal_code.strip(),
        "country": country.strip(),
        "phone": phone.strip(),
    }
    missing = [label for name, label, required in pages.CHECKOUT_FIELDS if required and not shipping[name]]
    if missing:
        html = pages.checkout_page(
            visit.cart.summary(),
            visit.cart.count(),
            error=f"Missing: {', '.join(missing)}",
            values=shipping,
        )
        return visit.page(html, status_code=400)
    order = record_order(visit.storage, visit.cart, shipping)
    visit.save()
    logger.info("Session %s confirmed storefront order %s", visit.session_id, order["id"])
    return visit.redirect(f"/order-confirmation/{order['id']}")


@app.get("/order-confirmation/{order_id}", response_class=HTMLResponse)
def order_confirmation(request: Request, order_id: int):
    visit = Visit(request)
    order = find_order(visit.storage, order_id)
    if not order:
        return visit.page(pages.not_found_page("Order not found", visit.cart.count()), status_code=404)
    return visit.page(pages.confirmation_page(order, visit.cart.count()))


# Blog
@app.get("/blog", response_class=HTMLResponse)
def blog(request: Request, search: str = "", category: str = ""):
    visit = Visit(request)
    posts = filter_posts(get_documents("blog_post"), category or None, search or None)
    return visit.page(pages.blog_page(posts, search, category, visit.cart.count()))


@app.get("/blog/{post_id}", response_class=HTMLResponse)
def blog_post(request: Request, post_id: int):
    visit = Visit(request)
    post = next((p for p in get_documents("blog_post", {"id": post_id})), None)
    if not post:
        return visit.page(pages.not_found_page("Post not found", visit.cart.count()), status_code=404)
    return visit.page(pages.blog_post_page(post, visit.cart.count()))


@app.get("/about", response_class=HTMLResponse)
def about(request: Request):
    visit = Visit(request)
    return visit.page(pages.about_page(visit.cart.count()))


if __name__ == "__main__":
    import uvicorn
    configure_logging()
    uvicorn.run(app, host="0.0.0.0", port=settings.storefront_port)
