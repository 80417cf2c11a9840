"""HTML rendering for the storefront pages."""

from html import escape
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

from seed_data import BLOG_CATEGORIES, CATEGORIES

SITE_NAME = "AnimeStore"


def money(amount: float) -> str:
    return f"NRS {amount:,.2f}"


def stars(rating: float) -> str:
    full = int(round(rating))
    return "★" * full + "☆" * (5 - full)


def layout(title: str, body: str, cart_count: int = 0) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{escape(title)} | {SITE_NAME}</title>
</head>
<body>
  <header>
    <nav>
      <a href="/">{SITE_NAME}</a>
      <a href="/products">Products</a>
      <a href="/blog">Blog</a>
      <a href="/about">About</a>
      <a href="/add-product">Add Product</a>
      <a href="/cart" id="cart-link">Cart ({cart_count})</a>
    </nav>
  </header>
  <main>
{body}
  </main>
  <footer><p>&copy; {SITE_NAME}</p></footer>
</body>
</html>"""


def _category_label(category: str) -> str:
    return category[:1].upper() + category[1:]


def product_card(product: Dict[str, Any]) -> str:
    stock_note = "Out of stock" if product["stock"] == 0 else f"{product['stock']} in stock"
    add_form = ""
    if product["stock"] > 0:
        add_form = f"""
      <form method="post" action="/cart/add">
        <input type="hidden" name="productId" value="{product['id']}">
        <input type="hidden" name="quantity" value="1">
        <button type="submit">Add to Cart</button>
      </form>"""
    return f"""
    <article class="product-card" data-product-id="{product['id']}">
      <a href="/products/{product['id']}">
        <img src="{escape(product['image'])}" alt="{escape(product['title'])}">
        <h3>{escape(product['title'])}</h3>
      </a>
      <p class="rating">{stars(product['stars'])}</p>
      <p class="price">{money(product['price'])}</p>
      <p class="stock">{stock_note}</p>{add_form}
    </article>"""


def post_card(post: Dict[str, Any]) -> str:
    return f"""
    <article class="post-card">
      <a href="/blog/{post['id']}"><h3>{escape(post['title'])}</h3></a>
      <p class="meta">{escape(post['author'])} &middot; {escape(post['published_at'])} &middot; {post['read_time']} min read &middot; {escape(post['category'])}</p>
      <p>{escape(post['excerpt'])}</p>
    </article>"""


def home_page(featured: List[Dict[str, Any]], posts: List[Dict[str, Any]], cart_count: int) -> str:
    categories = "".join(
        f'<li><a href="/products?{urlencode({"category": c})}">{_category_label(c)}</a></li>' for c in CATEGORIES
    )
    body = f"""
    <section class="hero">
      <h1>Your Anime Merchandise Destination</h1>
      <p>Figures, posters and keychains from the series you love.</p>
      <a href="/products">Shop Now</a>
    </section>
    <section class="categories"><h2>Shop by Category</h2><ul>{categories}</ul></section>
    <section class="featured"><h2>Featured Products</h2>{"".join(product_card(p) for p in featured)}</section>
    <section class="latest-posts"><h2>From the Blog</h2>{"".join(post_card(p) for p in posts)}</section>"""
    return layout("Home", body, cart_count)


def products_page(products: List[Dict[str, Any]], filters: Dict[str, Any], cart_count: int) -> str:
    heading = _category_label(filters["category"]) if filters.get("category") else "All Products"
    category_options = "".join(
        f'<option value="{c}"{" selected" if filters.get("category") == c else ""}>{_category_label(c)}</option>'
        for c in CATEGORIES
    )
    sort_options = "".join(
        f'<option value="{key}"{" selected" if filters.get("sort_by") == key else ""}>{label}</option>'
        for key, label in (("title", "Name"), ("price-low", "Price: Low to High"), ("price-high", "Price: High to Low"))
    )
    listing = "".join(product_card(p) for p in products) or "<p>No products match your filters.</p>"
    body = f"""
    <h1>{escape(heading)}</h1>
    <p class="count">{len(products)} products found</p>
    <form method="get" action="/products" class="filters">
      <input type="search" name="search" value="{escape(filters.get('search') or '')}" placeholder="Search products">
      <select name="category"><option value="">All</option>{category_options}</select>
      <input type="number" step="0.01" name="minPrice" value="{escape(str(filters.get('min_price') or ''))}" placeholder="Min">
      <input type="number" step="0.01" name="maxPrice" value="{escape(str(filters.get('max_price') or ''))}" placeholder="Max">
      <select name="sortBy">{sort_options}</select>
      <button type="submit">Apply</button>
      <a href="/products">Clear</a>
    </form>
    <section class="product-grid">{listing}</section>"""
    return layout(heading, body, cart_count)


def product_detail_page(product: Dict[str, Any], cart_count: int) -> str:
    tags = "".join(f"<li>{escape(t)}</li>" for t in product.get("tags", []))
    if product["stock"] > 0:
        purchase = f"""
      <form method="post" action="/cart/add">
        <input type="hidden" name="productId" value="{product['id']}">
        <input type="number" name="quantity" value="1" min="1" max="{product['stock']}">
        <button type="submit">Add to Cart</button>
      </form>"""
    else:
        purchase = '<p class="stock">Out of stock</p>'
    body = f"""
    <article class="product-detail">
      <img src="{escape(product['image'])}" alt="{escape(product['title'])}">
      <h1>{escape(product['title'])}</h1>
      <p class="rating">{stars(product['stars'])}</p>
      <p class="price">{money(product['price'])}</p>
      <p>{escape(product.get('description', ''))}</p>
      <p class="category">{escape(_category_label(product.get('category', '')))}</p>
      <ul class="tags">{tags}</ul>{purchase}
    </article>"""
    return layout(product["title"], body, cart_count)


def _cart_line(item: Dict[str, Any], in_stock: bool) -> str:
    product = item["product"]
    controls = ""
    if in_stock:
        controls = f"""
        <form method="post" action="/cart/update">
          <input type="hidden" name="productId" value="{item['product_id']}">
          <input type="number" name="quantity" value="{item['quantity']}" min="1">
          <button type="submit">Update</button>
        </form>
        <p class="line-total">{money(product['price'] * item['quantity'])}</p>"""
    return f"""
      <div class="cart-line" data-product-id="{item['product_id']}">
        <img src="{escape(product['image'] or '')}" alt="{escape(product['title'])}">
        <h3>{escape(product['title'])}</h3>
        <p class="price">{money(product['price'])}</p>{controls}
        <form method="post" action="/cart/remove">
          <input type="hidden" name="productId" value="{item['product_id']}">
          <button type="submit">Remove</button>
        </form>
      </div>"""


def summary_block(summary: Dict[str, float]) -> str:
    shipping = "Free" if summary["shipping"] == 0 else money(summary["shipping"])
    return f"""
    <dl class="summary">
      <dt>Subtotal</dt><dd>{money(summary['subtotal'])}</dd>
      <dt>Shipping</dt><dd>{shipping}</dd>
      <dt>Tax</dt><dd>{money(summary['tax'])}</dd>
      <dt>Total</dt><dd class="total">{money(summary['total'])}</dd>
    </dl>"""


def cart_page(in_stock: List[Dict[str, Any]], out_of_stock: List[Dict[str, Any]], summary: Dict[str, float], cart_count: int) -> str:
    if not in_stock and not out_of_stock:
        body = """
    <h1>Your cart is empty</h1>
    <a href="/products">Start Shopping</a>"""
        return layout("Cart", body, cart_count)

    unavailable = ""
    if out_of_stock:
        unavailable = f"""
    <section class="out-of-stock"><h2>Out of Stock</h2>{"".join(_cart_line(i, False) for i in out_of_stock)}</section>"""
    checkout = '<a href="/checkout" class="checkout">Proceed to Checkout</a>' if in_stock else ""
    body = f"""
    <h1>Shopping Cart</h1>
    <section class="cart-items">{"".join(_cart_line(i, True) for i in in_stock)}</section>{unavailable}
    <aside><h2>Order Summary</h2>{summary_block(summary)}
      {checkout}
      <a href="/products">Continue Shopping</a>
    </aside>"""
    return layout("Cart", body, cart_count)


CHECKOUT_FIELDS = (
    ("full_name", "Full name", True),
    ("address", "Address", True),
    ("city", "City", True),
    ("postal_code", "Postal code", False),
    ("country", "Country", True),
    ("phone", "Phone", False),
)


def checkout_page(summary: Dict[str, float], cart_count: int, error: Optional[str] = None, values: Optional[Dict[str, str]] = None) -> str:
    values = values or {}
    fields = "".join(
        f'<label>{label}<input name="{name}" value="{escape(values.get(name, ""))}"{" required" if required else ""}></label>'
        for name, label, required in CHECKOUT_FIELDS
    )
    error_html = f'<p class="error">{escape(error)}</p>' if error else ""
    body = f"""
    <h1>Checkout</h1>{error_html}
    <form method="post" action="/checkout">{fields}
      <button type="submit">Place Order</button>
    </form>
    <aside><h2>Order Summary</h2>{summary_block(summary)}</aside>"""
    return layout("Checkout", body, cart_count)


def confirmation_page(order: Dict[str, Any], cart_count: int) -> str:
    lines = "".join(
        f"<li>{escape(i['product']['title'])} &times; {i['quantity']}</li>" for i in order["items"]
    )
    body = f"""
    <h1>Order Confirmed!</h1>
    <p>Thank you for your purchase. Your order has been successfully placed and is being processed.</p>
    <p class="order-number">#{order['id']:06d}</p>
    <p class="status">Status: {escape(order['status'])}</p>
    <ul>{lines}</ul>{summary_block(order['summary'])}
    <a href="/">Back to Home</a>"""
    return layout("Order Confirmed", body, cart_count)


def blog_page(posts: List[Dict[str, Any]], search: str, category: str, cart_count: int) -> str:
    options = "".join(
        f'<option value="{c}"{" selected" if category == c else ""}>{c}</option>' for c in BLOG_CATEGORIES
    )
    listing = "".join(post_card(p) for p in posts) or "<p>No posts found.</p>"
    body = f"""
    <h1>Anime Blog</h1>
    <form method="get" action="/blog">
      <input type="search" name="search" value="{escape(search)}" placeholder="Search posts">
      <select name="category"><option value="">All</option>{options}</select>
      <button type="submit">Filter</button>
    </form>
    <section class="posts">{listing}</section>"""
    return layout("Blog", body, cart_count)


def blog_post_page(post: Dict[str, Any], cart_count: int) -> str:
    tags = "".join(f"<li>{escape(t)}</li>" for t in post["tags"])
    # Post content is trusted seed HTML
    body = f"""
    <article class="post">
      <a href="/blog">Back to Blog</a>
      <h1>{escape(post['title'])}</h1>
      <p class="meta">{escape(post['author'])} &middot; {escape(post['published_at'])} &middot; {post['read_time']} min read</p>
      <img src="{escape(post['image'])}" alt="{escape(post['title'])}">
      <div class="content">{post['content']}</div>
      <ul class="tags">{tags}</ul>
    </article>"""
    return layout(post["title"], body, cart_count)


def about_page(cart_count: int) -> str:
    body = """
    <h1>About Us</h1>
    <p>Welcome to our AnimeStore! This project is a demonstration of Management Information System (MIS)
    concepts, built as a part of the BCA 5th Semester curriculum at Kathmandu Model College.</p>
    <a href="https://kmcen.edu.np/" target="_blank" rel="noopener noreferrer">Visit KMC Website</a>"""
    return layout("About", body, cart_count)


def add_product_page(cart_count: int, error: Optional[str] = None) -> str:
    options = "".join(f'<option value="{c}">{_category_label(c)}</option>' for c in CATEGORIES)
    error_html = f'<p class="error">{escape(error)}</p>' if error else ""
    body = f"""
    <h1>Add New Product</h1>{error_html}
    <form method="post" action="/add-product">
      <input name="title" placeholder="Product Title" required>
      <textarea name="description" placeholder="Description" required></textarea>
      <input type="number" step="0.01" name="price" placeholder="Price (NRS)" required>
      <input name="image" placeholder="Image URL">
      <select name="category" required>{options}</select>
      <input type="number" name="stock" placeholder="Stock" required>
      <input name="tags" placeholder="Tags (comma separated)">
      <input type="number" name="stars" value="5" min="1" max="5">
      <button type="submit">Add Product</button>
    </form>"""
    return layout("Add Product", body, cart_count)


def not_found_page(message: str, cart_count: int) -> str:
    body = f"""
    <h1>Not Found</h1>
    <p>{escape(message)}</p>
    <a href="/">Back to Home</a>"""
    return layout("Not Found", body, cart_count)
