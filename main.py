import copy
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Depends, Header, Query
from fastapi.middleware.cors import CORSMiddleware
from jose import JWTError, jwt
from passlib.context import CryptContext

from catalog import filter_posts, filter_products, paginate, sort_products
from config import configure_logging, settings
from database import db, create_document, get_documents
from errors import install_error_handlers
from schemas import (
    AddToCart,
    BlogPost,
    CartItem,
    LoginInput,
    Order,
    OrderIn,
    Product,
    ProductPage,
    RegisterInput,
    TokenResponse,
    UpdateCartItem,
    User,
)

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

app = FastAPI(title="Anime Store API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
install_error_handlers(app)


# Utilities

def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        raise HTTPException(status_code=403, detail="Invalid token")


def public_user(user: Dict[str, Any]) -> Dict[str, Any]:
    return {"id": user["id"], "name": user["name"], "email": user["email"]}


def cart_snapshot(product: Dict[str, Any]) -> Dict[str, Any]:
    return {k: product[k] for k in ("id", "title", "price", "image", "stock")}


def order_total(items: List[Dict[str, Any]]) -> float:
    return round(sum(item["product"]["price"] * item["quantity"] for item in items), 2)


# Dependency to get current user

def get_current_user(authorization: Optional[str] = Header(default=None)):
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Access token required")
    token = authorization.split(" ", 1)[1].strip()
    if not token:
        raise HTTPException(status_code=401, detail="Access token required")
    payload = decode_token(token)
    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise HTTPException(status_code=403, detail="Invalid token")
    user = db["user"].find_one({"id": user_id})
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


# Routes
@app.get("/")
def read_root():
    return {"message": "Anime Store API"}


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# Products
@app.get("/api/products", response_model=ProductPage)
def list_products(
    category: Optional[str] = None,
    search: Optional[str] = None,
    min_price: Optional[float] = Query(None, alias="minPrice"),
    max_price: Optional[float] = Query(None, alias="maxPrice"),
    sort: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.page_size, ge=1, le=100),
):
    products = filter_products(get_documents("product"), category, search, min_price, max_price)
    try:
        products = sort_products(products, sort)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    result = paginate(products, page, limit)
    return {
        "products": result["items"],
        "total": result["total"],
        "page": result["page"],
        "total_pages": result["total_pages"],
    }


@app.get("/api/products/{product_id}", response_model=Product)
def get_product(product_id: int):
    product = db["product"].find_one({"id": product_id})
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return copy.deepcopy(product)


# Blog
@app.get("/api/blog", response_model=List[BlogPost])
def list_blog_posts(category: Optional[str] = None, search: Optional[str] = None):
    return filter_posts(get_documents("blog_post"), category, search)


@app.get("/api/blog/{post_id}", response_model=BlogPost)
def get_blog_post(post_id: int):
    post = db["blog_post"].find_one({"id": post_id})
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")
    return copy.deepcopy(post)


# Auth
@app.post("/api/auth/register", response_model=TokenResponse, status_code=201)
def register(payload: RegisterInput):
    email = payload.email.lower()
    if db["user"].find_one({"email": email}):
        raise HTTPException(status_code=400, detail="User already exists")
    user_id = create_document("user", {
        "name": payload.name,
        "email": email,
        "password_hash": hash_password(payload.password),
        "cart": [],
    })
    logger.info("Registered user %s", user_id)
    token = create_access_token({"sub": str(user_id)})
    user = db["user"].find_one({"id": user_id})
    # Never send password hash
    return {"token": token, "user": public_user(user)}


@app.post("/api/auth/login", response_model=TokenResponse)
def login(payload: LoginInput):
    user = db["user"].find_one({"email": payload.email.lower()})
    if not user or not verify_password(payload.password, user.get("password_hash", "")):
        logger.info("Failed login for %s", payload.email)
        raise HTTPException(status_code=401, detail="Invalid credentials")
    token = create_access_token({"sub": str(user["id"])})
    return {"token": token, "user": public_user(user)}


@app.get("/api/auth/me", response_model=User)
def me(current_user: dict = Depends(get_current_user)):
    return public_user(current_user)


# Cart
@app.get("/api/cart", response_model=List[CartItem])
def get_cart(current_user: dict = Depends(get_current_user)):
    return current_user["cart"]


@app.post("/api/cart/add", response_model=List[CartItem])
def add_to_cart(item: AddToCart, current_user: dict = Depends(get_current_user)):
    product = db["product"].find_one({"id": item.product_id})
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    cart = current_user["cart"]
    for line in cart:
        if line["product_id"] == item.product_id:
            line["quantity"] += item.quantity
            break
    else:
        cart.append({
            "product_id": item.product_id,
            "quantity": item.quantity,
            "product": cart_snapshot(product),
        })
    return cart


@app.put("/api/cart/update", response_model=List[CartItem])
def update_cart(item: UpdateCartItem, current_user: dict = Depends(get_current_user)):
    cart = current_user["cart"]
    line = next((line for line in cart if line["product_id"] == item.product_id), None)
    if line is None:
        raise HTTPException(status_code=404, detail="Item not in cart")
    line["quantity"] = item.quantity
    return cart


@app.delete("/api/cart/remove/{product_id}", response_model=List[CartItem])
def remove_from_cart(product_id: int, current_user: dict = Depends(get_current_user)):
    current_user["cart"] = [line for line in current_user["cart"] if line["product_id"] != product_id]
    return current_user["cart"]


@app.delete("/api/cart")
def clear_cart(current_user: dict = Depends(get_current_user)):
    current_user["cart"] = []
    return {"ok": True}


# Orders
@app.post("/api/orders", response_model=Order, status_code=201)
def create_order(payload: OrderIn, current_user: dict = Depends(get_current_user)):
    if payload.items is not None:
        items = [i.model_dump() for i in payload.items]
    else:
        items = copy.deepcopy(current_user["cart"])
    if not items:
        raise HTTPException(status_code=400, detail="Cart is empty")

    total = payload.total if payload.total is not None else order_total(items)
    order_id = create_document("order", {
        "user_id": current_user["id"],
        "items": items,
        "total": total,
        "shipping_address": payload.shipping_address.model_dump(),
        "status": "confirmed",
    })

    # Clear user's cart
    current_user["cart"] = []
    logger.info("Order %s placed by user %s, total %.2f", order_id, current_user["id"], total)
    return db["order"].find_one({"id": order_id})


@app.get("/api/orders", response_model=List[Order])
def list_orders(current_user: dict = Depends(get_current_user)):
    return get_documents("order", {"user_id": current_user["id"]})


@app.get("/api/orders/{order_id}", response_model=Order)
def get_order(order_id: int, current_user: dict = Depends(get_current_user)):
    order = db["order"].find_one({"id": order_id, "user_id": current_user["id"]})
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


if __name__ == "__main__":
    import uvicorn
    configure_logging()
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
