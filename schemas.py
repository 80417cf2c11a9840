"""
API Schemas

Pydantic models for the mock REST API. Documents are stored in snake_case;
on the wire every model speaks camelCase (``productId``, ``shippingAddress``)
and accepts either spelling on input.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Catalog

class Product(APIModel):
    id: int
    title: str
    price: float = Field(..., ge=0)
    description: str = ""
    image: str = ""
    category: str
    stock: int = Field(0, ge=0)
    tags: List[str] = Field(default_factory=list)
    stars: float = Field(5, ge=0, le=5, description="Star rating")


class ProductPage(APIModel):
    products: List[Product]
    total: int
    page: int
    total_pages: int


class BlogPost(APIModel):
    id: int
    title: str
    excerpt: str
    content: str
    author: str
    published_at: str
    read_time: int = Field(..., description="Minutes")
    image: str
    tags: List[str] = Field(default_factory=list)
    category: str


# Users

class User(APIModel):
    id: int
    name: str
    email: EmailStr


class RegisterInput(APIModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginInput(APIModel):
    email: EmailStr
    password: str


class TokenResponse(APIModel):
    token: str
    user: User


# Cart

class CartProduct(APIModel):
    """Snapshot of the product taken when it was added to the cart."""
    id: int
    title: str
    price: float
    image: str
    stock: int


class CartItem(APIModel):
    product_id: int
    quantity: int = Field(..., ge=1)
    product: CartProduct


class AddToCart(APIModel):
    product_id: int
    quantity: int = Field(1, ge=1)


class UpdateCartItem(APIModel):
    product_id: int
    quantity: int = Field(..., ge=1)


# Orders

class ShippingAddress(APIModel):
    full_name: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    postal_code: str = ""
    country: str = Field(..., min_length=1)
    phone: Optional[str] = None


class OrderIn(APIModel):
    shipping_address: ShippingAddress
    items: Optional[List[CartItem]] = None
    total: Optional[float] = Field(None, ge=0)


class Order(APIModel):
    id: int
    user_id: int
    items: List[CartItem]
    total: float
    shipping_address: ShippingAddress
    status: str = "confirmed"
    created_at: datetime
