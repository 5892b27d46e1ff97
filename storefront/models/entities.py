"""Stored records.

Entities are frozen pydantic models; the storage layer replaces an instance
when it changes instead of mutating it in place.
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

OrderStatus = Literal["pending", "processing", "shipped", "delivered", "cancelled"]


class Entity(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int


class User(Entity):
    username: str
    password: str  # passlib hash
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    is_admin: bool = False
    created_at: datetime


class Product(Entity):
    name: str
    description: str
    price: float
    sale_price: Optional[float] = None
    category: str
    sub_category: str
    image_urls: List[str]
    sizes: Optional[List[str]] = None
    colors: Optional[List[str]] = None
    material: Optional[str] = None
    in_stock: bool = True
    is_new: bool = False
    is_featured: bool = False
    created_at: datetime

    @property
    def effective_price(self) -> float:
        return self.sale_price if self.sale_price is not None else self.price


class Review(Entity):
    product_id: int
    user_id: int
    rating: int
    comment: Optional[str] = None
    created_at: datetime


class CartItem(Entity):
    user_id: int
    product_id: int
    quantity: int
    size: Optional[str] = None
    color: Optional[str] = None

    @property
    def merge_key(self) -> tuple:
        return (self.user_id, self.product_id, self.size, self.color)


class Order(Entity):
    user_id: int
    status: OrderStatus
    total: float
    shipping_address: str
    shipping_city: str
    shipping_state: str
    shipping_zip_code: str
    shipping_country: str
    payment_method: str
    created_at: datetime


class OrderItem(Entity):
    order_id: int
    product_id: int
    quantity: int
    price: float
    size: Optional[str] = None
    color: Optional[str] = None
