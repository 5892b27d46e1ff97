from datetime import datetime
from typing import ClassVar, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from storefront.models.entities import OrderStatus


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)

    nullable_fields: ClassVar[frozenset] = frozenset()

    def changes(self) -> dict:
        """Fields the client actually sent, minus nulls for fields that cannot be cleared."""
        data = self.model_dump(exclude_unset=True)
        return {k: v for k, v in data.items() if v is not None or k in self.nullable_fields}


# Users
class UserCreate(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    email: EmailStr
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None


class UserLogin(CamelModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserUpdate(CamelModel):
    nullable_fields = frozenset({"first_name", "last_name", "address", "city", "state", "zip_code", "country", "phone"})

    username: Optional[str] = Field(None, min_length=1)
    password: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None


class UserOut(CamelModel):
    id: int
    username: str
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


# Products
class ProductIn(CamelModel):
    name: str = Field(..., min_length=1)
    description: str
    price: float = Field(..., ge=0)
    sale_price: Optional[float] = Field(None, ge=0)
    category: str = Field(..., min_length=1)
    sub_category: str = Field(..., min_length=1)
    image_urls: List[str] = Field(..., min_length=1)
    sizes: Optional[List[str]] = None
    colors: Optional[List[str]] = None
    material: Optional[str] = None
    in_stock: bool = True
    is_new: bool = False
    is_featured: bool = False


class ProductUpdate(CamelModel):
    nullable_fields = frozenset({"sale_price", "sizes", "colors", "material"})

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    sale_price: Optional[float] = Field(None, ge=0)
    category: Optional[str] = Field(None, min_length=1)
    sub_category: Optional[str] = Field(None, min_length=1)
    image_urls: Optional[List[str]] = Field(None, min_length=1)
    sizes: Optional[List[str]] = None
    colors: Optional[List[str]] = None
    material: Optional[str] = None
    in_stock: Optional[bool] = None
    is_new: Optional[bool] = None
    is_featured: Optional[bool] = None


class ProductOut(ProductIn):
    id: int
    created_at: datetime


# Reviews
class ReviewIn(CamelModel):
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None


class ReviewOut(CamelModel):
    id: int
    product_id: int
    user_id: int
    rating: int
    comment: Optional[str] = None
    created_at: datetime


# Cart
class CartItemIn(CamelModel):
    product_id: int
    quantity: int = Field(1, ge=1)
    size: Optional[str] = None
    color: Optional[str] = None


class CartItemUpdate(CamelModel):
    quantity: int = Field(..., ge=1)


class CartItemOut(CamelModel):
    id: int
    user_id: int
    product_id: int
    quantity: int
    size: Optional[str] = None
    color: Optional[str] = None
    product: Optional[ProductOut] = None


class CartSummary(CamelModel):
    total_items: int
    subtotal: float
    shipping: float
    tax: float
    total: float


# Orders
class OrderCreate(CamelModel):
    shipping_address: str = Field(..., min_length=1)
    shipping_city: str = Field(..., min_length=1)
    shipping_state: str = Field(..., min_length=1)
    shipping_zip_code: str = Field(..., min_length=1)
    shipping_country: str = Field(..., min_length=1)
    payment_method: str = Field(..., min_length=1)


class OrderStatusUpdate(CamelModel):
    status: OrderStatus


class OrderItemOut(CamelModel):
    id: int
    order_id: int
    product_id: int
    quantity: int
    price: float
    size: Optional[str] = None
    color: Optional[str] = None
    product: Optional[ProductOut] = None


class OrderOut(CamelModel):
    id: int
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


class OrderWithItems(OrderOut):
    items: List[OrderItemOut] = []


class AdminOrderOut(OrderWithItems):
    user: Optional[UserOut] = None


class StatsOut(CamelModel):
    total_revenue: float
    total_orders: int
    total_users: int
    total_products: int
    orders_by_status: Dict[str, int]


class Message(BaseModel):
    message: str
