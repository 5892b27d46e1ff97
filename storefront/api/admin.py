from collections import Counter
from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, Response, status

from storefront.api.deps import get_admin_user, get_storage
from storefront.core.errors import NotFound
from storefront.db.storage import Storage
from storefront.models.schemas import (
    AdminOrderOut, OrderOut, OrderStatusUpdate, ProductIn, ProductOut, ProductUpdate, StatsOut, UserOut,
)
from storefront.services import orders_service
from storefront.services.pricing import to_decimal, to_money

router = APIRouter(dependencies=[Depends(get_admin_user)])


# Products
@router.post("/products", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductIn, storage: Storage = Depends(get_storage)):
    return storage.create_product(payload.model_dump())


@router.put("/products/{product_id}", response_model=ProductOut)
def update_product(product_id: int, payload: ProductUpdate, storage: Storage = Depends(get_storage)):
    product = storage.update_product(product_id, payload.changes())
    if product is None:
        raise NotFound("Product not found")
    return product


@router.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, storage: Storage = Depends(get_storage)):
    if not storage.delete_product(product_id):
        raise NotFound("Product not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Orders
@router.get("/orders", response_model=List[AdminOrderOut])
def all_orders(storage: Storage = Depends(get_storage)):
    return orders_service.orders_with_items(storage, storage.get_all_orders(), include_user=True)


@router.put("/orders/{order_id}/status", response_model=OrderOut)
def update_order_status(order_id: int, payload: OrderStatusUpdate, storage: Storage = Depends(get_storage)):
    return orders_service.set_order_status(storage, order_id, payload.status)


# Users
@router.get("/users", response_model=List[UserOut])
def list_users(storage: Storage = Depends(get_storage)):
    return [u.model_dump(exclude={"password"}) for u in storage.get_all_users()]


@router.get("/stats", response_model=StatsOut)
def stats(storage: Storage = Depends(get_storage)):
    orders = storage.get_all_orders()
    revenue = sum((to_decimal(o.total) for o in orders), Decimal(0))
    return {
        "total_revenue": to_money(revenue),
        "total_orders": len(orders),
        "total_users": len(storage.get_all_users()),
        "total_products": len(storage.get_all_products()),
        "orders_by_status": dict(Counter(o.status for o in orders)),
    }
