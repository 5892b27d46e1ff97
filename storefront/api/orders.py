from typing import List

from fastapi import APIRouter, Depends, status

from storefront.api.deps import get_current_user, get_storage
from storefront.db.storage import Storage
from storefront.models.entities import User
from storefront.models.schemas import OrderCreate, OrderWithItems
from storefront.services import orders_service

router = APIRouter()


@router.get("", response_model=List[OrderWithItems])
def my_orders(user: User = Depends(get_current_user), storage: Storage = Depends(get_storage)):
    return orders_service.orders_with_items(storage, storage.get_user_orders(user.id))


@router.post("", response_model=OrderWithItems, status_code=status.HTTP_201_CREATED)
def place_order(payload: OrderCreate, user: User = Depends(get_current_user), storage: Storage = Depends(get_storage)):
    return orders_service.place_order(storage, user.id, payload.model_dump())


@router.get("/{order_id}", response_model=OrderWithItems)
def get_order(order_id: int, user: User = Depends(get_current_user), storage: Storage = Depends(get_storage)):
    return orders_service.get_order_for(storage, order_id, user)
