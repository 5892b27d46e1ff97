from typing import List

from fastapi import APIRouter, Depends, Response, status

from storefront.api.deps import get_current_user_id, get_storage
from storefront.core.errors import NotFound
from storefront.db.storage import Storage
from storefront.models.schemas import CartItemIn, CartItemOut, CartItemUpdate, CartSummary
from storefront.services import cart_service

router = APIRouter()


@router.get("", response_model=List[CartItemOut])
def get_cart(user_id: int = Depends(get_current_user_id), storage: Storage = Depends(get_storage)):
    return [cart_service.with_product(storage, item) for item in storage.get_user_cart(user_id)]


@router.get("/summary", response_model=CartSummary)
def cart_summary(user_id: int = Depends(get_current_user_id), storage: Storage = Depends(get_storage)):
    return cart_service.summarize(storage, user_id)


@router.post("", response_model=CartItemOut, status_code=status.HTTP_201_CREATED)
def add_to_cart(item: CartItemIn, user_id: int = Depends(get_current_user_id), storage: Storage = Depends(get_storage)):
    return cart_service.add_item(storage, user_id, item.model_dump())


@router.put("/{item_id}", response_model=CartItemOut)
def update_item(
    item_id: int,
    payload: CartItemUpdate,
    user_id: int = Depends(get_current_user_id),
    storage: Storage = Depends(get_storage),
):
    cart_service.own_item(storage, user_id, item_id)
    updated = storage.update_cart_item(item_id, payload.quantity)
    if updated is None:
        raise NotFound("Cart item not found")
    return cart_service.with_product(storage, updated)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_item(item_id: int, user_id: int = Depends(get_current_user_id), storage: Storage = Depends(get_storage)):
    cart_service.own_item(storage, user_id, item_id)
    storage.remove_cart_item(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def clear_cart(user_id: int = Depends(get_current_user_id), storage: Storage = Depends(get_storage)):
    storage.clear_cart(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
