from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from storefront.api.deps import get_current_user, get_storage
from storefront.core.errors import AuthorizationDenied, NotFound
from storefront.db.storage import Storage
from storefront.models.entities import User
from storefront.models.schemas import ProductOut, ReviewIn, ReviewOut

router = APIRouter()


@router.get("", response_model=List[ProductOut])
def list_products(
    category: Optional[str] = None,
    sub_category: Optional[str] = Query(None, alias="subCategory"),
    featured: Optional[str] = None,
    new_items: Optional[str] = Query(None, alias="newItems"),
    search: Optional[str] = None,
    storage: Storage = Depends(get_storage),
):
    # one filter per request, first match wins
    if category:
        return storage.get_products_by_category(category)
    if sub_category:
        return storage.get_products_by_sub_category(sub_category)
    if featured == "true":
        return storage.get_featured_products()
    if new_items == "true":
        return storage.get_new_products()
    if search:
        return storage.search_products(search)
    return storage.get_all_products()


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, storage: Storage = Depends(get_storage)):
    product = storage.get_product(product_id)
    if product is None:
        raise NotFound("Product not found")
    return product


@router.get("/{product_id}/reviews", response_model=List[ReviewOut])
def list_reviews(product_id: int, storage: Storage = Depends(get_storage)):
    return storage.get_reviews_by_product(product_id)


@router.post("/{product_id}/reviews", response_model=ReviewOut, status_code=status.HTTP_201_CREATED)
def create_review(
    product_id: int,
    payload: ReviewIn,
    user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    if storage.get_product(product_id) is None:
        raise NotFound("Product not found")
    return storage.create_review(dict(payload.model_dump(), product_id=product_id, user_id=user.id))


@router.delete("/{product_id}/reviews/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_review(
    product_id: int,
    review_id: int,
    user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    review = storage.get_review(review_id)
    if review is None or review.product_id != product_id:
        raise NotFound("Review not found")
    if review.user_id != user.id and not user.is_admin:
        raise AuthorizationDenied()
    storage.delete_review(review_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
