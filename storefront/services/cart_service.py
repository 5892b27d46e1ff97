from decimal import Decimal

from storefront.core.errors import NotFound
from storefront.db.storage import Storage
from storefront.models.entities import CartItem
from storefront.services.pricing import (
    FREE_SHIPPING_THRESHOLD, SHIPPING_FLAT_RATE, TAX_RATE, line_total, round_cents, to_money,
)


def with_product(storage: Storage, item: CartItem) -> dict:
    product = storage.get_product(item.product_id)
    return dict(item.model_dump(), product=product.model_dump() if product else None)


def add_item(storage: Storage, user_id: int, data: dict) -> dict:
    if storage.get_product(data["product_id"]) is None:
        raise NotFound("Product not found")
    item = storage.add_to_cart(dict(data, user_id=user_id))
    return with_product(storage, item)


def own_item(storage: Storage, user_id: int, item_id: int) -> CartItem:
    item = storage.get_cart_item(item_id)
    if item is None or item.user_id != user_id:
        raise NotFound("Cart item not found")
    return item


def summarize(storage: Storage, user_id: int) -> dict:
    """Price the cart the way checkout displays it.

    Shipping is free from FREE_SHIPPING_THRESHOLD up, tax is a flat
    TAX_RATE of the subtotal. None of this is stored on the order.
    """
    subtotal = Decimal(0)
    count = 0
    for item in storage.get_user_cart(user_id):
        product = storage.get_product(item.product_id)
        if product is None:
            continue
        subtotal += line_total(product.effective_price, item.quantity)
        count += item.quantity
    if count == 0 or subtotal >= FREE_SHIPPING_THRESHOLD:
        shipping = Decimal(0)
    else:
        shipping = SHIPPING_FLAT_RATE
    tax = round_cents(subtotal * TAX_RATE)
    return {
        "total_items": count,
        "subtotal": to_money(subtotal),
        "shipping": to_money(shipping),
        "tax": to_money(tax),
        "total": to_money(subtotal + shipping + tax),
    }
