import logging
from decimal import Decimal
from typing import List, Optional

from storefront.core.errors import AuthorizationDenied, EmptyCartError, NotFound, ProductNotFoundError
from storefront.db.storage import Storage
from storefront.models.entities import Order, User
from storefront.services.pricing import line_total, to_money

logger = logging.getLogger(__name__)


def place_order(storage: Storage, user_id: int, shipping: dict) -> dict:
    """Turn the user's cart into an order.

    Only the cart rows that went into the order are taken out of the cart,
    and only after the order and all its items exist; any failure before
    that leaves the cart untouched.
    """
    with storage.store.user_lock(user_id):
        items = storage.get_user_cart(user_id)
        if not items:
            logger.warning("Order rejected for user %s: cart is empty", user_id)
            raise EmptyCartError()

        total = Decimal(0)
        order_items = []
        for it in items:
            product = storage.get_product(it.product_id)
            if product is None:
                logger.warning("Order rejected for user %s: product %s missing", user_id, it.product_id)
                raise ProductNotFoundError(it.product_id)
            price = product.effective_price
            total += line_total(price, it.quantity)
            order_items.append({
                "product_id": it.product_id,
                "quantity": it.quantity,
                "price": price,
                "size": it.size,
                "color": it.color,
            })

        with storage.store.lock:
            order, _ = storage.create_order_with_items(
                dict(shipping, user_id=user_id, status="pending", total=to_money(total)),
                order_items,
            )
            storage.remove_cart_items(items)

    logger.info("Order %s placed by user %s, total %.2f", order.id, user_id, order.total)
    return order_with_items(storage, order)


def set_order_status(storage: Storage, order_id: int, status: str) -> Order:
    # any status may follow any other
    order = storage.update_order_status(order_id, status)
    if order is None:
        raise NotFound("Order not found")
    logger.info("Order %s status set to %s", order_id, status)
    return order


def get_order_for(storage: Storage, order_id: int, user: User) -> dict:
    order = storage.get_order(order_id)
    if order is None:
        raise NotFound("Order not found")
    if order.user_id != user.id and not user.is_admin:
        raise AuthorizationDenied()
    return order_with_items(storage, order)


def order_with_items(storage: Storage, order: Order, include_user: bool = False) -> dict:
    data = order.model_dump()
    data["items"] = [
        dict(item.model_dump(), product=_product_dump(storage, item.product_id))
        for item in storage.get_order_items(order.id)
    ]
    if include_user:
        user = storage.get_user(order.user_id)
        data["user"] = user.model_dump(exclude={"password"}) if user else None
    return data


def orders_with_items(storage: Storage, orders: List[Order], include_user: bool = False) -> List[dict]:
    return [order_with_items(storage, o, include_user=include_user) for o in orders]


def _product_dump(storage: Storage, product_id: int) -> Optional[dict]:
    product = storage.get_product(product_id)
    return product.model_dump() if product else None
