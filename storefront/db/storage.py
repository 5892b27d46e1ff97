from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple

from storefront.db.memory import MemoryStore, Repository
from storefront.models.entities import CartItem, Order, OrderItem, Product, Review, User


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Storage:
    """CRUD access over a MemoryStore.

    Lookups return ``None`` for missing rows, deletes return whether a row was
    removed. Updates merge partial fields and never create. Input is plain
    dicts keyed by field name.
    """

    def __init__(self, store: Optional[MemoryStore] = None):
        self.store = store or MemoryStore()

    def _create(self, repo: Repository, model, data: dict, stamp: bool = True):
        with self.store.lock:
            fields = dict(data, id=repo.next_id())
            if stamp:
                fields["created_at"] = _now()
            return repo.put(model.model_validate(fields))

    def _update(self, repo: Repository, entity_id: int, data: dict):
        with self.store.lock:
            current = repo.get(entity_id)
            if current is None:
                return None
            data = {k: v for k, v in data.items() if k not in ("id", "created_at")}
            return repo.put(type(current).model_validate({**current.model_dump(), **data}))

    # Users
    def get_user(self, user_id: int) -> Optional[User]:
        return self.store.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.store.users.find(lambda u: u.username == username)

    def get_user_by_email(self, email: str) -> Optional[User]:
        email = email.lower()
        return self.store.users.find(lambda u: u.email.lower() == email)

    def create_user(self, data: dict) -> User:
        return self._create(self.store.users, User, data)

    def update_user(self, user_id: int, data: dict) -> Optional[User]:
        return self._update(self.store.users, user_id, data)

    def get_all_users(self) -> List[User]:
        return self.store.users.all()

    # Products
    def get_product(self, product_id: int) -> Optional[Product]:
        return self.store.products.get(product_id)

    def get_all_products(self) -> List[Product]:
        return self.store.products.all()

    def get_products_by_category(self, category: str) -> List[Product]:
        return self.store.products.filter(lambda p: p.category == category)

    def get_products_by_sub_category(self, sub_category: str) -> List[Product]:
        return self.store.products.filter(lambda p: p.sub_category == sub_category)

    def get_featured_products(self) -> List[Product]:
        return self.store.products.filter(lambda p: p.is_featured)

    def get_new_products(self) -> List[Product]:
        return self.store.products.filter(lambda p: p.is_new)

    def create_product(self, data: dict) -> Product:
        return self._create(self.store.products, Product, data)

    def update_product(self, product_id: int, data: dict) -> Optional[Product]:
        return self._update(self.store.products, product_id, data)

    def delete_product(self, product_id: int) -> bool:
        with self.store.lock:
            return self.store.products.remove(product_id)

    def search_products(self, query: str) -> List[Product]:
        q = query.lower()
        return self.store.products.filter(
            lambda p: q in p.name.lower()
            or q in p.description.lower()
            or q in p.category.lower()
            or q in p.sub_category.lower()
        )

    # Reviews
    def get_review(self, review_id: int) -> Optional[Review]:
        return self.store.reviews.get(review_id)

    def get_reviews_by_product(self, product_id: int) -> List[Review]:
        return self.store.reviews.filter(lambda r: r.product_id == product_id)

    def create_review(self, data: dict) -> Review:
        return self._create(self.store.reviews, Review, data)

    def delete_review(self, review_id: int) -> bool:
        with self.store.lock:
            return self.store.reviews.remove(review_id)

    # Orders
    def get_order(self, order_id: int) -> Optional[Order]:
        return self.store.orders.get(order_id)

    def get_user_orders(self, user_id: int) -> List[Order]:
        return self.store.orders.filter(lambda o: o.user_id == user_id)

    def create_order(self, data: dict) -> Order:
        return self._create(self.store.orders, Order, data)

    def update_order_status(self, order_id: int, status: str) -> Optional[Order]:
        return self._update(self.store.orders, order_id, {"status": status})

    def get_all_orders(self) -> List[Order]:
        return self.store.orders.all()

    # Order items
    def get_order_items(self, order_id: int) -> List[OrderItem]:
        return self.store.order_items.filter(lambda i: i.order_id == order_id)

    def create_order_item(self, data: dict) -> OrderItem:
        return self._create(self.store.order_items, OrderItem, data, stamp=False)

    def create_order_with_items(self, order: dict, items: Iterable[dict]) -> Tuple[Order, List[OrderItem]]:
        """Insert an order and its items as one unit.

        Every row is validated before anything is stored, so a bad item leaves
        neither the order nor any of its items behind.
        """
        with self.store.lock:
            order_id = self.store.orders.next_id()
            created = Order.model_validate(dict(order, id=order_id, created_at=_now()))
            rows = [
                OrderItem.model_validate(dict(item, id=self.store.order_items.next_id(), order_id=order_id))
                for item in items
            ]
            self.store.orders.put(created)
            for row in rows:
                self.store.order_items.put(row)
            return created, rows

    # Cart
    def get_cart_item(self, item_id: int) -> Optional[CartItem]:
        return self.store.cart_items.get(item_id)

    def get_user_cart(self, user_id: int) -> List[CartItem]:
        return self.store.cart_items.filter(lambda c: c.user_id == user_id)

    def add_to_cart(self, data: dict) -> CartItem:
        """Add a cart row, or bump the quantity of the identical one already there."""
        key = (data["user_id"], data["product_id"], data.get("size"), data.get("color"))
        with self.store.lock:
            existing = self.store.cart_items.find(lambda c: c.merge_key == key)
            if existing is not None:
                return self.update_cart_item(existing.id, existing.quantity + data["quantity"])
            return self._create(self.store.cart_items, CartItem, data, stamp=False)

    def update_cart_item(self, item_id: int, quantity: int) -> Optional[CartItem]:
        return self._update(self.store.cart_items, item_id, {"quantity": quantity})

    def remove_cart_item(self, item_id: int) -> bool:
        with self.store.lock:
            return self.store.cart_items.remove(item_id)

    def clear_cart(self, user_id: int) -> bool:
        with self.store.lock:
            for item in self.get_user_cart(user_id):
                self.store.cart_items.remove(item.id)
        return True

    def remove_cart_items(self, items: Iterable[CartItem]) -> None:
        """Take rows read earlier out of the cart.

        A row whose quantity grew since it was read keeps the difference.
        """
        with self.store.lock:
            for item in items:
                current = self.store.cart_items.get(item.id)
                if current is None:
                    continue
                if current.quantity > item.quantity:
                    self.update_cart_item(item.id, current.quantity - item.quantity)
                else:
                    self.store.cart_items.remove(item.id)
