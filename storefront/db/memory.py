import itertools
import threading
from collections import defaultdict
from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from storefront.models.entities import CartItem, Entity, Order, OrderItem, Product, Review, User

T = TypeVar("T", bound=Entity)


class Repository(Generic[T]):
    """Keyed collection for one entity type.

    Ids come from ``next_id`` and are never reused, even after a delete.
    """

    def __init__(self, name: str, next_id: Optional[Callable[[], int]] = None):
        self.name = name
        self._rows: Dict[int, T] = {}
        self.next_id = next_id or itertools.count(1).__next__

    def get(self, entity_id: int) -> Optional[T]:
        return self._rows.get(entity_id)

    def put(self, entity: T) -> T:
        self._rows[entity.id] = entity
        return entity

    def remove(self, entity_id: int) -> bool:
        return self._rows.pop(entity_id, None) is not None

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        return next((row for row in list(self._rows.values()) if predicate(row)), None)

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return [row for row in list(self._rows.values()) if predicate(row)]

    def all(self) -> List[T]:
        return list(self._rows.values())

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._rows.values()))

    def __len__(self) -> int:
        return len(self._rows)


class MemoryStore:
    """All collections of one running application.

    Built once by ``create_app`` and shared through ``app.state``; tests get a
    fresh instance per app.
    """

    def __init__(self):
        self.users: Repository[User] = Repository("users")
        self.products: Repository[Product] = Repository("products")
        self.reviews: Repository[Review] = Repository("reviews")
        self.orders: Repository[Order] = Repository("orders")
        self.order_items: Repository[OrderItem] = Repository("order_items")
        self.cart_items: Repository[CartItem] = Repository("cart_items")
        self.lock = threading.RLock()
        self._user_locks = defaultdict(threading.Lock)

    def user_lock(self, user_id: int) -> threading.Lock:
        with self.lock:
            return self._user_locks[user_id]
