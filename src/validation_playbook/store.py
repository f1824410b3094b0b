"""
In-Memory Store

Thread-safe repositories for the example records. Ids start at 1 and
only ever increase (deletes do not free ids; clear() restarts them).
"""

import itertools
import threading
from typing import Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from validation_playbook.models import Employee, Product, User

RecordT = TypeVar("RecordT", bound=BaseModel)


class Repository(Generic[RecordT]):
    """Stores records of one model class keyed by id."""

    def __init__(self, record_cls: Type[RecordT]):
        self.record_cls = record_cls
        self._items: Dict[int, RecordT] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def add(self, payload: BaseModel) -> RecordT:
        """Creates a record from a *Create payload and assigns the next id."""
        with self._lock:
            record = self.record_cls(id=next(self._ids), **payload.model_dump())
            self._items[record.id] = record
        return record

    def get(self, record_id: int) -> Optional[RecordT]:
        return self._items.get(record_id)

    def list(self, **filters) -> List[RecordT]:
        """Records whose attributes equal every non-None filter, in id order."""
        active = {k: v for k, v in filters.items() if v is not None}
        with self._lock:
            records = list(self._items.values())
        return [r for r in records if all(getattr(r, k) == v for k, v in active.items())]

    def delete(self, record_id: int) -> bool:
        with self._lock:
            return self._items.pop(record_id, None) is not None

    def count(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
            self._ids = itertools.count(1)


class Store:
    """All repositories used by the API and the onboarding workflow."""

    def __init__(self):
        self.users: Repository[User] = Repository(User)
        self.products: Repository[Product] = Repository(Product)
        self.employees: Repository[Employee] = Repository(Employee)

    def clear(self) -> None:
        for repo in (self.users, self.products, self.employees):
            repo.clear()


_store = Store()


def get_store() -> Store:
    return _store


def reset_store() -> None:
    _store.clear()
