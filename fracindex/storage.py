from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional

from .config import get_default_keyspace
from .models import Keyspace, OrderedItem

logger = logging.getLogger(__name__)


class OrderedList:
    """In-memory sequence of items positioned by fractional order keys.

    Items are never renumbered: inserting or moving one item assigns that item
    a new key between its neighbours and leaves every other key untouched.
    """

    def __init__(self, keyspace: Optional[Keyspace] = None) -> None:
        self.keyspace = keyspace if keyspace is not None else get_default_keyspace()
        self.items: Dict[str, OrderedItem] = {}

    # === Reads ===
    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self.items

    def __iter__(self) -> Iterator[OrderedItem]:
        return iter(self.ordered())

    def ordered(self) -> List[OrderedItem]:
        return sorted(self.items.values(), key=lambda i: (i.sort_key, i.id))

    def get(self, item_id: str) -> OrderedItem:
        return self.items[item_id]

    def ids(self) -> List[str]:
        return [i.id for i in self.ordered()]

    def keys(self) -> List[str]:
        return [i.sort_key for i in self.ordered()]

    def first(self) -> Optional[OrderedItem]:
        ordered = self.ordered()
        return ordered[0] if ordered else None

    def last(self) -> Optional[OrderedItem]:
        ordered = self.ordered()
        return ordered[-1] if ordered else None

    # === Inserts ===
    def _bounds(self, prev_id: Optional[str], next_id: Optional[str]) -> tuple:
        left = self.items[prev_id].sort_key if prev_id is not None else None
        right = self.items[next_id].sort_key if next_id is not None else None
        return left, right

    def _last_other(self, item_id: Optional[str] = None) -> Optional[str]:
        for item in reversed(self.ordered()):
            if item.id != item_id:
                return item.id
        return None

    def _check_new(self, item_id: str) -> None:
        if item_id in self.items:
            raise ValueError(f"item {item_id} already in list")

    def insert(
        self,
        item_id: str,
        payload: Any = None,
        prev_id: Optional[str] = None,
        next_id: Optional[str] = None,
    ) -> OrderedItem:
        self._check_new(item_id)
        if prev_id is None and next_id is None:
            prev_id = self._last_other()
        left, right = self._bounds(prev_id, next_id)
        item = OrderedItem(
            id=item_id,
            sort_key=self.keyspace.key_between(left, right),
            payload=payload,
            version=1,
        )
        self.items[item_id] = item
        logger.debug("inserted %s at %s", item_id, item.sort_key)
        return item

    def append(self, item_id: str, payload: Any = None) -> OrderedItem:
        last = self.last()
        return self.insert(item_id, payload, prev_id=last.id if last else None)

    def prepend(self, item_id: str, payload: Any = None) -> OrderedItem:
        first = self.first()
        return self.insert(item_id, payload, next_id=first.id if first else None)

    def extend(
        self,
        item_ids: Iterable[str],
        payloads: Optional[Iterable[Any]] = None,
        prev_id: Optional[str] = None,
        next_id: Optional[str] = None,
    ) -> List[OrderedItem]:
        """Insert several items in order with one evenly spread batch of keys.

        Without neighbours the batch goes after the current last item.
        ``payloads``, when given, pairs up with ``item_ids`` in order.
        """
        item_ids = list(item_ids)
        payloads = list(payloads) if payloads is not None else [None] * len(item_ids)
        if len(payloads) != len(item_ids):
            raise ValueError("payloads must match item ids")
        if len(set(item_ids)) != len(item_ids):
            raise ValueError("duplicate item ids in batch")
        for item_id in item_ids:
            self._check_new(item_id)
        if prev_id is None and next_id is None:
            prev_id = self._last_other()
        left, right = self._bounds(prev_id, next_id)
        keys = self.keyspace.n_keys_between(left, right, len(item_ids))
        added = []
        for item_id, sort_key, payload in zip(item_ids, keys, payloads):
            item = OrderedItem(id=item_id, sort_key=sort_key, payload=payload, version=1)
            self.items[item_id] = item
            added.append(item)
        logger.debug("inserted %d items between %s and %s", len(added), left, right)
        return added

    # === Moves ===
    def move(
        self,
        item_id: str,
        prev_id: Optional[str] = None,
        next_id: Optional[str] = None,
    ) -> OrderedItem:
        item = self.items[item_id]
        if prev_id is None and next_id is None:
            prev_id = self._last_other(item_id)
        left, right = self._bounds(prev_id, next_id)
        item.sort_key = self.keyspace.key_between(left, right)
        item.version += 1
        logger.debug("moved %s to %s", item_id, item.sort_key)
        return item

    def move_to_front(self, item_id: str) -> OrderedItem:
        first = self.first()
        return self.move(item_id, next_id=first.id if first else None)

    def move_to_back(self, item_id: str) -> OrderedItem:
        last = self.last()
        return self.move(item_id, prev_id=last.id if last else None)

    def remove(self, item_id: str) -> None:
        del self.items[item_id]
