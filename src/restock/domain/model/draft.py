"""Draft Session: the unsaved batch of replenishment line items.

The session is an explicit state object owned by one workflow; there is
no module-level counter, so independent sessions never share ids.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from restock.domain.model.value_objects import Quantity, Urgency


@dataclass(frozen=True)
class DraftLineItem:
    """One requested product/quantity/supplier/urgency/notes tuple.

    ``product_name``, ``current_stock`` and ``min_stock`` are copied from
    the inventory snapshot at admission time and are never re-read: the
    line shows what the user saw when they added it.

    Line items are replace-only. ``draft_id`` is None until the session
    admits the line.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    supplier: str
    urgency: Urgency = Urgency.NORMAL
    notes: str = ""
    current_stock: int = 0
    min_stock: int | None = None
    draft_id: int | None = None


class DraftSession:
    """Ordered in-memory store of line items pending submission.

    Invariants:
    - ``draft_id`` values are unique and strictly increasing in admission order
    - ids are never reused, even after removal
    - the counter only goes back to 1 through ``reset()``
    """

    def __init__(self) -> None:
        self._items: list[DraftLineItem] = []
        self._next_id = 1

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._items)

    def add(self, line: DraftLineItem) -> DraftLineItem:
        """Append a line, stamping it with the next draft id.

        No duplicate detection: the same product may appear several times
        (e.g. split across suppliers).
        """
        admitted = replace(line, draft_id=self._next_id)
        self._items.append(admitted)
        self._next_id += 1
        return admitted

    def remove(self, draft_id: int) -> bool:
        """Remove the line with *draft_id*; returns False if it was absent."""
        for i, item in enumerate(self._items):
            if item.draft_id == draft_id:
                del self._items[i]
                return True
        return False

    def discard(self, lines: Iterable[DraftLineItem]) -> None:
        """Remove exactly the given line objects.

        Matching is by identity, so a line admitted after a reset that
        happens to reuse an id is not mistaken for a submitted one.
        """
        gone = {id(line) for line in lines}
        self._items = [item for item in self._items if id(item) not in gone]

    def clear(self) -> None:
        """Empty the store. The id counter is left as is."""
        self._items = []

    def reset(self) -> None:
        """Empty the store and restart ids at 1."""
        self._items = []
        self._next_id = 1

    def list(self) -> list[DraftLineItem]:
        """Return the line items oldest first."""
        return list(self._items)
