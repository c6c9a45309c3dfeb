"""Application service: drop draft lines."""

from __future__ import annotations

from restock.domain.model.draft import DraftSession


class RemoveLineItemHandler:

    def __init__(self, session: DraftSession) -> None:
        self._session = session

    def handle(self, draft_id: int) -> bool:
        """Remove one line. Unknown ids are a no-op."""
        return self._session.remove(draft_id)


class ClearDraftHandler:

    def __init__(self, session: DraftSession) -> None:
        self._session = session

    def handle(self) -> int:
        """Clear All: empty the draft and restart ids at 1."""
        dropped = len(self._session)
        self._session.reset()
        return dropped
