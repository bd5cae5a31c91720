"""
Per page-view session state.

A session is either browsing (paged deals list, filtered by store and sort)
or searching (title search, no paging). State only changes through the
transition methods below.
"""

from __future__ import annotations

import uuid
from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional

from gamedeals.core.config import settings


@dataclass
class SessionState:
    page: int = 0
    search_term: str = ""
    store_filter: str = ""
    sort_key: str = ""
    generation: int = 0

    @property
    def is_searching(self) -> bool:
        return bool(self.search_term)

    def submit_search(self, term: str) -> None:
        self.search_term = (term or "").strip()
        self.page = 0

    def change_sort(self, sort_key: str) -> None:
        self.sort_key = sort_key or ""
        self.search_term = ""
        self.page = 0

    def change_store(self, store_id: str) -> None:
        self.store_filter = store_id or ""
        self.search_term = ""
        self.page = 0

    def load_more(self) -> bool:
        """
        Advance to the next page. Search mode has no paging, so the event is
        ignored there and False is returned.
        """
        if self.is_searching:
            return False
        self.page += 1
        return True

    def next_generation(self) -> int:
        self.generation += 1
        return self.generation


class SessionRegistry:
    """
    In-memory sessions keyed by id. Lost on restart.

    Least recently used sessions are dropped once more than `max_sessions`
    are held.
    """

    def __init__(self, max_sessions: Optional[int] = None) -> None:
        self._sessions: OrderedDict[str, SessionState] = OrderedDict()
        self.max_sessions = max_sessions if max_sessions is not None else settings.MAX_SESSIONS

    def create(self) -> tuple[str, SessionState]:
        session_id = uuid.uuid4().hex
        state = SessionState()
        self._sessions[session_id] = state
        while len(self._sessions) > self.max_sessions:
            self._sessions.popitem(last=False)
        return session_id, state

    def get(self, session_id: str) -> Optional[SessionState]:
        state = self._sessions.get(session_id)
        if state is not None:
            self._sessions.move_to_end(session_id)
        return state

    def __len__(self) -> int:
        return len(self._sessions)
