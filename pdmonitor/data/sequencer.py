"""
pdmonitor/data/sequencer.py
───────────────────────────
Per-view request sequence numbers.

Each view instance issues a new token before it fetches; when the response
arrives the view checks the token is still the latest one issued for it and
drops the response otherwise. Thread safety: module-level lock, the same way
the Dash server may run callbacks on several threads.
"""
from __future__ import annotations

import threading
from collections import OrderedDict

# Oldest view keys are forgotten past this many entries
MAX_TRACKED_VIEWS = 4096


class RequestSequencer:

    def __init__(self, max_views: int = MAX_TRACKED_VIEWS) -> None:
        self._lock = threading.Lock()
        self._latest: OrderedDict[str, int] = OrderedDict()
        self._max_views = max_views

    def issue(self, view_key: str) -> int:
        """Start a new request for ``view_key``; returns its token."""
        with self._lock:
            token = self._latest.pop(view_key, 0) + 1
            self._latest[view_key] = token
            while len(self._latest) > self._max_views:
                self._latest.popitem(last=False)
            return token

    def is_current(self, view_key: str, token: int) -> bool:
        with self._lock:
            return self._latest.get(view_key) == token


sequencer = RequestSequencer()


def view_key(instance_id: str | None, view: str) -> str:
    return f"{instance_id or 'anonymous'}:{view}"
