# force_ui/storage/decision_log_store.py

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from ..models import DecisionLog

if TYPE_CHECKING:
    from .sqlite_store import SqliteStore

logger = logging.getLogger(__name__)

MAX_LOGS = 20


class DecisionLogStore:
    """
    Append-only history of orchestration runs, capped at the most recent
    `max_logs` entries, plus a "current" pointer for display.
    """

    def __init__(self, store: SqliteStore | None = None, max_logs: int = MAX_LOGS) -> None:
        self.store = store
        self.max_logs = max_logs
        self.logs: list[DecisionLog] = []
        self.current_log: DecisionLog | None = None

    def load(self) -> list[DecisionLog]:
        if self.store is None:
            return self.logs

        try:
            self.logs = self.store.list_logs(limit=self.max_logs)
        except (ValidationError, ValueError) as e:
            logger.error("[DecisionLogStore.load] Stored logs are malformed, starting empty: %s", e)
            self.logs = []

        self.current_log = self.logs[-1] if self.logs else None
        return self.logs

    def add_log(self, log: DecisionLog) -> None:
        self.logs = (self.logs + [log])[-self.max_logs:]
        self.current_log = log
        if self.store is not None:
            self.store.insert_log(log, keep=self.max_logs)

    def set_current_log(self, log: DecisionLog | None) -> None:
        self.current_log = log

    def get_recent_logs(self, count: int) -> list[DecisionLog]:
        """Up to `count` most recent logs, oldest first."""
        if count <= 0:
            return []
        return self.logs[-count:]

    def clear(self) -> None:
        self.logs = []
        self.current_log = None
        if self.store is not None:
            self.store.clear_logs()

    def __len__(self) -> int:
        return len(self.logs)
