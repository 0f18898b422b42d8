# force_ui/storage/sqlite_store.py

import json
import os
import sqlite3
from typing import Any

from ..models import DecisionLog
from ..timeutils import now_iso

IN_MEMORY = ":memory:"


class SqliteStore:
    """
    SQLite-backed durable state for ForceUI.

    - kv_state: named JSON blobs (memory, persona selection)
    - decision_logs: one row per DecisionLog, pruned to the most recent N
    """

    def __init__(self, path: str = "~/.forceui/state.db") -> None:
        if path == IN_MEMORY:
            self.path = path
        else:
            self.path = os.path.expanduser(path)
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
        self.conn = sqlite3.connect(self.path, check_same_thread=False)
        self.conn.row_factory = sqlite3.Row
        self._init_schema()

    def _init_schema(self) -> None:
        cur = self.conn.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS kv_state (
                name TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TEXT
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS decision_logs (
                seq INTEGER PRIMARY KEY AUTOINCREMENT,
                id TEXT UNIQUE NOT NULL,
                timestamp TEXT,
                payload TEXT NOT NULL
            );
            """
        )
        cur.execute("CREATE INDEX IF NOT EXISTS idx_logs_timestamp ON decision_logs(timestamp);")
        self.conn.commit()

    # ------------------------------------------------------------------ #
    # Named JSON state
    # ------------------------------------------------------------------ #

    def get_state(self, name: str) -> Any | None:
        """Decoded JSON value stored under `name`, or None. Raises ValueError on corrupt JSON."""
        cur = self.conn.cursor()
        cur.execute("SELECT value FROM kv_state WHERE name = ? LIMIT 1;", (name,))
        row = cur.fetchone()
        if row is None:
            return None
        return json.loads(row["value"])

    def set_state(self, name: str, value: Any) -> None:
        cur = self.conn.cursor()
        cur.execute(
            "INSERT OR REPLACE INTO kv_state (name, value, updated_at) VALUES (?, ?, ?);",
            (name, json.dumps(value), now_iso()),
        )
        self.conn.commit()

    def delete_state(self, name: str) -> None:
        cur = self.conn.cursor()
        cur.execute("DELETE FROM kv_state WHERE name = ?;", (name,))
        self.conn.commit()

    # ------------------------------------------------------------------ #
    # Decision logs
    # ------------------------------------------------------------------ #

    def insert_log(self, log: DecisionLog, keep: int) -> None:
        """Append `log` and drop everything but the `keep` most recent rows."""
        cur = self.conn.cursor()
        cur.execute(
            "INSERT OR REPLACE INTO decision_logs (id, timestamp, payload) VALUES (?, ?, ?);",
            (log.id, log.timestamp, log.model_dump_json()),
        )
        cur.execute(
            """
            DELETE FROM decision_logs
            WHERE seq NOT IN (
                SELECT seq FROM decision_logs ORDER BY seq DESC LIMIT ?
            );
            """,
            (keep,),
        )
        self.conn.commit()

    def list_logs(self, limit: int | None = None) -> list[DecisionLog]:
        """Stored logs, oldest first."""
        cur = self.conn.cursor()
        if limit is None:
            cur.execute("SELECT payload FROM decision_logs ORDER BY seq ASC;")
        else:
            cur.execute(
                """
                SELECT payload FROM (
                    SELECT seq, payload FROM decision_logs ORDER BY seq DESC LIMIT ?
                ) ORDER BY seq ASC;
                """,
                (limit,),
            )
        rows = cur.fetchall()
        return [DecisionLog.model_validate_json(r["payload"]) for r in rows]

    def clear_logs(self) -> None:
        cur = self.conn.cursor()
        cur.execute("DELETE FROM decision_logs;")
        self.conn.commit()

    def close(self) -> None:
        self.conn.close()
