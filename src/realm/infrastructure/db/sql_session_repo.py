from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from realm.domain.models.session import SessionCursor
from realm.domain.repositories import SessionRepository


_CREATE_SNAPSHOT_TABLE = """
    CREATE TABLE IF NOT EXISTS session_snapshot (
        save_key VARCHAR(190) PRIMARY KEY,
        player_name VARCHAR(120) NOT NULL,
        location_id VARCHAR(64) NOT NULL,
        turn_count INTEGER NOT NULL,
        payload_json TEXT NOT NULL,
        saved_at VARCHAR(40) NOT NULL
    )
"""

_UPSERT_MYSQL = """
    INSERT INTO session_snapshot (save_key, player_name, location_id, turn_count, payload_json, saved_at)
    VALUES (:save_key, :player_name, :location_id, :turn_count, :payload_json, :saved_at)
    ON DUPLICATE KEY UPDATE
        player_name = VALUES(player_name),
        location_id = VALUES(location_id),
        turn_count = VALUES(turn_count),
        payload_json = VALUES(payload_json),
        saved_at = VALUES(saved_at)
"""

_UPSERT_SQLITE = """
    INSERT INTO session_snapshot (save_key, player_name, location_id, turn_count, payload_json, saved_at)
    VALUES (:save_key, :player_name, :location_id, :turn_count, :payload_json, :saved_at)
    ON CONFLICT(save_key) DO UPDATE SET
        player_name = excluded.player_name,
        location_id = excluded.location_id,
        turn_count = excluded.turn_count,
        payload_json = excluded.payload_json,
        saved_at = excluded.saved_at
"""


class SqlSessionRepository(SessionRepository):
    """Session snapshots in a single ``session_snapshot`` table, one transaction per save."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self.SessionLocal = sessionmaker(bind=engine, autoflush=False)

    @classmethod
    def from_url(cls, database_url: str) -> "SqlSessionRepository":
        repo = cls(create_engine(database_url, future=True))
        repo.ensure_schema()
        return repo

    def ensure_schema(self) -> None:
        with self.engine.begin() as conn:
            conn.execute(text(_CREATE_SNAPSHOT_TABLE))

    def save(self, cursor: SessionCursor) -> None:
        statement = _UPSERT_MYSQL if self.engine.dialect.name == "mysql" else _UPSERT_SQLITE
        with self.SessionLocal.begin() as session:
            session.execute(
                text(statement),
                {
                    "save_key": cursor.save_key,
                    "player_name": cursor.player.name,
                    "location_id": cursor.current_location.value,
                    "turn_count": int(cursor.turn_count),
                    "payload_json": json.dumps(cursor.to_dict(), sort_keys=True),
                    "saved_at": datetime.now(timezone.utc).isoformat(),
                },
            )

    def load(self, player_name: str) -> Optional[SessionCursor]:
        with self.SessionLocal() as session:
            row = session.execute(
                text("SELECT payload_json FROM session_snapshot WHERE save_key = :save_key"),
                {"save_key": f"{player_name}_autosave"},
            ).first()
        if row is None:
            return None
        return SessionCursor.from_dict(json.loads(row.payload_json))
