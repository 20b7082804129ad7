from __future__ import annotations

import json
import logging
import os
import threading
import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Literal, Protocol

from palette_studio.config import settings

logger = logging.getLogger(__name__)

AppMode = Literal["color", "product", "invitation"]

ANONYMOUS_SESSION = "_anonymous"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _safe_key(name: str) -> str:
    # Session keys become file names; prevent path traversal.
    return os.path.basename(name).replace("..", "_") or ANONYMOUS_SESSION


@dataclass(frozen=True)
class AssetRecord:
    app_mode: AppMode
    kind: str  # image|video
    source: str  # route that produced it
    session_key: str | None = None
    url: str | None = None
    data_url: str | None = None
    prompt: str | None = None
    metadata: dict[str, Any] | None = None
    palette: Any = None
    created_at: str = field(default_factory=_now_iso)
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])


class AssetStore(Protocol):
    def record_generated_asset(self, record: AssetRecord) -> None: ...

    def save_session_state(self, session_key: str, mode: str, state: dict[str, Any]) -> None: ...

    def fetch_session_state(self, session_key: str) -> dict[str, Any] | None: ...

    def list_assets(self, session_key: str, kind: str | None = None, limit: int = 200) -> list[dict[str, Any]]: ...


class LocalAssetStore:
    """JSON files under data_dir: one file per session state, one asset list per session."""

    def __init__(self, root_dir: Path | str | None = None) -> None:
        self.root_dir = Path(root_dir or settings.data_dir).resolve()
        self.sessions_dir = self.root_dir / "sessions"
        self.assets_dir = self.root_dir / "assets"
        self.sessions_dir.mkdir(parents=True, exist_ok=True)
        self.assets_dir.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def _assets_path(self, session_key: str | None) -> Path:
        return self.assets_dir / f"{_safe_key(session_key or ANONYMOUS_SESSION)}.json"

    def _read_assets(self, path: Path) -> list[dict[str, Any]]:
        if not path.exists():
            return []
        return json.loads(path.read_text("utf-8"))

    def record_generated_asset(self, record: AssetRecord) -> None:
        path = self._assets_path(record.session_key)
        with self._lock:
            rows = self._read_assets(path)
            rows.append(asdict(record))
            path.write_text(json.dumps(rows, indent=2), encoding="utf-8")

    def save_session_state(self, session_key: str, mode: str, state: dict[str, Any]) -> None:
        if not session_key:
            return
        path = self.sessions_dir / f"{_safe_key(session_key)}.json"
        row = {"session_key": session_key, "mode": mode, "state": state, "updated_at": _now_iso()}
        with self._lock:
            if path.exists():
                row["created_at"] = json.loads(path.read_text("utf-8")).get("created_at", row["updated_at"])
            else:
                row["created_at"] = row["updated_at"]
            path.write_text(json.dumps(row, indent=2), encoding="utf-8")

    def fetch_session_state(self, session_key: str) -> dict[str, Any] | None:
        if not session_key:
            return None
        path = self.sessions_dir / f"{_safe_key(session_key)}.json"
        if not path.exists():
            return None
        return json.loads(path.read_text("utf-8"))

    def list_assets(self, session_key: str, kind: str | None = None, limit: int = 200) -> list[dict[str, Any]]:
        rows = self._read_assets(self._assets_path(session_key))
        if kind:
            rows = [r for r in rows if r.get("kind") == kind]
        rows.sort(key=lambda r: r.get("created_at", ""), reverse=True)
        return rows[:limit]


class SupabaseAssetStore:
    """`assets` and `sessions` tables accessed with the service-role key."""

    def __init__(self, url: str, service_role_key: str) -> None:
        from supabase import create_client

        self.client = create_client(url, service_role_key)

    def record_generated_asset(self, record: AssetRecord) -> None:
        row = asdict(record)
        # Postgres generates id and created_at.
        row.pop("id", None)
        row.pop("created_at", None)
        self.client.table("assets").insert(row).execute()

    def save_session_state(self, session_key: str, mode: str, state: dict[str, Any]) -> None:
        if not session_key:
            return
        self.client.table("sessions").upsert({"session_key": session_key, "mode": mode, "state": state}).execute()

    def fetch_session_state(self, session_key: str) -> dict[str, Any] | None:
        if not session_key:
            return None
        resp = self.client.table("sessions").select("*").eq("session_key", session_key).limit(1).execute()
        rows = resp.data or []
        return rows[0] if rows else None

    def list_assets(self, session_key: str, kind: str | None = None, limit: int = 200) -> list[dict[str, Any]]:
        query = self.client.table("assets").select("*").eq("session_key", session_key)
        if kind:
            query = query.eq("kind", kind)
        return query.order("created_at", desc=True).limit(limit).execute().data or []


_store: AssetStore | None = None


def get_store() -> AssetStore:
    global _store
    if _store is None:
        if settings.supabase_url and settings.supabase_service_role_key:
            logger.info("Persisting assets to Supabase")
            _store = SupabaseAssetStore(settings.supabase_url, settings.supabase_service_role_key)
        else:
            logger.info("Persisting assets under %s", settings.data_dir)
            _store = LocalAssetStore()
    return _store
