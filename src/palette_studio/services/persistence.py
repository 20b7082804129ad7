from __future__ import annotations

import logging

from palette_studio.storage import AssetRecord, AssetStore

logger = logging.getLogger(__name__)


def record_quietly(store: AssetStore | None, record: AssetRecord) -> None:
    """Persist a generated asset; storage problems never fail the generation request."""
    if store is None:
        return
    try:
        store.record_generated_asset(record)
    except Exception:
        logger.exception("Failed to persist %s asset from %s", record.kind, record.source)
