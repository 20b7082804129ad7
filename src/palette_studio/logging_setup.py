from __future__ import annotations

import logging

_configured = False


def configure_logging(level: str = "INFO") -> None:
    global _configured
    if _configured:
        return
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _configured = True


def preview(text: str, limit: int = 100) -> str:
    """Shorten a prompt for log lines."""
    return text if len(text) <= limit else text[:limit] + "..."
