"""Logging setup for HotelHook processes."""

import logging

LOG_FORMAT = "[%(asctime)s] %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Install a single stream handler on the ``hotelhook`` logger.

    Calling it again only updates the level.

    Args:
        level: Level name (e.g. 'DEBUG') or numeric level
    """
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger("hotelhook")
    root.setLevel(level)

    if not any(getattr(h, "_hotelhook", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._hotelhook = True  # type: ignore[attr-defined]
        root.addHandler(handler)


def preview(text: str, limit: int = 200) -> str:
    """Shorten text for log output."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
