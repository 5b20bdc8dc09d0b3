"""Logging bootstrap for scripts and the Streamlit app."""

from __future__ import annotations

import logging

from .settings import LOG_LEVEL


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging once; later calls are no-ops (basicConfig semantics)."""
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
