"""Icon lookup against the game's generator catalog."""
from __future__ import annotations

import logging
from typing import Mapping

logger = logging.getLogger(__name__)

DEFAULT_ICON = "⚪"


def extract_icon(name: str | None, default: str = DEFAULT_ICON) -> str:
    """First whitespace-delimited token of a display name, e.g. ``"🦠 Bacteria"``."""
    if not name:
        return default
    tokens = name.split()
    return tokens[0] if tokens else default


def lookup_icon(
    catalog: Mapping[str, str], generator_id: str, default: str = DEFAULT_ICON,
) -> str | None:
    """Icon for a generator id, or None when the catalog has no entry."""
    name = catalog.get(generator_id)
    if name is None:
        logger.debug("generator %r missing from catalog", generator_id)
        return None
    return extract_icon(name, default)
