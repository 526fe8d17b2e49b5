from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from common.unstable import HypixelError

from .category import StatsCategory
from .player import PlayerReply


logger = logging.getLogger(__name__)

# Base directory for relative payload names
ENV_DATA_DIR = "HYPIXEL_DATA_DIR"
DEFAULT_DATA_DIR = "data"


class PayloadError(HypixelError):
    """A payload file could not be read, parsed, or validated."""


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.environ.get(name)
    return val if val not in (None, "") else default


def resolve_payload_path(name: os.PathLike[str] | str) -> Path:
    """
    Locate a payload file.

    Absolute paths and paths that exist relative to the working directory are
    used as-is. Anything else is looked up under `$HYPIXEL_DATA_DIR` (or
    `./data` when unset).
    """
    p = Path(name)
    if p.is_absolute() or p.exists():
        return p
    base = _getenv(ENV_DATA_DIR, DEFAULT_DATA_DIR)
    return Path(base) / p  # type: ignore[arg-type]


def _read_json(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as exc:
        raise PayloadError(f"Cannot read payload {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise PayloadError(f"Malformed JSON in {path}: {exc}") from exc


def load_player_reply(name: os.PathLike[str] | str) -> PlayerReply:
    path = resolve_payload_path(name)
    data = _read_json(path)
    logger.debug("Loaded player reply from %s", path)
    try:
        return PlayerReply.model_validate(data)
    except ValidationError as ve:
        raise PayloadError(f"Invalid player reply in {path}: {ve}") from ve


def load_stats_category(
    name: os.PathLike[str] | str,
    category: Optional[str] = None,
) -> StatsCategory:
    """
    Load a single stats category.

    - Without `category`, the file holds the category object itself.
    - With `category`, the file holds a full player reply and the named
      category is taken from `player.stats`.
    """
    if category is None:
        path = resolve_payload_path(name)
        data = _read_json(path)
        logger.debug("Loaded stats category from %s", path)
        return StatsCategory(data)

    stats = load_player_reply(name).stats()
    found = stats.get_category(category)
    if found is None:
        raise PayloadError(f"Category '{category}' not present in {name}")
    return found


__all__ = [
    "ENV_DATA_DIR",
    "PayloadError",
    "resolve_payload_path",
    "load_player_reply",
    "load_stats_category",
]
