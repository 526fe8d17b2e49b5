from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from common.unstable import (
    HypixelError,
    PropertyTypeError,
    UnstableHypixelObject,
    get_object_property,
)

from .category import StatsCategory


class HypixelApiError(HypixelError):
    """The API reply reported `success: false`."""


class PlayerStats:
    """
    View over a player's `stats` object: category name -> category payload.

    Category names are the API's own keys (e.g. "Bedwars", "SkyWars",
    "HungerGames") and are matched exactly.
    """

    __slots__ = ("_props",)

    def __init__(self, raw: Optional[Dict[str, Any]]) -> None:
        self._props = UnstableHypixelObject(raw or {})

    def category_names(self) -> List[str]:
        raw = self._props.get_raw()
        return list(raw.keys()) if isinstance(raw, dict) else []

    def get_category(self, name: str) -> Optional[StatsCategory]:
        # Plain key lookup, not a dotted path
        raw = self._props.get_raw()
        value = raw.get(name) if isinstance(raw, dict) else None
        if value is None:
            return None
        if not isinstance(value, dict):
            raise PropertyTypeError(name, "an object", value)
        return StatsCategory(value)

    def has_package(self, category: str, name: str) -> bool:
        cat = self.get_category(category)
        return cat is not None and cat.has_package(name)


class PlayerReply(BaseModel):
    """
    Envelope of a `/player` reply.

    Fields
    - success: whether the request was fulfilled.
    - cause: error description when `success` is false.
    - player: raw player object; null when the player has never joined.
    """

    success: bool
    cause: Optional[str] = Field(default=None, description="Failure reason")
    player: Optional[Dict[str, Any]] = Field(
        default=None, description="Raw player payload (schema not enforced)"
    )

    def raise_for_error(self) -> None:
        if not self.success:
            raise HypixelApiError(self.cause or "API reported failure")

    def stats(self) -> PlayerStats:
        self.raise_for_error()
        if self.player is None:
            return PlayerStats(None)
        return PlayerStats(get_object_property(self.player, "stats"))


__all__ = ["HypixelApiError", "PlayerReply", "PlayerStats"]
