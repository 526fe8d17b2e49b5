from __future__ import annotations

import json
from typing import List

from common.json_values import JsonValue, stringify_element
from common.unstable import UnstableHypixelObject


PACKAGES_PROPERTY = "packages"


class StatsCategory:
    """
    A grouping of stats belonging to a specific mini-game or other area of the server.

    Packages
    - Packages act as flags that something has been unlocked. For mini-games they
      indicate which cosmetics the player bought in the game's shop.
    - Some obscure packages (e.g. `achievement_flag_n`) are used internally by
      certain games and can be ignored.
    - Elements are normally strings. Other primitives are converted to their
      literal text; objects/arrays to compact JSON text.

    Reading a "packages" value that is present but not an array raises
    `common.unstable.PropertyTypeError`.
    """

    __slots__ = ("_props",)

    def __init__(self, raw: JsonValue) -> None:
        self._props = UnstableHypixelObject(raw)

    @classmethod
    def from_json(cls, text: str | bytes) -> "StatsCategory":
        return cls(json.loads(text))

    @property
    def properties(self) -> UnstableHypixelObject:
        """Accessor for the other (untyped) stats in this category."""
        return self._props

    def get_packages(self) -> List[str]:
        """All unlocked packages in payload order, duplicates kept. May be empty."""
        raw_packages = self._props.get_array_property(PACKAGES_PROPERTY)
        if not raw_packages:
            return []
        return [stringify_element(pkg) for pkg in raw_packages]

    def has_package(self, name: str) -> bool:
        """Whether `name` is unlocked in this category (exact, case-sensitive match)."""
        for pkg in self._props.get_array_property(PACKAGES_PROPERTY):
            if stringify_element(pkg) == name:
                return True
        return False

    def __repr__(self) -> str:
        return f"StatsCategory({self._props.get_raw()!r})"
