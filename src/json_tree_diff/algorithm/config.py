"""DiffConfig for diff engine configuration.

DiffConfig is a frozen (immutable) dataclass holding the engine options.
Arrays are always compared positionally by index; there is no content-based
alignment mode.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for the diff engine.

    Attributes:
        sort_keys: When True, children of an object comparison are ordered by
            key.  When False (default), old-side keys come first in insertion
            order, followed by keys that only exist on the new side.  Neither
            order is part of the result contract; use ``sort_keys`` when a
            reproducible rendering order matters.
    """

    sort_keys: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.sort_keys, bool):
            msg = f"sort_keys must be a bool, got {type(self.sort_keys).__name__}"
            raise TypeError(msg)
