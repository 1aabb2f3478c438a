"""Record and frame types shared by the data and visuals packages."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Record:
    """One observation of an entity's value at a time key."""

    time_key: str
    entity: str
    value: float


@dataclass(frozen=True)
class Entry:
    entity: str
    value: float


@dataclass(frozen=True)
class Frame:
    """Ranked snapshot of every entity at a single time key.

    Entries are ordered by descending value and cover the whole entity
    universe.
    """

    time_key: str
    entries: tuple[Entry, ...]

    @property
    def entities(self) -> list[str]:
        return [entry.entity for entry in self.entries]

    @property
    def max_value(self) -> float:
        values = [e.value for e in self.entries if not math.isnan(e.value)]
        return max(values, default=0.0)

    def to_dict(self) -> dict:
        return {
            "time_key": self.time_key,
            "entries": [
                {"entity": e.entity, "value": e.value} for e in self.entries
            ],
        }
