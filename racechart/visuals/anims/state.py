"""Animation state used by the race surface.

Tracks, per visual element, the attribute values it is moving from and to so
that successive frames interpolate smoothly, even when a new transition
starts before the previous one has finished.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def ease_cubic_in_out(t: float) -> float:
    t *= 2
    if t <= 1:
        return t * t * t / 2
    t -= 2
    return (t * t * t + 2) / 2


@dataclass
class Tween:
    start: float
    end: float
    started_at: float
    duration: float

    def progress(self, now: float) -> float:
        if self.duration <= 0:
            return 1.0
        return min(1.0, max(0.0, (now - self.started_at) / self.duration))

    def value_at(self, now: float) -> float:
        return self.start + (self.end - self.start) * ease_cubic_in_out(
            self.progress(now)
        )

    def done(self, now: float) -> bool:
        return self.progress(now) >= 1.0


@dataclass
class ElementState:
    """Attribute values of one visual element plus its running tweens."""

    attrs: dict[str, Any] = field(default_factory=dict)
    tweens: dict[str, Tween] = field(default_factory=dict)

    def current(self, name: str, now: float) -> Any:
        tween = self.tweens.get(name)
        if tween is not None:
            return tween.value_at(now)
        return self.attrs.get(name)

    def retarget(self, name: str, value: float, now: float, duration: float) -> None:
        """Start moving ``name`` to ``value`` from wherever it is at ``now``."""
        start = self.current(name, now)
        if start is None:
            start = value
        self.tweens[name] = Tween(float(start), float(value), now, duration)

    def step(self, now: float) -> dict[str, Any]:
        """Advance tweens to ``now`` and return the resulting attributes."""
        for name, tween in list(self.tweens.items()):
            self.attrs[name] = tween.value_at(now)
            if tween.done(now):
                del self.tweens[name]
        return self.attrs
