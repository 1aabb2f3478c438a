"""Race animator: cyclic playback of ranked frames on a render surface."""

from __future__ import annotations

import enum
import logging
import math
from operator import attrgetter
from typing import Any, Callable, Protocol, Sequence

from racechart.data.records import Entry, Frame
from racechart.visuals.anims.reconcile import reconcile
from racechart.visuals.anims.surface import BAR, LABEL, VALUE_LABEL, RenderSurface
from racechart.visuals.core.colors import ColorScale
from racechart.visuals.core.config import RaceConfig
from racechart.visuals.core.scales import BandScale, LinearScale

logger = logging.getLogger(__name__)

_entity = attrgetter("entity")


class Timer(Protocol):
    """The subset of ``matplotlib.backend_bases.TimerBase`` the animator uses."""

    def add_callback(self, func: Callable, *args: Any, **kwargs: Any) -> Callable: ...

    def remove_callback(self, func: Callable, *args: Any, **kwargs: Any) -> None: ...

    def start(self, interval: int | None = None) -> None: ...

    def stop(self) -> None: ...


class AnimatorState(enum.Enum):
    IDLE = "idle"
    PLAYING = "playing"


def format_value(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if float(value).is_integer():
        return str(int(value))
    return str(value)


class RaceAnimator:
    """Advances through ``frames`` and reconciles bars and labels on ``surface``.

    Each tick renders the frame at the cursor and then moves the cursor on,
    wrapping to the first frame after the last. Elements are matched to
    entries by entity, so an entity keeps the same bar (and color) as its rank
    changes.

    Args:
        frames: Ranked frames, as produced by ``build_frames``.
        surface: Where elements are created, animated and removed.
        config: Layout and timing; defaults to ``RaceConfig()``.
        entities: Entity universe used to assign colors, in order; pass
            ``entity_universe(records)`` for first-appearance order. Without
            it, colors follow the first frame's ranking instead. Either way
            an entity keeps its color for the whole playback.
    """

    def __init__(
        self,
        frames: Sequence[Frame],
        surface: RenderSurface,
        config: RaceConfig | None = None,
        entities: Sequence[str] | None = None,
    ) -> None:
        self.frames = list(frames)
        self.surface = surface
        self.config = config or RaceConfig()
        self.cursor: int | None = None
        self.current: Frame | None = None
        self.x = LinearScale(range=(0.0, surface.plot_width))
        self.y = BandScale(
            range=(0.0, surface.plot_height), padding=self.config.band_padding
        )
        if entities is None:
            entities = self.frames[0].entities if self.frames else []
        self.colors = ColorScale(entities, palette=self.config.palette)
        self._timer: Timer | None = None
        self._companions: list[Timer] = []

    @property
    def state(self) -> AnimatorState:
        return AnimatorState.IDLE if self.cursor is None else AnimatorState.PLAYING

    @property
    def is_running(self) -> bool:
        return self._timer is not None

    def tick(self) -> Frame | None:
        """Render the frame at the cursor and advance; no-op without frames."""
        if not self.frames:
            return None
        if self.cursor is None:
            self.cursor = 0
        frame = self.frames[self.cursor]
        self._render(frame)
        self.current = frame
        self.cursor = (self.cursor + 1) % len(self.frames)
        return frame

    def _render(self, frame: Frame) -> None:
        self.x.domain = (0.0, frame.max_value)
        self.y.domain = frame.entities

        duration = self.config.transition_duration
        families = (
            (BAR, self._bar_seed, self._bar_target),
            (LABEL, self._label_seed, self._label_target),
            (VALUE_LABEL, self._value_label_attrs, self._value_label_attrs),
        )
        for family, seed, target in families:
            joined = reconcile(self.surface.keys(family), frame.entries, _entity)
            for key in joined.exit:
                self.surface.remove(family, key)
            for entry in joined.enter:
                self.surface.create(family, entry.entity, seed(entry))
            for entry in joined.enter + joined.update:
                self.surface.animate(family, entry.entity, target(entry), duration)

        self.surface.set_time_label(frame.time_key)

    def _band_center(self, entry: Entry) -> float:
        return (self.y(entry.entity) or 0.0) + self.y.bandwidth / 2

    def _bar_seed(self, entry: Entry) -> dict[str, Any]:
        return {
            "x": 0.0,
            "y": self.y(entry.entity) or 0.0,
            "width": 0.0,
            "height": self.y.bandwidth,
            "fill": self.colors(entry.entity),
        }

    def _bar_target(self, entry: Entry) -> dict[str, Any]:
        return {
            "y": self.y(entry.entity) or 0.0,
            "width": self.x(entry.value),
            "height": self.y.bandwidth,
        }

    def _label_seed(self, entry: Entry) -> dict[str, Any]:
        return {
            "x": -self.config.label_offset,
            "y": self._band_center(entry),
            "text": entry.entity,
            "anchor": "end",
        }

    def _label_target(self, entry: Entry) -> dict[str, Any]:
        return {"y": self._band_center(entry)}

    def _value_label_attrs(self, entry: Entry) -> dict[str, Any]:
        return {
            "x": self.x(entry.value) + self.config.value_label_offset,
            "y": self._band_center(entry),
            "text": format_value(entry.value),
        }

    def start(self, timer: Timer, *companions: Timer) -> None:
        """Render the first frame now and tick on every ``timer`` event.

        ``companions`` (e.g. a redraw timer) are started after ``timer`` and
        stopped together with it.
        """
        if self._timer is not None:
            raise RuntimeError("animator is already running")
        timer.add_callback(self.tick)
        self._timer = timer
        self._companions = list(companions)
        self.tick()
        timer.start()
        for companion in self._companions:
            companion.start()
        logger.info("race playback started with %d frames", len(self.frames))

    def stop(self) -> None:
        """Stop and release the timers. Safe to call more than once."""
        timer, self._timer = self._timer, None
        if timer is None:
            return
        timer.stop()
        timer.remove_callback(self.tick)
        for companion in self._companions:
            companion.stop()
        self._companions = []
        logger.info("race playback stopped at cursor %s", self.cursor)

    def __enter__(self) -> "RaceAnimator":
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()
