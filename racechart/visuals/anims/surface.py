"""Rendering surfaces the race animator draws on.

The animator only needs keyed create/animate/remove primitives; the
Matplotlib implementation draws bars as ``Rectangle`` patches and labels as
``Text`` artists in pixel plot coordinates, y pointing down.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Callable

import matplotlib.pyplot as plt
from matplotlib.artist import Artist
from matplotlib.patches import Rectangle
from matplotlib.text import Text

from racechart.visuals.anims.state import ElementState
from racechart.visuals.core.config import RaceConfig

logger = logging.getLogger(__name__)

BAR = "bar"
LABEL = "label"
VALUE_LABEL = "value-label"
FAMILIES = (BAR, LABEL, VALUE_LABEL)

NUMERIC_ATTRS = ("x", "y", "width", "height")

_ANCHORS = {"start": "left", "middle": "center", "end": "right"}


class RenderSurface(ABC):
    """Keyed element store with animated attribute transitions."""

    @property
    @abstractmethod
    def plot_width(self) -> float: ...

    @property
    @abstractmethod
    def plot_height(self) -> float: ...

    @abstractmethod
    def keys(self, family: str) -> list[str]:
        """Keys of the elements of ``family``, in creation order."""

    @abstractmethod
    def create(self, family: str, key: str, attrs: dict[str, Any]) -> None: ...

    @abstractmethod
    def animate(
        self, family: str, key: str, attrs: dict[str, Any], duration: float
    ) -> None:
        """Move numeric attributes to ``attrs`` over ``duration`` seconds;
        other attributes are applied at once."""

    @abstractmethod
    def remove(self, family: str, key: str) -> None: ...

    @abstractmethod
    def set_time_label(self, text: str) -> None: ...


class ManualClock:
    """Clock whose time only moves when set; used for offline rendering."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def set(self, now: float) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class MatplotlibSurface(RenderSurface):
    def __init__(
        self,
        ax: plt.Axes,
        config: RaceConfig,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ax = ax
        self.config = config
        self.clock = clock
        self._elements: dict[str, dict[str, tuple[Artist, ElementState]]] = {
            family: {} for family in FAMILIES
        }
        self.time_label = ax.text(
            config.plot_width / 2,
            config.time_label_y - config.margins.top,
            "",
            ha="center",
            va="center",
            fontsize=16,
            fontweight="bold",
            clip_on=False,
        )

    @property
    def plot_width(self) -> float:
        return self.config.plot_width

    @property
    def plot_height(self) -> float:
        return self.config.plot_height

    def keys(self, family: str) -> list[str]:
        return list(self._elements[family])

    def create(self, family: str, key: str, attrs: dict[str, Any]) -> None:
        if family == BAR:
            artist: Artist = Rectangle((0, 0), 0, 0, linewidth=0)
            self.ax.add_patch(artist)
        else:
            artist = Text(0, 0, "", va="center", clip_on=False)
            self.ax.add_artist(artist)
        state = ElementState(attrs=dict(attrs))
        self._elements[family][key] = (artist, state)
        _apply(artist, state.attrs)

    def animate(
        self, family: str, key: str, attrs: dict[str, Any], duration: float
    ) -> None:
        artist, state = self._elements[family][key]
        now = self.clock()
        for name, value in attrs.items():
            if name in NUMERIC_ATTRS:
                state.retarget(name, value, now, duration)
            else:
                state.attrs[name] = value
        _apply(artist, state.step(now))

    def remove(self, family: str, key: str) -> None:
        artist, _ = self._elements[family].pop(key)
        artist.remove()
        logger.debug("removed %s element %s", family, key)

    def set_time_label(self, text: str) -> None:
        self.time_label.set_text(text)

    def attrs(self, family: str, key: str) -> dict[str, Any]:
        """Current attribute values of one element."""
        return dict(self._elements[family][key][1].attrs)

    def artist(self, family: str, key: str) -> Artist:
        return self._elements[family][key][0]

    def redraw(self) -> list[Artist]:
        """Apply every running transition at the clock's current time."""
        now = self.clock()
        artists: list[Artist] = [self.time_label]
        for elements in self._elements.values():
            for artist, state in elements.values():
                _apply(artist, state.step(now))
                artists.append(artist)
        return artists


def _apply(artist: Artist, attrs: dict[str, Any]) -> None:
    if isinstance(artist, Rectangle):
        if "x" in attrs:
            artist.set_x(attrs["x"])
        if "y" in attrs:
            artist.set_y(attrs["y"])
        if "width" in attrs:
            artist.set_width(attrs["width"])
        if "height" in attrs:
            artist.set_height(attrs["height"])
        if "fill" in attrs:
            artist.set_facecolor(attrs["fill"])
        return
    if "x" in attrs or "y" in attrs:
        x, y = artist.get_position()
        artist.set_position((attrs.get("x", x), attrs.get("y", y)))
    if "text" in attrs:
        artist.set_text(attrs["text"])
    if "anchor" in attrs:
        artist.set_horizontalalignment(_ANCHORS.get(attrs["anchor"], attrs["anchor"]))
