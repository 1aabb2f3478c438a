"""Explicit configuration for the race animator and its surface."""

from __future__ import annotations

from dataclasses import dataclass, field

from racechart.visuals.core import constants


@dataclass(frozen=True)
class Margins:
    top: float = constants.margins[0]
    right: float = constants.margins[1]
    bottom: float = constants.margins[2]
    left: float = constants.margins[3]


@dataclass(frozen=True)
class RaceConfig:
    """Layout and timing for one race.

    Args:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        margins: Space around the plot area; the left margin holds the labels.
        tick_period: Seconds between frame advances.
        transition_duration: Seconds a bar takes to reach its new geometry.
        fps: Rendered images per second.
        dpi: Figure resolution used to convert pixels to inches.
        band_padding: Fraction of each rank band left as padding.
        palette: Name of a qualitative Matplotlib colormap.
    """

    width: int = constants.width
    height: int = constants.height
    margins: Margins = field(default_factory=Margins)
    tick_period: float = constants.tick_period
    transition_duration: float = constants.transition_duration
    fps: int = constants.fps
    dpi: int = constants.dpi
    band_padding: float = constants.band_padding
    palette: str = constants.palette
    label_offset: float = constants.label_offset
    value_label_offset: float = constants.value_label_offset
    time_label_y: float = constants.time_label_y
    facecolor: str = constants.facecolor

    def __post_init__(self) -> None:
        if self.tick_period <= 0:
            raise ValueError(f"tick_period must be positive, got {self.tick_period}")
        if self.transition_duration < 0:
            raise ValueError(
                f"transition_duration must not be negative, got {self.transition_duration}"
            )
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive, got {self.dpi}")
        if not 0 <= self.band_padding < 1:
            raise ValueError(f"band_padding must be in [0, 1), got {self.band_padding}")
        if self.plot_width <= 0 or self.plot_height <= 0:
            raise ValueError(
                f"margins leave no plot area ({self.plot_width}x{self.plot_height})"
            )

    @property
    def plot_width(self) -> float:
        return self.width - self.margins.left - self.margins.right

    @property
    def plot_height(self) -> float:
        return self.height - self.margins.top - self.margins.bottom

    @property
    def steps_per_tick(self) -> int:
        """Rendered images between two frame advances."""
        return max(1, round(self.tick_period * self.fps))
