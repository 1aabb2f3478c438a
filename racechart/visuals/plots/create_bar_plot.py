"""Static snapshot of a single race frame."""

from __future__ import annotations

from typing import Sequence

import matplotlib.pyplot as plt

from racechart.data.records import Frame
from racechart.visuals.anims.animator import RaceAnimator
from racechart.visuals.anims.surface import ManualClock, MatplotlibSurface
from racechart.visuals.core.config import RaceConfig
from racechart.visuals.core.style import create_race_figure


def plot_frame(
    frames: Sequence[Frame],
    index: int = -1,
    config: RaceConfig | None = None,
    entities: Sequence[str] | None = None,
) -> plt.Figure:
    """Render frame ``index`` as it looks once its transition has settled.

    Playback is replayed up to ``index`` so entering and persisting elements
    go through the same path as in the animation.
    ``entities`` is the color universe, as for ``RaceAnimator``.

    Raises:
        IndexError: If ``index`` is out of range or there are no frames.
    """
    config = config or RaceConfig()
    if not frames:
        raise IndexError("no frames to plot")
    index = range(len(frames))[index]

    fig, ax = create_race_figure(config)
    clock = ManualClock()
    surface = MatplotlibSurface(ax, config, clock=clock)
    animator = RaceAnimator(frames, surface, config, entities=entities)
    for i in range(index + 1):
        clock.set(i * config.tick_period)
        animator.tick()
    clock.set(index * config.tick_period + config.transition_duration)
    surface.redraw()
    return fig
