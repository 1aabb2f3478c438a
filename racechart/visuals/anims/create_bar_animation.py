"""Bar race animation entry points: offline (FuncAnimation) and live playback."""

from __future__ import annotations

import logging
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from racechart.data.records import Frame
from racechart.visuals.anims.animator import RaceAnimator
from racechart.visuals.anims.surface import ManualClock, MatplotlibSurface
from racechart.visuals.core.config import RaceConfig
from racechart.visuals.core.style import create_race_figure

logger = logging.getLogger(__name__)


def create_bar_animation(
    frames: Sequence[Frame],
    config: RaceConfig | None = None,
    entities: Sequence[str] | None = None,
) -> FuncAnimation:
    """Build an animation covering one full playback cycle.

    Time is simulated: image ``i`` is drawn at ``i / fps`` seconds, and the
    animator ticks every ``steps_per_tick`` images, so the result does not
    depend on how fast frames are rendered or encoded.

    Args:
        frames: Ranked frames from ``build_frames``.
        config: Layout and timing.
        entities: Entity universe for color assignment, normally
            ``entity_universe(records)``; see ``RaceAnimator``.

    Returns:
        matplotlib.animation.FuncAnimation: The configured animation; its
        figure is available as ``anim._fig``.
    """
    config = config or RaceConfig()
    fig, ax = create_race_figure(config)
    clock = ManualClock()
    surface = MatplotlibSurface(ax, config, clock=clock)
    animator = RaceAnimator(frames, surface, config, entities=entities)

    steps = config.steps_per_tick
    total = max(1, len(frames)) * steps

    def update(i: int):
        clock.set(i / config.fps)
        if i % steps == 0:
            animator.tick()
        return surface.redraw()

    # Only update() ticks; init just draws the current state.
    def init():
        return surface.redraw()

    logger.info(
        "animation: %d frames x %d steps at %d fps", len(frames), steps, config.fps
    )
    return FuncAnimation(
        fig,
        update,
        frames=total,
        init_func=init,
        interval=1000 / config.fps,
        blit=False,
        repeat=False,
    )


def play_race(
    frames: Sequence[Frame],
    config: RaceConfig | None = None,
    entities: Sequence[str] | None = None,
    fig: plt.Figure | None = None,
    ax: plt.Axes | None = None,
) -> RaceAnimator:
    """Start live playback on an interactive figure.

    Two canvas timers are used: one ticks the animator every ``tick_period``,
    the other redraws running transitions at ``fps``. Both stop when the
    figure is closed or the returned animator is stopped.
    Pass ``entities=entity_universe(records)`` to color entities in order of
    first appearance.
    """
    config = config or RaceConfig()
    if fig is None or ax is None:
        fig, ax = create_race_figure(config)
    surface = MatplotlibSurface(ax, config)
    animator = RaceAnimator(frames, surface, config, entities=entities)

    canvas = fig.canvas
    redraw_timer = canvas.new_timer(interval=int(1000 / config.fps))

    def _redraw() -> None:
        surface.redraw()
        canvas.draw_idle()

    redraw_timer.add_callback(_redraw)
    tick_timer = canvas.new_timer(interval=int(config.tick_period * 1000))
    canvas.mpl_connect("close_event", lambda event: animator.stop())

    animator.start(tick_timer, redraw_timer)
    return animator
