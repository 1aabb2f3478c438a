"""Plot styling helpers for visuals."""

import matplotlib.pyplot as plt

from racechart.visuals.core.config import RaceConfig


def setup_race_axes(ax: plt.Axes, plot_width: float, plot_height: float) -> None:
    """Turn ``ax`` into a bare pixel canvas with y growing downwards."""
    for side in ("top", "right", "bottom", "left"):
        ax.spines[side].set_visible(False)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_xlim(0, plot_width)
    ax.set_ylim(plot_height, 0)
    ax.set_autoscale_on(False)
    ax.patch.set_alpha(0)


def create_race_figure(config: RaceConfig) -> tuple[plt.Figure, plt.Axes]:
    """Create a ``width x height`` pixel figure with the axes inside the margins.

    Returns:
        tuple[Figure, Axes]: the figure and the plot-area axes.
    """
    fig = plt.figure(
        figsize=(config.width / config.dpi, config.height / config.dpi),
        dpi=config.dpi,
        facecolor=config.facecolor,
    )
    m = config.margins
    ax = fig.add_axes(
        (
            m.left / config.width,
            m.bottom / config.height,
            config.plot_width / config.width,
            config.plot_height / config.height,
        )
    )
    setup_race_axes(ax, config.plot_width, config.plot_height)
    return fig, ax
