from racechart.visuals import RaceConfig, create_bar_animation, plot_frame


def plot_frame_wrapper(frames, index, config: RaceConfig, entities):
    """Thin wrapper around ``plot_frame`` for a settled single-frame snapshot.

    Args:
        frames (list[Frame]): Ranked frames.
        index (int): Frame to draw; negative values count from the end.
        config (RaceConfig): Layout and timing.
        entities (list[str]): Entity universe for stable colors.

    Returns:
        matplotlib.figure.Figure: The generated figure.
    """
    return plot_frame(frames, index, config=config, entities=entities)


def create_bar_animation_wrapper(frames, config: RaceConfig, entities):
    """Thin wrapper for ``create_bar_animation`` passing through parameters.

    Args:
        frames (list[Frame]): Ranked frames.
        config (RaceConfig): Layout, timing and fps.
        entities (list[str]): Entity universe for stable colors.

    Returns:
        matplotlib.animation.FuncAnimation: The configured animation.
    """
    return create_bar_animation(frames, config=config, entities=entities)
