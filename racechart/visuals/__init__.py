"""Visuals package public API.
This module re-exports key functions and classes from submodules
to provide a simplified interface.
"""

from .anims.animator import AnimatorState, RaceAnimator
from .anims.create_bar_animation import create_bar_animation, play_race
from .anims.reconcile import Reconciliation, reconcile
from .anims.surface import ManualClock, MatplotlibSurface, RenderSurface
from .core.colors import ColorScale, get_palette
from .core.config import Margins, RaceConfig
from .core.scales import BandScale, LinearScale
from .core.style import create_race_figure, setup_race_axes
from .plots.create_bar_plot import plot_frame

__all__ = [
    "AnimatorState",
    "RaceAnimator",
    "create_bar_animation",
    "play_race",
    "Reconciliation",
    "reconcile",
    "ManualClock",
    "MatplotlibSurface",
    "RenderSurface",
    "ColorScale",
    "get_palette",
    "Margins",
    "RaceConfig",
    "BandScale",
    "LinearScale",
    "create_race_figure",
    "setup_race_axes",
    "plot_frame",
]
