"""Color utilities for visuals."""

from __future__ import annotations

from typing import Iterable

import matplotlib
from matplotlib.colors import to_hex

QUALITATIVE_PALETTES = frozenset(
    {
        "Pastel1",
        "Pastel2",
        "Paired",
        "Accent",
        "Dark2",
        "Set1",
        "Set2",
        "Set3",
        "tab10",
        "tab20",
        "tab20b",
        "tab20c",
    }
)


def get_palette(name: str) -> list[str]:
    """Return the colors of a qualitative Matplotlib colormap as hex strings.

    Args:
        name: Colormap name, e.g. "tab10" (the category10 scheme).

    Raises:
        ValueError: If ``name`` is not one of the qualitative colormaps.
    """
    if name not in QUALITATIVE_PALETTES:
        raise ValueError(
            f"palette {name!r} is not a qualitative colormap; "
            f"expected one of {sorted(QUALITATIVE_PALETTES)}"
        )
    cmap = matplotlib.colormaps[name]
    return [to_hex(c) for c in cmap.colors]


class ColorScale:
    """Ordinal entity -> color mapping.

    Colors are handed out from the palette in domain order and wrap when the
    palette runs out. Keys outside the initial domain get the next color the
    first time they are seen; an assignment never changes afterwards.
    """

    def __init__(self, domain: Iterable[str] = (), palette: str = "tab10") -> None:
        self._colors = get_palette(palette)
        self._assigned: dict[str, str] = {}
        for key in domain:
            self(key)

    def __call__(self, key: str) -> str:
        color = self._assigned.get(key)
        if color is None:
            color = self._colors[len(self._assigned) % len(self._colors)]
            self._assigned[key] = color
        return color

    @property
    def domain(self) -> list[str]:
        return list(self._assigned)
