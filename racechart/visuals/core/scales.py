"""Value and rank scales for the race chart."""

from __future__ import annotations

from typing import Iterable


class LinearScale:
    """Continuous linear mapping of ``domain`` onto ``range``.

    A degenerate domain (both ends equal) maps every value to the range start,
    so a frame whose values are all zero draws zero-width bars.
    """

    def __init__(
        self,
        domain: tuple[float, float] = (0.0, 1.0),
        range: tuple[float, float] = (0.0, 1.0),
    ) -> None:
        self.domain = domain
        self.range = range

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return r0
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)


class BandScale:
    """Ordinal scale giving each key an equal band across ``range``.

    ``padding`` is used for both the inner (between bands) and the outer
    (before the first and after the last band) padding, as a fraction of the
    step. Bands are centered within the range.
    """

    def __init__(
        self,
        domain: Iterable[str] = (),
        range: tuple[float, float] = (0.0, 1.0),
        padding: float = 0.1,
        align: float = 0.5,
    ) -> None:
        self.range = range
        self.padding = padding
        self.align = align
        self.domain = domain

    @property
    def domain(self) -> list[str]:
        return list(self._index)

    @domain.setter
    def domain(self, keys: Iterable[str]) -> None:
        self._index: dict[str, int] = {}
        for key in keys:
            self._index.setdefault(key, len(self._index))
        self._rescale()

    def _rescale(self) -> None:
        n = len(self._index)
        r0, r1 = self.range
        reverse = r1 < r0
        start, stop = (r1, r0) if reverse else (r0, r1)
        step = (stop - start) / max(1, n - self.padding + self.padding * 2)
        start += (stop - start - step * (n - self.padding)) * self.align
        self.step = step
        self.bandwidth = step * (1 - self.padding)
        positions = [start + step * i for i in range(n)]
        if reverse:
            positions.reverse()
        self._positions = positions

    def __call__(self, key: str) -> float | None:
        i = self._index.get(key)
        if i is None:
            return None
        return self._positions[i]
