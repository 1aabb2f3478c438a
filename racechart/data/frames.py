"""Frame building: flat records -> ordered, ranked per-time-key snapshots."""

from __future__ import annotations

import logging
from typing import Iterable

import pandas as pd

from racechart.data.records import Entry, Frame, Record

logger = logging.getLogger(__name__)


def _records_frame(records: Iterable[Record]) -> pd.DataFrame:
    return pd.DataFrame(
        [(r.time_key, r.entity, r.value) for r in records],
        columns=["time_key", "entity", "value"],
    )


def entity_universe(records: Iterable[Record]) -> list[str]:
    """Distinct entities in order of first appearance."""
    df = _records_frame(records)
    return list(pd.unique(df["entity"]))


def build_frames(records: Iterable[Record]) -> list[Frame]:
    """Build one ranked frame per distinct time key.

    Time keys are sorted ascending as strings. Each frame holds every entity
    of the universe; entities with no record at a time key get value 0.
    Duplicate ``(time_key, entity)`` records keep the first occurrence.
    Entries are sorted by descending value with a stable sort, so ties keep
    the universe order.

    Args:
        records: The full record set.

    Returns:
        Frames ordered by time key; empty when there are no records.
    """
    df = _records_frame(records)
    if df.empty:
        return []

    entities = list(pd.unique(df["entity"]))
    df = df.drop_duplicates(subset=["time_key", "entity"], keep="first")
    wide = (
        df.pivot(index="time_key", columns="entity", values="value")
        .reindex(columns=entities)
        .sort_index()
    )
    # Only pairs with no record are backfilled; NaN values from the source
    # are left as they are.
    present = df.assign(seen=True).pivot(
        index="time_key", columns="entity", values="seen"
    )
    present = present.reindex(index=wide.index, columns=entities)
    wide = wide.mask(present.isna(), 0.0)

    frames = []
    for time_key, row in wide.iterrows():
        ranked = row.sort_values(ascending=False, kind="stable")
        entries = tuple(Entry(entity, float(value)) for entity, value in ranked.items())
        frames.append(Frame(time_key=str(time_key), entries=entries))

    logger.info(
        "built %d frames for %d entities from %d records",
        len(frames),
        len(entities),
        len(df),
    )
    return frames
