"""Input normalization for raw source records.

Provides the mapping from source JSON field names to the record attributes
used by the frame builder.
"""

from __future__ import annotations

import pandas as pd

from racechart.data.records import Record

FIELD_MAP = {
    "time_key": "date",
    "entity": "affiliate",
    "value": "aum",
}


def resolve_fields(
    time_field: str | None = None,
    entity_field: str | None = None,
    value_field: str | None = None,
) -> dict[str, str]:
    """Return a field map with any given source names overriding the defaults."""
    fields = dict(FIELD_MAP)
    if time_field:
        fields["time_key"] = time_field
    if entity_field:
        fields["entity"] = entity_field
    if value_field:
        fields["value"] = value_field
    return fields


def normalize_record(raw: dict, fields: dict[str, str] | None = None) -> Record:
    """Normalize one source object to a ``Record``.

    Args:
        raw: Source object, for example
            ``{"date": "2020-01", "affiliate": "A", "aum": 10}``.
        fields: Mapping of record attribute -> source field name.

    Returns:
        The record. Time keys are kept as strings so they order
        lexicographically; values that are not numeric become NaN. Nothing
        else is validated.
    """
    fields = fields or FIELD_MAP
    value = pd.to_numeric(raw.get(fields["value"]), errors="coerce")
    time_key = raw.get(fields["time_key"])
    return Record(
        time_key=None if time_key is None else str(time_key),
        entity=raw.get(fields["entity"]),
        value=float(value),
    )


def normalize_records(
    payload: list[dict], fields: dict[str, str] | None = None
) -> list[Record]:
    return [normalize_record(raw, fields) for raw in payload]
