import logging
from dataclasses import dataclass

from backend.core import config
from racechart.data.frames import build_frames, entity_universe
from racechart.data.load import load_records
from racechart.data.records import Frame

logger = logging.getLogger(__name__)

DATA_SOURCE = config.DATA_SOURCE


@dataclass
class RaceData:
    frames: list[Frame]
    entities: list[str]


def load_race() -> RaceData | None:
    """Load records from the configured ``DATA_SOURCE`` and build frames.

    Request input never selects the document; only server configuration does.

    Returns:
        The frames and entity universe, or None when the data could not be
        loaded; the caller must not render anything in that case.
    """
    records = load_records(DATA_SOURCE, config.FIELDS)
    if records is None:
        return None
    frames = build_frames(records)
    entities = entity_universe(records)
    logger.info("race data from %s: %d frames", DATA_SOURCE, len(frames))
    return RaceData(frames=frames, entities=entities)
