from flask import Blueprint, jsonify

from backend.services.data import load_race

bp = Blueprint("frames", __name__)


@bp.route("/frames", methods=["GET"])
def get_frames():
    """Return the ranked frames built from the configured record document.

    Returns:
        flask.Response: JSON with ``entities`` and ``frames``; 400 with
        ``error`` if the data could not be loaded.
    """
    race = load_race()
    if race is None:
        return jsonify({"error": "Failed to load race data."}), 400
    return jsonify(
        {
            "entities": race.entities,
            "frames": [frame.to_dict() for frame in race.frames],
        }
    ), 200
