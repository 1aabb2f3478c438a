import base64
import logging
from io import BytesIO

import matplotlib.pyplot as plt
from flask import Blueprint, jsonify, request

from backend.core.config import race_config
from backend.services.data import load_race
from backend.services.system import log_mem
from backend.services.visuals import plot_frame_wrapper

logger = logging.getLogger(__name__)

bp = Blueprint("images", __name__)


@bp.route("/generate_image", methods=["POST"])
def generate_image():
    """Generate a static image of one race frame.

    Args:
        None. Reads JSON body with optional key ``time_key``; without it the
        last frame is drawn.

    Returns:
        flask.Response: JSON with Base64-encoded ``image`` and ``filename``.
        400 if the data could not be loaded or has no frames, 404 for an
        unknown ``time_key``, 500 with ``error`` message if processing fails.
    """
    try:
        log_mem("Start /generate_image")
        data = request.get_json(silent=True) or {}
        race = load_race()
        if race is None:
            return jsonify({"error": "Failed to load race data."}), 400
        if not race.frames:
            return jsonify({"error": "No frames to draw."}), 400

        time_key = data.get("time_key")
        index = -1
        if time_key is not None:
            keys = [frame.time_key for frame in race.frames]
            if time_key not in keys:
                return jsonify({"error": f"Unknown time_key: {time_key}"}), 404
            index = keys.index(time_key)

        config = race_config()
        fig = plot_frame_wrapper(race.frames, index, config, race.entities)
        log_mem("After plot_frame")

        buf = BytesIO()
        fig.savefig(buf, format="jpeg", dpi=config.dpi, facecolor=config.facecolor)
        plt.close(fig)
        image_base64 = base64.b64encode(buf.getvalue()).decode("utf-8")
        filename = f"bar_chart_race_{race.frames[index].time_key}.jpg"
        return jsonify({"image": image_base64, "filename": filename}), 200

    except Exception as e:
        logger.exception("image generation failed")
        return jsonify({"error": f"Image generation failed: {str(e)}"}), 500
