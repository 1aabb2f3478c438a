import base64
import gc
import logging
import os
import tempfile
import time

import matplotlib.pyplot as plt
from flask import Blueprint, jsonify, request

from backend.core.config import race_config
from backend.services.data import load_race
from backend.services.encoding import FORMATS, encode_animation
from backend.services.system import log_mem
from backend.services.visuals import create_bar_animation_wrapper

logger = logging.getLogger(__name__)

bp = Blueprint("animations", __name__)


@bp.route("/generate_animation", methods=["POST"])
def generate_animation():
    """Generate a bar chart race animation from the record document.

    Expects a JSON body with:
    - format (str, optional): "gif" or "mp4". Defaults to "gif".
    - fps (int, optional): Rendered images per second.
    - tick_period (float, optional): Seconds between frame advances.
    - transition_duration (float, optional): Seconds per bar transition.
    - width, height (int, optional): Canvas size in pixels.
    - dpi (int, optional): Figure DPI.

    Returns:
        flask.Response: JSON containing the base64-encoded animation under key
        "video" and a suggested filename under key "filename". Returns 400 if
        the data could not be loaded or the options are invalid, or 500 with
        an error message on failure.
    """
    try:
        t0 = time.time()
        log_mem("Start /generate_animation")
        data = request.get_json(silent=True) or {}
        fmt = data.get("format", "gif")
        if fmt not in FORMATS:
            return jsonify({"error": f"Unsupported format: {fmt}"}), 400
        try:
            config = race_config(
                fps=data.get("fps"),
                tick_period=data.get("tick_period"),
                transition_duration=data.get("transition_duration"),
                width=data.get("width"),
                height=data.get("height"),
                dpi=data.get("dpi"),
            )
        except (TypeError, ValueError) as e:
            return jsonify({"error": f"Invalid animation options: {e}"}), 400

        race = load_race()
        if race is None:
            return jsonify({"error": "Failed to load race data."}), 400
        t1 = time.time()
        logger.info("Time to load race data: %.2f seconds", t1 - t0)

        anim = create_bar_animation_wrapper(race.frames, config, race.entities)
        with tempfile.NamedTemporaryFile(delete=False, suffix=FORMATS[fmt]) as f:
            temp_path = f.name
        try:
            encode_animation(anim, temp_path, config.fps, fmt, config.facecolor)
            with open(temp_path, "rb") as f:
                video_bytes = f.read()
        finally:
            os.remove(temp_path)
        t2 = time.time()
        logger.info("Render + encode time: %.2f seconds", t2 - t1)
        log_mem("After encode_animation")

        del anim
        plt.close("all")
        gc.collect()
        return jsonify(
            {
                "video": base64.b64encode(video_bytes).decode("utf-8"),
                "filename": f"bar_chart_race{FORMATS[fmt]}",
            }
        ), 200

    except RuntimeError as e:
        logger.exception("animation encoder unavailable")
        return jsonify(
            {"error": f"Animation generation failed due to encoder: {str(e)}"}
        ), 503
    except Exception as e:
        logger.exception("animation generation failed")
        return jsonify({"error": f"Animation generation failed: {str(e)}"}), 500
