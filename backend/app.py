import logging
import os

import matplotlib

matplotlib.use("Agg")

from flask import Flask  # noqa: E402
from flask_cors import CORS  # noqa: E402

from backend.routes.animations import bp as animations_bp  # noqa: E402
from backend.routes.frames import bp as frames_bp  # noqa: E402
from backend.routes.images import bp as images_bp  # noqa: E402


def _configure_logging() -> None:
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    gunicorn_error = logging.getLogger("gunicorn.error")
    root = logging.getLogger()
    if gunicorn_error.handlers:
        root.handlers = gunicorn_error.handlers
        root.setLevel(level)
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    logging.getLogger("matplotlib").setLevel(logging.WARNING)
    logging.getLogger("PIL").setLevel(logging.WARNING)


_configure_logging()

app = Flask(__name__)
CORS(app)

# register routes
app.register_blueprint(frames_bp)
app.register_blueprint(images_bp)
app.register_blueprint(animations_bp)


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "8080")))
