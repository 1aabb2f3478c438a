import logging
from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.animation import FFMpegWriter, PillowWriter

logger = logging.getLogger(__name__)

FORMATS = {"gif": ".gif", "mp4": ".mp4"}


def _writer(fmt: str, fps: int):
    if fmt == "gif":
        return PillowWriter(fps=fps)
    if fmt == "mp4":
        if not FFMpegWriter.isAvailable():
            raise RuntimeError("ffmpeg is not available for mp4 encoding")
        return FFMpegWriter(
            fps=fps,
            codec="libx264",
            extra_args=["-pix_fmt", "yuv420p", "-movflags", "+faststart"],
        )
    raise ValueError(f"unsupported format {fmt!r}; expected one of {sorted(FORMATS)}")


def encode_animation(
    anim, out_path: str, fps: int, fmt: str = "gif", facecolor: str = "#FFFFFF"
) -> None:
    """
    Write ``anim`` to ``out_path`` as a GIF (Pillow) or MP4 (ffmpeg).
    The animation's figure is always closed afterwards.
    Raises on failure.
    """
    fig: Optional[plt.Figure] = getattr(anim, "_fig", None)
    try:
        logger.info("encode_animation start fmt=%s fps=%s out=%s", fmt, fps, out_path)
        anim.save(
            out_path,
            writer=_writer(fmt, fps),
            savefig_kwargs={"facecolor": facecolor},
        )
    finally:
        if fig is not None:
            plt.close(fig)
        logger.info("encode_animation end -> %s", out_path)
