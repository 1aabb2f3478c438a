"""Common visualization constants used across modules."""

# Canvas/layout defaults, in pixels
width: int = 960
height: int = 600
margins: tuple[int, int, int, int] = (50, 50, 50, 150)  # top, right, bottom, left
dpi: int = 100

# Playback timing, in seconds
tick_period: float = 1.0
transition_duration: float = 0.75
fps: int = 20

# Rank axis and labels
band_padding: float = 0.1
label_offset: float = 10
value_label_offset: float = 5
time_label_y: float = 30

palette: str = "tab10"
facecolor: str = "#FFFFFF"
