"""Pytest configuration and shared fixtures."""

import json

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from racechart.data.records import Record  # noqa: E402
from racechart.visuals.anims.surface import FAMILIES, RenderSurface  # noqa: E402


class RecordingSurface(RenderSurface):
    """In-memory surface: animated attributes land immediately."""

    def __init__(self, width=760, height=500):
        self._width = width
        self._height = height
        self.elements = {family: {} for family in FAMILIES}
        self.calls = []
        self.durations = []
        self.time_label = None

    @property
    def plot_width(self):
        return self._width

    @property
    def plot_height(self):
        return self._height

    def keys(self, family):
        return list(self.elements[family])

    def create(self, family, key, attrs):
        self.calls.append(("create", family, key))
        self.elements[family][key] = dict(attrs)

    def animate(self, family, key, attrs, duration):
        self.calls.append(("animate", family, key))
        self.durations.append(duration)
        self.elements[family][key].update(attrs)

    def remove(self, family, key):
        self.calls.append(("remove", family, key))
        del self.elements[family][key]

    def set_time_label(self, text):
        self.time_label = text


class FakeTimer:
    """Stands in for a Matplotlib canvas timer."""

    def __init__(self):
        self.callbacks = []
        self.running = False

    def add_callback(self, func, *args, **kwargs):
        self.callbacks.append(func)
        return func

    def remove_callback(self, func, *args, **kwargs):
        self.callbacks.remove(func)

    def start(self, interval=None):
        self.running = True

    def stop(self):
        self.running = False

    def fire(self):
        for func in list(self.callbacks):
            func()


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


@pytest.fixture
def example_records():
    """The three-record example: B is missing at 2020-02."""
    return [
        Record("2020-01", "A", 10.0),
        Record("2020-01", "B", 5.0),
        Record("2020-02", "A", 3.0),
    ]


@pytest.fixture
def raw_payload():
    return [
        {"date": "2020-02", "affiliate": "North", "aum": 7},
        {"date": "2020-01", "affiliate": "North", "aum": 12},
        {"date": "2020-01", "affiliate": "South", "aum": 30},
        {"date": "2020-03", "affiliate": "East", "aum": 4.5},
        {"date": "2020-03", "affiliate": "South", "aum": 1},
    ]


@pytest.fixture
def data_file(tmp_path, raw_payload):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(raw_payload))
    return path


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def redraw_timer():
    return FakeTimer()


@pytest.fixture
def client():
    from backend.app import app

    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c
