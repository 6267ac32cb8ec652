import pytest

from actuators.display import SimulationDisplay
from utils.shared_state import AppState
from web.server import create_app


class RecordingDisplay:
    """Display stand-in that records every call."""

    def __init__(self, fail_on_call=None):
        self.calls = []
        self._fail_on_call = fail_on_call

    def _record(self, call):
        self.calls.append(call)
        if self._fail_on_call is not None and len(self.calls) == self._fail_on_call:
            raise OSError("SPI write failed")

    def clear(self):
        self._record(("clear",))

    def draw_text(self, text, x, y, color):
        self._record(("text", text, x, y, color))

    def get_rendered_text(self):
        return None

    def texts(self):
        return [c[1] for c in self.calls if c[0] == "text"]


@pytest.fixture
def sim_display():
    return SimulationDisplay(columns=50, rows=15, glyph_width=10, glyph_height=20)


@pytest.fixture
def sim_state(sim_display):
    return AppState(display=sim_display, mode="simulation", lock_timeout=0.05)


@pytest.fixture
def hw_state():
    # Hardware mode whose panel failed to probe.
    return AppState(display=None, mode="hardware", lock_timeout=0.05)


@pytest.fixture
def client(sim_state):
    app = create_app(sim_state)
    app.config["TESTING"] = True
    return app.test_client()
