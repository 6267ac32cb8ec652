import pytest

from actuators.display import GREEN, RED, WHITE
from actuators.renderer import RenderError, render_lines, render_status
from tests.conftest import RecordingDisplay
from utils.shared_state import SensorReading


def _reading(t, h=50.0):
    return SensorReading(temperature=t, humidity=h, timestamp=1_700_000_000)


@pytest.mark.parametrize(
    "temp,hum,temp_text,hum_text",
    [
        (20.0, 40.0, "Temp: 20.0C", "Humidity: 40.0%"),
        (21.26, 61.74, "Temp: 21.3C", "Humidity: 61.7%"),
        (34.99, 79.91, "Temp: 35.0C", "Humidity: 79.9%"),
        (25, 55, "Temp: 25.0C", "Humidity: 55.0%"),
    ],
)
def test_one_decimal_formatting(temp, hum, temp_text, hum_text):
    display = RecordingDisplay()
    render_status(display, _reading(temp, hum), True, 12)
    assert temp_text in display.texts()
    assert hum_text in display.texts()


@pytest.mark.parametrize("temp", [30.01, 30.5, 34.9])
def test_high_temperature_line_above_threshold(temp):
    display = RecordingDisplay()
    render_status(display, _reading(temp), False, 0)
    assert ("text", "HIGH TEMP!", 10, 150, RED) in display.calls


@pytest.mark.parametrize("temp", [20.0, 29.99, 30.0])
def test_no_warning_at_or_below_threshold(temp):
    display = RecordingDisplay()
    render_status(display, _reading(temp), False, 0)
    assert "HIGH TEMP!" not in display.texts()


def test_full_sequence_with_reading():
    display = RecordingDisplay()
    render_status(display, _reading(31.0, 45.0), True, 42)
    assert display.calls == [
        ("clear",),
        ("text", "Hello World!", 10, 30, WHITE),
        ("text", "Pi Zero Monitor", 10, 60, WHITE),
        ("text", "Temp: 31.0C", 10, 90, WHITE),
        ("text", "Humidity: 45.0%", 10, 120, WHITE),
        ("text", "HIGH TEMP!", 10, 150, RED),
        ("text", "Uptime: 42s", 10, 180, WHITE),
        ("text", "LED", 10, 210, GREEN),
    ]


def test_no_data_sequence():
    display = RecordingDisplay()
    render_status(display, None, False, 3)
    assert display.texts() == ["Hello World!", "Pi Zero Monitor", "No sensor data", "Uptime: 3s", "LED"]
    assert display.calls[-1] == ("text", "LED", 10, 210, RED)


def test_render_lines_matches_draw_calls():
    display = RecordingDisplay()
    render_status(display, _reading(22.0), True, 5)
    assert [("text",) + line for line in render_lines(_reading(22.0), True, 5)] == display.calls[1:]


def test_failed_draw_aborts_rest_of_frame():
    display = RecordingDisplay(fail_on_call=3)
    with pytest.raises(RenderError):
        render_status(display, _reading(22.0), True, 5)
    assert len(display.calls) == 3
    assert display.texts() == ["Hello World!", "Pi Zero Monitor"]


def test_simulation_frame_layout(sim_display):
    render_status(sim_display, _reading(31.24, 60.0), True, 7)
    rows = sim_display.get_rendered_text().splitlines()
    assert rows[1].startswith("║ Hello World!")
    assert rows[3].startswith("║ Pi Zero Monitor")
    assert rows[4].startswith("║ Temp: 31.2C")
    assert rows[6].startswith("║ Humidity: 60.0%")
    assert rows[7].startswith("║ HIGH TEMP!")
    assert rows[9].startswith("║ Uptime: 7s")
    assert rows[10].startswith("║ LED ")
    assert all(len(row) == 50 for row in rows)


class GlitchyPanel(RecordingDisplay):
    def draw_text(self, text, x, y, color):
        raise ValueError("bad glyph")


def test_any_draw_failure_becomes_render_error():
    display = GlitchyPanel()
    with pytest.raises(RenderError) as excinfo:
        render_status(display, None, True, 0)
    assert isinstance(excinfo.value.__cause__, ValueError)
    assert display.calls == [("clear",)]
