# actuators/renderer.py

from typing import List, Optional, Tuple

import config
from actuators.display import GREEN, RED, WHITE, Color, Display
from utils.shared_state import SensorReading

TextLine = Tuple[str, int, int, Color]


class RenderError(RuntimeError):
    """A draw call failed part way through a status frame."""


def render_lines(reading: Optional[SensorReading], led_on: bool, uptime_seconds: int) -> List[TextLine]:
    """Text lines of the status screen, in draw order."""
    lines: List[TextLine] = [
        ("Hello World!", 10, 30, WHITE),
        ("Pi Zero Monitor", 10, 60, WHITE),
    ]

    if reading is not None:
        lines.append((f"Temp: {reading.temperature:.1f}C", 10, 90, WHITE))
        lines.append((f"Humidity: {reading.humidity:.1f}%", 10, 120, WHITE))
        if reading.temperature > config.TEMP_HIGH_C:
            lines.append(("HIGH TEMP!", 10, 150, RED))
    else:
        lines.append(("No sensor data", 10, 90, WHITE))

    lines.append((f"Uptime: {uptime_seconds}s", 10, 180, WHITE))
    lines.append(("LED", 10, 210, GREEN if led_on else RED))
    return lines


def render_status(display: Display, reading: Optional[SensorReading], led_on: bool, uptime_seconds: int) -> None:
    """Clear the display and draw the status screen.

    Stops at the first failing call; the frame may be left half drawn.
    """
    try:
        display.clear()
        for text, x, y, color in render_lines(reading, led_on, uptime_seconds):
            display.draw_text(text, x, y, color)
    except Exception as e:
        raise RenderError(f"display update failed: {e}") from e
