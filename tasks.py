# tasks.py
import logging
import time
from typing import Callable, List, Optional, Tuple

import config
from actuators.renderer import RenderError, render_status
from utils.periodic import PeriodicTask
from utils.shared_state import AppState, SensorReading

log = logging.getLogger(__name__)

SensorRead = Callable[[], Tuple[Optional[float], Optional[float]]]


# ---------------- Sensor sampler ----------------
def sample_sensor(state: AppState, read_once: SensorRead, threshold: float = config.TEMP_HIGH_C) -> Optional[SensorReading]:
    temp, hum = read_once()
    if temp is None or hum is None:
        log.debug("Sensor read returned no data")
        return None

    reading = SensorReading(temperature=float(temp), humidity=float(hum), timestamp=int(time.time()))
    state.write_sensor(reading)

    log.info("Sensor reading: %.1f°C, %.1f%% humidity", reading.temperature, reading.humidity)
    if reading.temperature > threshold:
        log.warning("High temperature detected: %.1f°C", reading.temperature)
    return reading


# ---------------- LED blink ----------------
class LedBlinker:
    """Autonomous blink: writes its own boolean, then flips it."""

    def __init__(self, state: AppState):
        self._state = state
        self._on = False

    def __call__(self) -> bool:
        written = self._on
        self._state.write_led(written)
        self._on = not self._on
        return written


# ---------------- Display refresh ----------------
def refresh_display(state: AppState) -> None:
    # One field at a time; never nest field locks.
    reading = state.read_sensor()
    led_on = state.read_led()
    uptime = state.uptime_seconds()

    def draw(display) -> Optional[str]:
        render_status(display, reading, led_on, uptime)
        return display.get_rendered_text()

    try:
        content = state.with_display(draw)
    except RenderError as e:
        log.error("Failed to update display: %s", e)
        return

    if content is not None:
        temp = reading.temperature if reading is not None else 0.0
        log.info("LCD Display Content:\n%s", content)
        log.info("Status: LED=%s, Temp=%.1f°C", "ON" if led_on else "OFF", temp)


# ---------------- Wiring ----------------
def start_tasks(
    state: AppState,
    read_once: SensorRead,
    *,
    sensor_interval: float = config.SENSOR_INTERVAL_SEC,
    led_interval: float = config.LED_INTERVAL_SEC,
    display_interval: float = config.DISPLAY_INTERVAL_SEC,
) -> List[PeriodicTask]:
    tasks = [
        PeriodicTask("SENSOR", sensor_interval, lambda: sample_sensor(state, read_once)),
        PeriodicTask("LED", led_interval, LedBlinker(state)),
        PeriodicTask("DISPLAY", display_interval, lambda: refresh_display(state)),
    ]
    for t in tasks:
        t.start()
    return tasks
