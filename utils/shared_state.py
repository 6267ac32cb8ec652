# utils/shared_state.py

import logging
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, TypeVar

import config
from actuators.display import Display, SimulationDisplay
from actuators.lcd import HardwareDisplay

log = logging.getLogger(__name__)

T = TypeVar("T")


class StartupError(RuntimeError):
    """A required hardware resource could not be acquired."""


class LockUnavailable(RuntimeError):
    """A field lock was not acquired in time; the caller skips this cycle."""


@dataclass(frozen=True)
class SensorReading:
    temperature: float
    humidity: float
    timestamp: int  # seconds since epoch

    def to_dict(self) -> dict:
        return {
            "temperature": self.temperature,
            "humidity": self.humidity,
            "timestamp": self.timestamp,
        }


class AppState:
    """Latest sensor reading, LED state and display, each behind its own lock.

    No method holds more than one field lock, so a slow display refresh
    never blocks LED or sensor access.
    """

    def __init__(
        self,
        display: Optional[Display] = None,
        led=None,
        *,
        mode: str = "simulation",
        lock_timeout: float = config.LOCK_TIMEOUT_SEC,
    ):
        self._lock_timeout = lock_timeout
        self._mode = mode
        self.start_time = time.monotonic()

        self._sensor_lock = threading.Lock()
        self._sensor: Optional[SensorReading] = None

        self._led_lock = threading.Lock()
        self._led_on = False
        self._led = led  # GPIO Led in hardware mode

        self._display_lock = threading.Lock()
        self._display = display

    @property
    def mode(self) -> str:
        return self._mode

    @contextmanager
    def _hold(self, lock: threading.Lock, name: str) -> Iterator[None]:
        if not lock.acquire(timeout=self._lock_timeout):
            raise LockUnavailable(f"{name} lock busy")
        try:
            yield
        finally:
            lock.release()

    # ------------------ SENSOR ------------------
    def read_sensor(self) -> Optional[SensorReading]:
        with self._hold(self._sensor_lock, "sensor"):
            return self._sensor

    def write_sensor(self, reading: SensorReading) -> None:
        with self._hold(self._sensor_lock, "sensor"):
            self._sensor = reading

    # ------------------ LED ------------------
    def read_led(self) -> bool:
        with self._hold(self._led_lock, "led"):
            if self._led is not None:
                return self._led.is_on()
            return self._led_on

    def write_led(self, on: bool) -> None:
        with self._hold(self._led_lock, "led"):
            if self._led is not None:
                self._led.set(on)
            self._led_on = on

    # ------------------ DISPLAY ------------------
    def with_display(self, fn: Callable[[Display], T]) -> Optional[T]:
        with self._hold(self._display_lock, "display"):
            if self._display is None:
                return None
            return fn(self._display)

    def display_text(self) -> Optional[str]:
        return self.with_display(lambda d: d.get_rendered_text())

    # ------------------ UPTIME ------------------
    def uptime(self) -> float:
        return time.monotonic() - self.start_time

    def uptime_seconds(self) -> int:
        return int(self.uptime())


def _open_hardware_display() -> Optional[Display]:
    try:
        return HardwareDisplay.open(
            port=config.DISPLAY_SPI_PORT,
            cs=config.DISPLAY_SPI_CS,
            dc=config.DISPLAY_DC_PIN,
            rst=config.DISPLAY_RST_PIN,
            spi_speed_hz=config.DISPLAY_SPI_SPEED_HZ,
            width=config.DISPLAY_WIDTH,
            height=config.DISPLAY_HEIGHT,
            font_path=config.DISPLAY_FONT_PATH,
            font_size=config.DISPLAY_FONT_SIZE,
        )
    except Exception as e:
        log.warning("Failed to initialize hardware display: %s", e)
        return None


def build_state(mode: str = config.MODE) -> AppState:
    """Probe the devices for ``mode`` and return the store every task shares."""
    if mode == "simulation":
        log.info("Running in simulation mode")
        display = SimulationDisplay(
            columns=config.SIM_COLUMNS,
            rows=config.SIM_ROWS,
            glyph_width=config.GLYPH_WIDTH,
            glyph_height=config.GLYPH_HEIGHT,
        )
        return AppState(display=display, mode=mode)

    if mode != "hardware":
        raise StartupError(f"unknown mode {mode!r}")

    try:
        import RPi.GPIO as GPIO
        from actuators.led import Led

        GPIO.setwarnings(False)
        GPIO.setmode(GPIO.BCM)
        led = Led(config.LED_PIN)
        led.setup()
    except (ImportError, RuntimeError) as e:
        raise StartupError(f"cannot acquire LED pin {config.LED_PIN}: {e}") from e

    display = _open_hardware_display()
    return AppState(display=display, led=led, mode=mode)
