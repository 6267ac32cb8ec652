# sensors/dht_sensor.py

from typing import Callable, Optional, Tuple

from sensors.simulated import read_simulated

Reading = Tuple[Optional[float], Optional[float]]


def make_dht_reader(model: str, board_pin: str) -> Callable[[], Reading]:
    import board
    import adafruit_dht

    pin = getattr(board, board_pin)
    dht = adafruit_dht.DHT11(pin) if model.upper() == "DHT11" else adafruit_dht.DHT22(pin)

    def read_once() -> Reading:
        try:
            t = dht.temperature
            h = dht.humidity
            if t is None or h is None:
                return None, None
            return float(t), float(h)
        except RuntimeError:
            # DHT checksum / timing errors are routine; try again next tick
            return None, None

    return read_once


def make_reader(source: str, model: str = "DHT22", board_pin: str = "D4") -> Callable[[], Reading]:
    if source == "simulated":
        return read_simulated
    if source == "dht":
        return make_dht_reader(model, board_pin)
    raise ValueError(f"unknown sensor source {source!r}")
