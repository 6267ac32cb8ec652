# actuators/led.py
import RPi.GPIO as GPIO


class Led:
    """Status LED on a GPIO output pin (BCM numbering)."""

    def __init__(self, pin: int):
        self._pin = pin

    def setup(self) -> None:
        GPIO.setup(self._pin, GPIO.OUT, initial=GPIO.LOW)

    def set(self, on: bool) -> None:
        GPIO.output(self._pin, GPIO.HIGH if on else GPIO.LOW)

    def is_on(self) -> bool:
        # Output pins read back the level last driven.
        return GPIO.input(self._pin) == GPIO.HIGH
