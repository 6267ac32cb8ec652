# config.py
import os

# Runtime mode: "hardware" (ST7789 + GPIO LED) or "simulation" (text frame)
MODE = os.getenv("PIMONITOR_MODE", "simulation").strip().lower()

# HTTP
HTTP_HOST = os.getenv("PIMONITOR_HOST", "0.0.0.0")
HTTP_PORT = int(os.getenv("PIMONITOR_PORT", "3030"))

# Sensor source: "simulated" or "dht"
SENSOR_SOURCE = os.getenv("PIMONITOR_SENSOR", "simulated").strip().lower()
DHT_MODEL = os.getenv("PIMONITOR_DHT_MODEL", "DHT22")
DHT_BOARD_PIN = os.getenv("PIMONITOR_DHT_PIN", "D4")

# GPIO (BCM numbering)
LED_PIN = 18

# ST7789 panel on SPI0 / CE0
DISPLAY_SPI_PORT = 0
DISPLAY_SPI_CS = 0
DISPLAY_DC_PIN = 24
DISPLAY_RST_PIN = 25
DISPLAY_SPI_SPEED_HZ = 8_000_000
DISPLAY_WIDTH = 240
DISPLAY_HEIGHT = 240
DISPLAY_FONT_PATH = os.getenv("PIMONITOR_FONT", "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf")
DISPLAY_FONT_SIZE = 16

# Pixel -> character cell mapping used by the simulated panel
GLYPH_WIDTH = 10
GLYPH_HEIGHT = 20
SIM_COLUMNS = 50
SIM_ROWS = 15

# Task periods (seconds)
SENSOR_INTERVAL_SEC = 5.0
LED_INTERVAL_SEC = 1.0
DISPLAY_INTERVAL_SEC = 2.0

# Thresholds
TEMP_HIGH_C = 30.0

# How long a task or request waits for a single field lock
LOCK_TIMEOUT_SEC = 0.5

LOG_LEVEL = os.getenv("PIMONITOR_LOG_LEVEL", "INFO").upper()
