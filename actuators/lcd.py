# actuators/lcd.py

import logging
from typing import Optional

from actuators.display import BLACK, Color, Display

log = logging.getLogger(__name__)


class HardwareDisplay(Display):
    """ST7789 240x240 SPI panel drawn through a Pillow canvas.

    Every call pushes the full frame to the panel, so a failed draw leaves
    whatever was pushed before it on screen.
    """

    def __init__(self, panel, width: int, height: int, font_path: str, font_size: int):
        from PIL import Image, ImageDraw, ImageFont

        self._panel = panel
        self._image = Image.new("RGB", (width, height), color=BLACK)
        self._draw = ImageDraw.Draw(self._image)
        try:
            self._font = ImageFont.truetype(font_path, font_size)
        except OSError:
            log.warning("Font %s not found, using Pillow default", font_path)
            self._font = ImageFont.load_default(size=font_size)

    @classmethod
    def open(
        cls,
        *,
        port: int,
        cs: int,
        dc: int,
        rst: int,
        spi_speed_hz: int,
        width: int,
        height: int,
        font_path: str,
        font_size: int,
    ) -> "HardwareDisplay":
        import st7789

        panel = st7789.ST7789(
            port=port,
            cs=cs,
            dc=dc,
            rst=rst,
            width=width,
            height=height,
            rotation=0,
            spi_speed_hz=spi_speed_hz,
        )
        # Older driver releases need an explicit reset/init sequence.
        begin = getattr(panel, "begin", None)
        if callable(begin):
            begin()

        log.info("ST7789 display initialized (%dx%d, SPI%d.%d)", width, height, port, cs)
        return cls(panel, width, height, font_path, font_size)

    def _flush(self) -> None:
        self._panel.display(self._image)

    def clear(self) -> None:
        self._draw.rectangle((0, 0, self._image.width, self._image.height), fill=BLACK)
        self._flush()

    def draw_text(self, text: str, x: int, y: int, color: Color) -> None:
        # (x, y) is the left end of the text baseline.
        self._draw.text((x, y), text, font=self._font, fill=color, anchor="ls")
        self._flush()

    def get_rendered_text(self) -> Optional[str]:
        return None
