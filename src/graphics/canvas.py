"""
Canvas — растровая поверхность из цветов Tuple

Хранит сетку width × height цветов и сериализует её в текстовый PPM (P3).
Алгебры не содержит: каналы читаются через red/green/blue, clamp в [0, 1]
и масштабирование в 0..255 выполняются только при сериализации.

Формат:
    P3
    {width} {height}
    255
    r g b r g b ...   (одна строка на ряд пикселей)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final, List

from src.core.math.numerical_safeguards import clamp, round_to
from src.core.math.tuples import Tuple, color

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

PPM_MAGIC: Final[str] = "P3"
MAX_COLOR_VALUE: Final[int] = 255


def to_byte(channel: float) -> int:
    """
    Канал цвета → целое 0..255.

    Examples:
        >>> to_byte(1.5)
        255
        >>> to_byte(-0.5)
        0
        >>> to_byte(0.5)
        128
    """
    scaled = MAX_COLOR_VALUE * clamp(channel, 0.0, 1.0)
    return int(round_to(scaled, 0))


# =============================================================================
# CANVAS
# =============================================================================


class Canvas:
    """
    Сетка пикселей, изначально чёрная.

    Координаты: x — столбец (0..width-1), y — строка (0..height-1).
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        black = color(0.0, 0.0, 0.0)
        self._pixels: List[List[Tuple]] = [[black] * width for _ in range(height)]

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def write_pixel(self, x: int, y: int, c: Tuple) -> None:
        self._check_bounds(x, y)
        self._pixels[y][x] = c

    def pixel_at(self, x: int, y: int) -> Tuple:
        self._check_bounds(x, y)
        return self._pixels[y][x]

    def to_ppm(self) -> str:
        """
        Сериализация в PPM (P3). Результат всегда заканчивается переводом строки.
        """
        lines = [PPM_MAGIC, f"{self.width} {self.height}", str(MAX_COLOR_VALUE)]
        for row in self._pixels:
            lines.append(
                " ".join(
                    f"{to_byte(p.red)} {to_byte(p.green)} {to_byte(p.blue)}" for p in row
                )
            )
        return "\n".join(lines) + "\n"

    def write(self, path: str | Path) -> Path:
        """
        Запись PPM в файл.

        Returns:
            Путь к записанному файлу
        """
        path = Path(path)
        logger.info("Writing %dx%d canvas to %s", self.width, self.height, path)
        with open(path, "w", encoding="ascii") as f:
            f.write(self.to_ppm())
        logger.info("Done writing %s", path)
        return path
