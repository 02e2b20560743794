"""
Graphics — растровая поверхность и вывод изображений.
"""

from src.graphics.canvas import MAX_COLOR_VALUE, PPM_MAGIC, Canvas, to_byte

__all__ = [
    "MAX_COLOR_VALUE",
    "PPM_MAGIC",
    "Canvas",
    "to_byte",
]
