"""
Tuple — однородные координаты (x, y, z, w)

Immutable Pydantic модель для точек, векторов и цветов:
- w == 1.0 — точка (положение в пространстве)
- w == 0.0 — вектор (направление без положения)
- цвет: x/y/z — каналы red/green/blue, w не используется (0.0);
  каналы не ограничиваются [0, 1], clamp выполняется при сериализации

Алгебра замкнута на типе, все операции возвращают новый экземпляр.
Равенство приближённое: все четыре компоненты сравниваются через epsilon_equal.

Алгебраические тождества (ответственность вызывающего кода):
    point - point = vector
    point - vector = point
    vector +/- vector = vector
Сложение двух точек не имеет смысла и не проверяется.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Final

from pydantic import BaseModel, Field

from src.core.contracts.validators import validate_tuple
from src.core.contracts.violations import ContractViolation
from src.core.math.numerical_safeguards import epsilon_equal

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

VECTOR_W: Final[float] = 0.0
POINT_W: Final[float] = 1.0


# =============================================================================
# TUPLE MODEL
# =============================================================================


class Tuple(BaseModel):
    """
    Четырёхкомпонентный кортеж однородных координат.

    Immutable модель (frozen=True): арифметика всегда создаёт новый экземпляр.
    Конструктор принимает компоненты позиционно: Tuple(x, y, z, w).
    """

    x: float = Field(..., description="Компонента x / канал red")
    y: float = Field(..., description="Компонента y / канал green")
    z: float = Field(..., description="Компонента z / канал blue")
    w: float = Field(..., description="1.0 — точка, 0.0 — вектор или цвет")

    model_config = {"frozen": True}

    # Равенство приближённое, поэтому хэш не определён
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, x: float, y: float, z: float, w: float) -> None:
        super().__init__(x=x, y=y, z=z, w=w)

    # -------------------------------------------------------------------------
    # Классификация и каналы
    # -------------------------------------------------------------------------

    def is_point(self) -> bool:
        """Точное сравнение w с 1.0 (тег выставляется фабрикой point)."""
        return self.w == POINT_W

    def is_vector(self) -> bool:
        """Точное сравнение w с 0.0 (тег выставляется фабрикой vector)."""
        return self.w == VECTOR_W

    @property
    def red(self) -> float:
        return self.x

    @property
    def green(self) -> float:
        return self.y

    @property
    def blue(self) -> float:
        return self.z

    def components(self) -> tuple[float, float, float, float]:
        """Компоненты в порядке (x, y, z, w)."""
        return (self.x, self.y, self.z, self.w)

    # -------------------------------------------------------------------------
    # Именованные операции
    # -------------------------------------------------------------------------

    def add(self, other: Tuple) -> Tuple:
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def subtract(self, other: Tuple) -> Tuple:
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def negate(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def scale(self, factor: float) -> Tuple:
        return Tuple(self.x * factor, self.y * factor, self.z * factor, self.w * factor)

    def hadamard(self, other: Tuple) -> Tuple:
        """
        Покомпонентное произведение (смешивание цветов).

        Пример: color(1, 0.2, 0.4) * color(0.9, 1, 0.1) ≈ color(0.9, 0.2, 0.04)
        """
        return Tuple(self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w)

    def magnitude(self) -> float:
        """
        Евклидова норма по всем четырём компонентам.

        Для вектора w == 0, поэтому результат совпадает с 3D длиной.
        """
        return math.sqrt(self.x**2 + self.y**2 + self.z**2 + self.w**2)

    def normalize(self) -> Tuple:
        """
        Деление каждой компоненты на magnitude().

        Raises:
            ContractViolation: Если magnitude() == 0 (результат был бы NaN)
        """
        m = self.magnitude()
        if m == 0.0:
            raise ContractViolation(f"cannot normalize zero-length tuple {self!r}")
        return Tuple(self.x / m, self.y / m, self.z / m, self.w / m)

    def dot(self, other: Tuple) -> float:
        """Сумма попарных произведений всех четырёх компонент."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: Tuple) -> Tuple:
        """
        Векторное произведение по x, y, z.

        w результата всегда 0.0 (вектор), теги операндов не проверяются.
        """
        return Tuple(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
            VECTOR_W,
        )

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Tuple:
        return self.negate()

    def __mul__(self, other: Any) -> Tuple:
        if isinstance(other, Tuple):
            return self.hadamard(other)
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Tuple:
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, divisor: Any) -> Tuple:
        """
        Деление каждой компоненты на скаляр.

        Raises:
            ContractViolation: Если divisor == 0 (как и normalize() нулевого вектора)
        """
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        if divisor == 0:
            raise ContractViolation(f"cannot divide {self!r} by zero")
        return Tuple(self.x / divisor, self.y / divisor, self.z / divisor, self.w / divisor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return all(epsilon_equal(a, b) for a, b in zip(self.components(), other.components()))

    def __repr__(self) -> str:
        return f"Tuple({self.x!r}, {self.y!r}, {self.z!r}, {self.w!r})"

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, float]:
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Tuple:
        """
        Построение из dict {"x", "y", "z", "w"}.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют tuple.json
        """
        validate_tuple(data)
        return cls(data["x"], data["y"], data["z"], data["w"])


# =============================================================================
# ФАБРИКИ
# =============================================================================


def tuple4(x: float, y: float, z: float, w: float) -> Tuple:
    return Tuple(x, y, z, w)


def point(x: float, y: float, z: float) -> Tuple:
    """Точка: w = 1.0."""
    return Tuple(x, y, z, POINT_W)


def vector(x: float, y: float, z: float) -> Tuple:
    """Вектор: w = 0.0."""
    return Tuple(x, y, z, VECTOR_W)


def color(red: float, green: float, blue: float) -> Tuple:
    """Цвет: каналы в x/y/z без ограничения диапазона, w = 0.0."""
    return Tuple(red, green, blue, VECTOR_W)
