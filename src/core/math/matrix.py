"""
Matrix — квадратная матрица float для однородных преобразований

Модуль реализует:
- построение из строк (с проверкой прямоугольности), нулевую и единичную матрицы
- транспонирование, подматрицу, минор, алгебраическое дополнение
- определитель разложением Лапласа по первой строке
- обратную матрицу через присоединённую (adjugate)
- произведения Matrix × Matrix и Matrix × Tuple

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все строки имеют ровно width элементов
2. invertible() — точная проверка determinant() != 0.0, без epsilon
3. inverse(): матрица дополнений → транспонирование → деление на определитель
4. Операции не изменяют операнды, результат — новая матрица

Определитель считается рекурсивно (экспоненциально от размера): в ядре
используются матрицы не больше 4×4, интерфейс при этом общий N×N.

ФОРМУЛЫ:
    det([[a, b], [c, d]]) = a·d − b·c
    det(M) = Σ_i M[0][i] · cofactor(0, i)
    cofactor(r, c) = (−1)^(r+c) · minor(r, c)
    inverse(M)[j][i] = cofactor(i, j) / det(M)
"""

from __future__ import annotations

import logging
import numbers
from typing import Any, Dict, Iterable, List, Sequence

from src.core.contracts.validators import validate_matrix
from src.core.contracts.violations import ContractViolation
from src.core.math.numerical_safeguards import EPSILON, epsilon_equal, round_to
from src.core.math.tuples import Tuple

logger = logging.getLogger(__name__)


def _as_element(value: Any) -> float:
    # str и bytes float() бы принял, поэтому проверяем тип явно
    if not isinstance(value, numbers.Real):
        raise ContractViolation(
            f"matrix elements must be real numbers, got {type(value).__name__} {value!r}"
        )
    return float(value)


# =============================================================================
# MATRIX
# =============================================================================


class Matrix:
    """
    Матрица height × width с построчным хранением.

    Для вызывающего кода матрица — значение: операции возвращают новые матрицы.
    set() предназначен для поэлементного построения результата до того,
    как матрица будет отдана наружу.
    """

    __slots__ = ("_width", "_height", "_rows")

    def __init__(self, rows: Iterable[Sequence[float]], width: int | None = None):
        """
        Построение из упорядоченного набора строк одинаковой длины.

        Args:
            rows: Строки матрицы
            width: Число столбцов. Без него ширина берётся из первой строки,
                поэтому для матрицы без строк (N×0) его нужно передать явно

        Raises:
            ContractViolation: Если строки разной длины, не совпадают с width
                или содержат нечисловые элементы
            ValueError: Если width < 0
        """
        materialized = [[_as_element(v) for v in row] for row in rows]
        height = len(materialized)
        if width is None:
            width = len(materialized[0]) if height > 0 else 0
        elif width < 0:
            raise ValueError(f"width must be non-negative, got {width}")

        if any(len(row) != width for row in materialized):
            raise ContractViolation(
                f"ragged rows: expected {width} elements per row, "
                f"got lengths {[len(row) for row in materialized]}"
            )

        self._width = width
        self._height = height
        self._rows = materialized

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def with_dimensions(cls, width: int, height: int) -> Matrix:
        """Матрица height × width, заполненная нулями."""
        if width < 0 or height < 0:
            raise ValueError(f"dimensions must be non-negative, got {width}x{height}")
        return cls([[0.0] * width for _ in range(height)], width=width)

    @classmethod
    def identity(cls, size: int = 4) -> Matrix:
        """Единичная матрица (по умолчанию 4×4)."""
        m = cls.with_dimensions(size, size)
        for i in range(size):
            m._rows[i][i] = 1.0
        return m

    # -------------------------------------------------------------------------
    # Доступ к элементам
    # -------------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def is_square(self) -> bool:
        return self._width == self._height

    def _check_index(self, row: int, col: int) -> None:
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise IndexError(
                f"index ({row}, {col}) out of range for {self._height}x{self._width} matrix"
            )

    def get(self, row: int, col: int) -> float:
        self._check_index(row, col)
        return self._rows[row][col]

    def set(self, row: int, col: int, value: float) -> None:
        self._check_index(row, col)
        self._rows[row][col] = float(value)

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = key
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = key
        self.set(row, col, value)

    def row(self, index: int) -> tuple[float, ...]:
        if not 0 <= index < self._height:
            raise IndexError(f"row {index} out of range for height {self._height}")
        return tuple(self._rows[index])

    def column(self, index: int) -> tuple[float, ...]:
        """Столбец index, собранный из строк (отдельного хранения по столбцам нет)."""
        if not 0 <= index < self._width:
            raise IndexError(f"column {index} out of range for width {self._width}")
        return tuple(row[index] for row in self._rows)

    def rows(self) -> List[tuple[float, ...]]:
        return [tuple(row) for row in self._rows]

    # -------------------------------------------------------------------------
    # Производные матрицы
    # -------------------------------------------------------------------------

    def transpose(self) -> Matrix:
        return Matrix((self.column(i) for i in range(self._width)), width=self._height)

    def submatrix(self, row: int, col: int) -> Matrix:
        """
        Матрица без строки row и столбца col.

        Размер результата: (width − 1) × (height − 1), в том числе когда
        строк не остаётся (из 3×1 получается 2×0).
        """
        self._check_index(row, col)
        return Matrix(
            (
                [v for j, v in enumerate(r) if j != col]
                for i, r in enumerate(self._rows)
                if i != row
            ),
            width=self._width - 1,
        )

    # -------------------------------------------------------------------------
    # Определитель и дополнения
    # -------------------------------------------------------------------------

    def determinant(self) -> float:
        """
        Определитель квадратной матрицы.

        Базовые случаи: 0×0 — 1.0 (пустое произведение), 1×1 — сам элемент,
        2×2 — a·d − b·c. Иначе разложение Лапласа по первой строке.

        Определитель 0×0 нужен для дополнений 1×1: cofactor(0, 0) == 1.0,
        поэтому inverse([[a]]) == [[1 / a]].

        Raises:
            ContractViolation: Если матрица не квадратная
        """
        if not self.is_square():
            raise ContractViolation(
                f"determinant requires a square matrix, got {self._height}x{self._width}"
            )
        if self._width == 0:
            return 1.0

        if self._width == 1:
            return self._rows[0][0]

        if self._width == 2:
            (a, b), (c, d) = self._rows
            return a * d - b * c

        return sum(self._rows[0][i] * self.cofactor(0, i) for i in range(self._width))

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        """Минор со знаком шахматного порядка: минус при нечётной row + col."""
        minor = self.minor(row, col)
        if (row + col) % 2 == 1:
            return -minor
        return minor

    # -------------------------------------------------------------------------
    # Обратная матрица
    # -------------------------------------------------------------------------

    def invertible(self) -> bool:
        """
        Точная проверка determinant() != 0.0.

        Матрица с определителем 1e-300 считается обратимой.
        """
        return self.determinant() != 0.0

    def inverse(self) -> Matrix:
        """
        Обратная матрица через присоединённую.

        Алгоритм:
            1. C[i][j] = cofactor(i, j) — матрица алгебраических дополнений
            2. adj = transpose(C)
            3. inverse = adj / det

        Raises:
            ContractViolation: Если матрица не квадратная или вырожденная
        """
        det = self.determinant()
        if det == 0.0:
            raise ContractViolation(f"matrix is not invertible (determinant == 0):\n{self}")

        if abs(det) < EPSILON:
            logger.warning(
                "Inverting near-singular %dx%d matrix: determinant=%.3e",
                self._height,
                self._width,
                det,
            )
        else:
            logger.debug("Inverting %dx%d matrix: determinant=%r", self._height, self._width, det)

        cofactors = Matrix.with_dimensions(self._width, self._height)
        for i in range(self._height):
            for j in range(self._width):
                cofactors.set(i, j, self.cofactor(i, j))

        adjugate = cofactors.transpose()
        for i in range(adjugate.height):
            for j in range(adjugate.width):
                adjugate.set(i, j, adjugate.get(i, j) / det)

        return adjugate

    # -------------------------------------------------------------------------
    # Произведения
    # -------------------------------------------------------------------------

    def multiply(self, other: Matrix) -> Matrix:
        """
        Произведение строка × столбец.

        Для квадратных операндов размер результата совпадает с левым операндом.

        Raises:
            ContractViolation: Если self.width != other.height
        """
        if self._width != other.height:
            raise ContractViolation(
                f"cannot multiply {self._height}x{self._width} by {other.height}x{other.width}"
            )
        result = Matrix.with_dimensions(other.width, self._height)
        for i in range(self._height):
            row = self._rows[i]
            for j in range(other.width):
                col = other.column(j)
                result._rows[i][j] = sum(a * b for a, b in zip(row, col))
        return result

    def transform(self, t: Tuple) -> Tuple:
        """
        Применение 4×4 матрицы к кортежу: компонента i = dot(row_i, t).

        Raises:
            ContractViolation: Если матрица не 4×4
        """
        if self._width != 4 or self._height != 4:
            raise ContractViolation(
                f"matrix-tuple product requires a 4x4 matrix, got {self._height}x{self._width}"
            )
        components = t.components()
        x, y, z, w = (sum(a * b for a, b in zip(row, components)) for row in self._rows)
        return Tuple(x, y, z, w)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, Tuple):
            return self.transform(other)
        return NotImplemented

    def __matmul__(self, other: Any) -> Any:
        return self.__mul__(other)

    # -------------------------------------------------------------------------
    # Округление, сравнение, представление
    # -------------------------------------------------------------------------

    def round(self, decimal_places: int) -> Matrix:
        """Поэлементный round_to; только для отображения и сравнения в тестах."""
        return Matrix(
            ([round_to(v, decimal_places) for v in row] for row in self._rows),
            width=self._width,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._width != other.width or self._height != other.height:
            return False
        return all(
            epsilon_equal(a, b)
            for row_a, row_b in zip(self._rows, other._rows)
            for a, b in zip(row_a, row_b)
        )

    # Равенство приближённое, поэтому хэш не определён
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self.rows()!r})"

    def __str__(self) -> str:
        return "\n".join(" ".join(f"{v:g}" for v in row) for row in self._rows)

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self._width,
            "height": self._height,
            "rows": [list(row) for row in self._rows],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Matrix:
        """
        Построение из dict {"width", "height", "rows"}.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют matrix.json
            ContractViolation: Если строки разной длины или размеры не совпадают с rows
        """
        validate_matrix(data)
        m = cls(data["rows"])
        if m.width != data["width"] or m.height != data["height"]:
            raise ContractViolation(
                f"declared size {data['height']}x{data['width']} does not match rows "
                f"({m.height}x{m.width})"
            )
        return m
