"""
Contract Violations — нарушения предусловий ядра

Нарушение контракта — ошибка программиста, а не восстановимая ситуация:
- матрица из строк разной длины
- определитель/обратная для неквадратной матрицы
- обратная для вырожденной матрицы
- умножение несогласованных по размеру операндов
- нормализация вектора нулевой длины и деление кортежа на ноль
- нечисловой элемент матрицы

Проверки выполняются явно (не через assert), чтобы не отключаться при `python -O`.
"""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ContractViolation(Exception):
    """
    Нарушение предусловия операции ядра.

    Вызывающий код не должен перехватывать это исключение: правильная реакция —
    исправить вызов (например, проверить invertible() перед inverse()).
    """

    pass
