"""
Numerical Safeguards — Примитивы для вычислений в градусах

Модуль содержит небольшой набор функций, на которых держится точность
кодирования/декодирования мешей:
- Проверка конечности float (NaN/Inf никогда не попадают в расчёт кода)
- Ограничение значения диапазоном (clamp)
- Вычисление индекса ячейки (bucket) через floor с насыщением

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Индекс ячейки всегда получается через floor, округление не используется
2. Индекс ячейки всегда лежит в [0, count - 1]
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность сравнения размеров ячеек в градусах
# Используется в тестах и при сравнении границ соседних ячеек
EPS_DEGREES: Final[float] = 1e-10


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# ОГРАНИЧЕНИЕ И КВАНТОВАНИЕ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def floor_bucket(offset: float, step: float, count: int) -> int:
    """
    Индекс ячейки для смещения offset внутри родительской ячейки.

    bucket = clamp(floor(offset / step), 0, count - 1)

    Насыщение нужно только для смещений, которые из-за погрешности float
    оказались чуть меньше 0 или чуть больше размера родительской ячейки.

    Args:
        offset: Смещение от южного/западного края родительской ячейки (градусы)
        step: Размер дочерней ячейки по той же оси (градусы)
        count: Количество дочерних ячеек по оси

    Returns:
        Индекс в диапазоне [0, count - 1]

    Raises:
        ValueError: Если step <= 0 или count <= 0

    Examples:
        >>> floor_bucket(0.35, 0.1, 8)
        3
        >>> floor_bucket(-1e-15, 0.1, 8)
        0
        >>> floor_bucket(0.8, 0.1, 8)
        7
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if count <= 0:
        raise ValueError(f"count must be positive, got {count}")

    return int(clamp(math.floor(offset / step), 0, count - 1))
