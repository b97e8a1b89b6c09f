"""
Units — uint64 арифметика ledger

Все количества (supply, balance, price, quantity, block height) — беззнаковые
64-битные целые. Переполнение не оборачивается: операция отклоняется
с INVALID_PARAMS.

ЗАПРЕЩЕНО складывать/умножать количества ledger без checked_* из этого модуля.
"""

from typing import Annotated, Final

from pydantic import AfterValidator

from rwa_ledger.core.errors import ErrorCode, LedgerError


# =============================================================================
# ГРАНИЦЫ
# =============================================================================

UINT64_MAX: Final[int] = 2**64 - 1

# Границы строковых полей Asset
KIND_MIN_LENGTH: Final[int] = 1
KIND_MAX_LENGTH: Final[int] = 32
METADATA_URI_MIN_LENGTH: Final[int] = 1
METADATA_URI_MAX_LENGTH: Final[int] = 256


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_uint64(value: object) -> bool:
    """
    Проверка, что значение — целое в диапазоне [0, UINT64_MAX].

    bool формально подкласс int, но количеством не считается.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= UINT64_MAX


def _require_uint64(value: int) -> int:
    if not is_uint64(value):
        raise ValueError(f"{value} outside uint64 range [0, {UINT64_MAX}]")
    return value


# Тип поля pydantic моделей: int в диапазоне uint64
Uint64 = Annotated[int, AfterValidator(_require_uint64)]


# =============================================================================
# CHECKED ARITHMETIC
# =============================================================================


def checked_add(a: int, b: int) -> int:
    """
    Сложение с проверкой переполнения uint64.

    Raises:
        LedgerError(INVALID_PARAMS): Если результат превышает UINT64_MAX
    """
    result = a + b
    if result > UINT64_MAX:
        raise LedgerError(ErrorCode.INVALID_PARAMS, f"uint64 overflow: {a} + {b}")
    return result


def checked_sub(a: int, b: int) -> int:
    """
    Вычитание без ухода в отрицательные значения.

    Raises:
        LedgerError(INSUFFICIENT_BALANCE): Если b > a
    """
    if b > a:
        raise LedgerError(ErrorCode.INSUFFICIENT_BALANCE, f"uint64 underflow: {a} - {b}")
    return a - b


def checked_mul(a: int, b: int) -> int:
    """
    Умножение с проверкой переполнения uint64.

    Используется для total_cost = price * quantity.

    Raises:
        LedgerError(INVALID_PARAMS): Если результат превышает UINT64_MAX
    """
    result = a * b
    if result > UINT64_MAX:
        raise LedgerError(ErrorCode.INVALID_PARAMS, f"uint64 overflow: {a} * {b}")
    return result
