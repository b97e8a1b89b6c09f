"""Validator — предикаты корректности аргументов

Проверки выполняются первыми в каждой публичной операции, до AccessControl.
Каждая функция либо возвращает нормализованное значение, либо поднимает
LedgerError с кодом, который соответствует виду нарушения:
- суммы/количества: uint64 и > 0 → INVALID_PARAMS
- строки: длина и кодировка → INVALID_STRING
- asset id: 1 <= id <= total_assets → ASSET_NOT_FOUND
- expiry: >= текущей высоты → INVALID_EXPIRY
- principals: непустая строка → INVALID_PARAMS
"""

from rwa_ledger.core.domain.units import is_uint64
from rwa_ledger.core.errors import ErrorCode, LedgerError


def validate_uint(value: object, code: ErrorCode = ErrorCode.INVALID_PARAMS) -> int:
    """uint64 (ноль допустим)."""
    if not is_uint64(value):
        raise LedgerError(code, f"expected uint64, got {value!r}")
    return value  # type: ignore[return-value]


def validate_amount(value: object, code: ErrorCode = ErrorCode.INVALID_PARAMS) -> int:
    """Положительный uint64: amount, quantity, supply.

    Args:
        value: Проверяемое значение
        code: Код ошибки (INVALID_PRICE для цены)
    """
    amount = validate_uint(value, code)
    if amount == 0:
        raise LedgerError(code, "amount must be greater than zero")
    return amount


def validate_string(
    value: object,
    min_length: int,
    max_length: int,
    ascii_only: bool = False,
) -> str:
    """Строка с ограничением длины (в символах).

    Raises:
        LedgerError(INVALID_STRING): тип, длина, не-UTF-8 или не-ASCII символы
    """
    if not isinstance(value, str):
        raise LedgerError(ErrorCode.INVALID_STRING, f"expected string, got {type(value).__name__}")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise LedgerError(ErrorCode.INVALID_STRING, f"not valid UTF-8: {exc.reason}") from exc
    if not (min_length <= len(value) <= max_length):
        raise LedgerError(
            ErrorCode.INVALID_STRING,
            f"length {len(value)} outside [{min_length}, {max_length}]",
        )
    if ascii_only and not value.isascii():
        raise LedgerError(ErrorCode.INVALID_STRING, f"{value!r} is not ASCII")
    return value


def validate_asset_id(asset_id: object, total_assets: int) -> int:
    """Asset id в диапазоне [1, total_assets]."""
    if not is_uint64(asset_id) or not (1 <= asset_id <= total_assets):  # type: ignore[operator]
        raise LedgerError(ErrorCode.ASSET_NOT_FOUND, f"asset {asset_id!r} not found")
    return asset_id  # type: ignore[return-value]


def validate_expiry(expiry: object, block_height: int) -> int:
    """Expiry не в прошлом: expiry >= block_height."""
    if not is_uint64(expiry) or expiry < block_height:  # type: ignore[operator]
        raise LedgerError(
            ErrorCode.INVALID_EXPIRY,
            f"expiry {expiry!r} is before current block height {block_height}",
        )
    return expiry  # type: ignore[return-value]


def validate_principal(principal: object, code: ErrorCode = ErrorCode.INVALID_PARAMS) -> str:
    """Непустой principal."""
    if not isinstance(principal, str) or not principal:
        raise LedgerError(code, f"invalid principal {principal!r}")
    return principal


def validate_recipient(recipient: object, contract_principal: str) -> str:
    """Получатель токенов: не пустой и не сам контракт."""
    validate_principal(recipient, ErrorCode.INVALID_RECIPIENT)
    if recipient == contract_principal:
        raise LedgerError(ErrorCode.INVALID_RECIPIENT, "recipient cannot be the contract itself")
    return recipient  # type: ignore[return-value]


def validate_distinct(a: str, b: str, code: ErrorCode) -> None:
    """a != b (self transfer / self trade)."""
    if a == b:
        raise LedgerError(code, f"{a} cannot be both parties")
