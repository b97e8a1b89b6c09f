"""
Ledger Errors — закрытый набор типизированных ошибок

Каждый вид ошибки несёт стабильный числовой код для внешнего сопоставления
(клиенты матчат по коду, а не по тексту сообщения).

Внутренние компоненты поднимают LedgerError; engine — единственное место,
где исключение перехватывается и превращается в CallResult с откатом
транзакции.
"""

from enum import IntEnum


# =============================================================================
# ERROR CODES
# =============================================================================


class ErrorCode(IntEnum):
    """Коды ошибок ledger (стабильные, не переиспользуются)"""

    NOT_AUTHORIZED = 100
    ASSET_EXISTS = 101
    ASSET_NOT_FOUND = 102
    INSUFFICIENT_BALANCE = 103
    NOT_LISTED = 104
    INVALID_PRICE = 105
    COMPLIANCE_CHECK_FAILED = 106  # зарезервирован, ни одна операция его не поднимает
    INVALID_PARAMS = 107
    INVALID_STRING = 108
    INVALID_EXPIRY = 109
    INVALID_RECIPIENT = 110
    SELF_TRANSFER = 111
    MARKETPLACE_FROZEN = 112
    SELF_TRADE = 113
    INVALID_AUTHORITY = 114

    @property
    def kind(self) -> str:
        """
        Имя вида ошибки в CamelCase (например, 'InsufficientBalance').

        Используется в логах и в call_result контракте.
        """
        return "".join(part.capitalize() for part in self.name.split("_"))


# =============================================================================
# EXCEPTION
# =============================================================================


class LedgerError(Exception):
    """
    Ошибка операции ledger.

    Прерывает текущий вызов целиком: все изменения, сделанные в рамках
    вызова, откатываются.
    """

    def __init__(self, code: ErrorCode, message: str = ""):
        self.code = code
        self.message = message or code.kind
        super().__init__(f"[{int(code)} {code.kind}] {self.message}")
