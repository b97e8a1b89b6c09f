"""Конфигурация ledger engine.

Параметры развёртывания, которые не являются частью состояния:
- собственный адрес контракта (недопустимый получатель токенов)
- строгая валидация read-only ответов по JSON Schema контрактам
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LedgerConfig:
    """Конфигурация ledger engine.

    contract_principal: адрес самого контракта. Токены и compliance-записи
        на этот адрес запрещены (INVALID_RECIPIENT / INVALID_PARAMS / INVALID_AUTHORITY).
    validate_outputs: если True, ответы read-only запросов проверяются
        по contracts/schema/*.json перед возвратом.
    """

    contract_principal: str = "ledger.contract"
    validate_outputs: bool = False
