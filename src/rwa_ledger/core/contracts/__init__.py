"""
Contract Validation Module

Модуль для валидации JSON представлений ответов ledger.
"""

from .validators import (
    CALL_RESULT_SCHEMA,
    MODEL_SCHEMAS,
    ContractValidator,
    OutputContracts,
    SchemaLoader,
    default_loader,
)

__all__ = [
    "CALL_RESULT_SCHEMA",
    "MODEL_SCHEMAS",
    "SchemaLoader",
    "ContractValidator",
    "OutputContracts",
    "default_loader",
]
