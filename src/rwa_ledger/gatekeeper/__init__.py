"""Gatekeeper — проверки допуска вызова.

Порядок в каждой публичной операции:
1. Validator: корректность аргументов
2. AccessControl: идентичность вызывающего
"""

from .access_control import (
    require_asset_owner,
    require_compliance_authority,
    require_contract_owner,
    require_not_frozen,
)
from .validator import (
    validate_amount,
    validate_asset_id,
    validate_distinct,
    validate_expiry,
    validate_principal,
    validate_recipient,
    validate_string,
    validate_uint,
)

__all__ = [
    # Validator
    "validate_uint",
    "validate_amount",
    "validate_string",
    "validate_asset_id",
    "validate_expiry",
    "validate_principal",
    "validate_recipient",
    "validate_distinct",
    # AccessControl
    "require_contract_owner",
    "require_compliance_authority",
    "require_asset_owner",
    "require_not_frozen",
]
