"""
Tokenized asset ledger.

Deterministic state-transition engine for asset registration, supply issuance,
balance transfer, marketplace listing/purchase and compliance approvals.
"""

from rwa_ledger.core.config import LedgerConfig
from rwa_ledger.core.errors import ErrorCode, LedgerError
from rwa_ledger.engine import AssetLedgerEngine, CallResult
from rwa_ledger.host import CallContext, HostLedger

__all__ = [
    "AssetLedgerEngine",
    "CallResult",
    "CallContext",
    "HostLedger",
    "LedgerConfig",
    "ErrorCode",
    "LedgerError",
]
