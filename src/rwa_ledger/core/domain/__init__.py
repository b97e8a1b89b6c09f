"""
Domain models and value objects.

Contains fundamental ledger entities: Asset, Listing, ComplianceRecord, LedgerEvent,
plus uint64 arithmetic helpers.
"""

from rwa_ledger.core.domain.asset import Asset
from rwa_ledger.core.domain.compliance import ComplianceRecord
from rwa_ledger.core.domain.event import EventType, LedgerEvent
from rwa_ledger.core.domain.listing import Listing
from rwa_ledger.core.domain.units import (
    KIND_MAX_LENGTH,
    KIND_MIN_LENGTH,
    METADATA_URI_MAX_LENGTH,
    METADATA_URI_MIN_LENGTH,
    UINT64_MAX,
    Uint64,
    checked_add,
    checked_mul,
    checked_sub,
    is_uint64,
)

__all__ = [
    # Units module
    "UINT64_MAX",
    "Uint64",
    "KIND_MIN_LENGTH",
    "KIND_MAX_LENGTH",
    "METADATA_URI_MIN_LENGTH",
    "METADATA_URI_MAX_LENGTH",
    "is_uint64",
    "checked_add",
    "checked_sub",
    "checked_mul",
    # Asset model
    "Asset",
    # Listing model
    "Listing",
    # Compliance model
    "ComplianceRecord",
    # Event model
    "LedgerEvent",
    "EventType",
]
