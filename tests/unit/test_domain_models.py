"""
Тесты для доменных моделей: Asset, Listing, ComplianceRecord, LedgerEvent

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Immutability (frozen=True)
3. Бизнес-логику Listing (expiry, total_cost, consume)
4. Граничные случаи и невалидные данные
"""

import pytest
from pydantic import ValidationError

from rwa_ledger.core.domain import (
    UINT64_MAX,
    Asset,
    ComplianceRecord,
    EventType,
    LedgerEvent,
    Listing,
)
from rwa_ledger.core.errors import ErrorCode, LedgerError


# =============================================================================
# ASSET TESTS
# =============================================================================


class TestAsset:
    """Тесты для модели Asset"""

    @pytest.fixture
    def asset(self) -> Asset:
        return Asset(
            id=1,
            owner="SP-OWNER",
            kind="REAL_ESTATE",
            metadata_uri="ipfs://x",
            total_supply=1000,
        )

    def test_asset_creation(self, asset: Asset) -> None:
        assert asset.id == 1
        assert asset.owner == "SP-OWNER"
        assert asset.total_supply == 1000
        assert asset.is_frozen is False

    def test_asset_immutable(self, asset: Asset) -> None:
        with pytest.raises(ValidationError):
            asset.total_supply = 5  # type: ignore

    def test_with_supply_creates_copy(self, asset: Asset) -> None:
        updated = asset.with_supply(1500)
        assert updated.total_supply == 1500
        assert asset.total_supply == 1000
        assert updated.kind == asset.kind
        assert updated.owner == asset.owner

    def test_asset_id_starts_at_one(self) -> None:
        with pytest.raises(ValidationError):
            Asset(id=0, owner="o", kind="K", metadata_uri="u", total_supply=1)

    def test_kind_too_long(self) -> None:
        with pytest.raises(ValidationError):
            Asset(id=1, owner="o", kind="K" * 33, metadata_uri="u", total_supply=1)

    def test_kind_must_be_ascii(self) -> None:
        with pytest.raises(ValidationError):
            Asset(id=1, owner="o", kind="НЕДВИЖИМОСТЬ", metadata_uri="u", total_supply=1)

    def test_metadata_uri_utf8_allowed(self) -> None:
        asset = Asset(id=1, owner="o", kind="ART", metadata_uri="ipfs://картина", total_supply=1)
        assert asset.metadata_uri == "ipfs://картина"

    def test_supply_above_uint64(self) -> None:
        with pytest.raises(ValidationError):
            Asset(id=1, owner="o", kind="K", metadata_uri="u", total_supply=UINT64_MAX + 1)


# =============================================================================
# LISTING TESTS
# =============================================================================


class TestListing:
    """Тесты для модели Listing"""

    @pytest.fixture
    def listing(self) -> Listing:
        return Listing(price=10, quantity=100, expiry=600)

    def test_not_expired_at_expiry_height(self, listing: Listing) -> None:
        """expiry — последняя высота, на которой listing активен."""
        assert listing.is_expired(600) is False
        assert listing.is_expired(599) is False

    def test_expired_after_expiry_height(self, listing: Listing) -> None:
        assert listing.is_expired(601) is True

    def test_total_cost(self, listing: Listing) -> None:
        assert listing.total_cost(40) == 400

    def test_total_cost_overflow(self) -> None:
        listing = Listing(price=UINT64_MAX, quantity=2, expiry=0)
        with pytest.raises(LedgerError) as exc_info:
            listing.total_cost(2)
        assert exc_info.value.code == ErrorCode.INVALID_PARAMS

    def test_consume_partial(self, listing: Listing) -> None:
        remaining = listing.consume(40)
        assert remaining is not None
        assert remaining.quantity == 60
        assert remaining.price == listing.price
        assert remaining.expiry == listing.expiry

    def test_consume_full(self, listing: Listing) -> None:
        assert listing.consume(100) is None

    def test_zero_price_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Listing(price=0, quantity=1, expiry=0)

    def test_zero_quantity_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Listing(price=1, quantity=0, expiry=0)


# =============================================================================
# COMPLIANCE / EVENT TESTS
# =============================================================================


class TestComplianceRecord:
    """Тесты для модели ComplianceRecord"""

    def test_creation(self) -> None:
        record = ComplianceRecord(approved=True, timestamp=150)
        assert record.approved is True
        assert record.timestamp == 150

    def test_immutable(self) -> None:
        record = ComplianceRecord(approved=True, timestamp=150)
        with pytest.raises(ValidationError):
            record.approved = False  # type: ignore


class TestLedgerEvent:
    """Тесты для модели LedgerEvent"""

    def test_json_roundtrip(self) -> None:
        event = LedgerEvent(
            sequence=0,
            event=EventType.TRANSFER,
            block_height=100,
            sender="SP-ALICE",
            payload={"asset_id": 1, "amount": 5},
        )
        restored = LedgerEvent.model_validate_json(event.model_dump_json())
        assert restored == event
        assert restored.event == EventType.TRANSFER

    def test_empty_sender_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LedgerEvent(sequence=0, event=EventType.TRANSFER, block_height=1, sender="")
