"""Unit тесты для Gatekeeper: Validator и AccessControl.

Coverage:
- Каждый предикат поднимает ожидаемый ErrorCode
- Граничные значения длин строк, asset id, expiry
- AccessControl: owner / authority / asset owner / frozen
"""

import pytest

from rwa_ledger.core.domain import UINT64_MAX, Asset
from rwa_ledger.core.errors import ErrorCode, LedgerError
from rwa_ledger.gatekeeper import (
    require_asset_owner,
    require_compliance_authority,
    require_contract_owner,
    require_not_frozen,
    validate_amount,
    validate_asset_id,
    validate_distinct,
    validate_expiry,
    validate_principal,
    validate_recipient,
    validate_string,
    validate_uint,
)
from rwa_ledger.host import CallContext


CONTRACT = "ledger.contract"


def _code(fn, *args, **kwargs) -> ErrorCode:
    with pytest.raises(LedgerError) as exc_info:
        fn(*args, **kwargs)
    return exc_info.value.code


# =============================================================================
# VALIDATOR
# =============================================================================


class TestAmounts:
    def test_uint_accepts_zero(self):
        assert validate_uint(0) == 0

    def test_uint_rejects_negative(self):
        assert _code(validate_uint, -1) == ErrorCode.INVALID_PARAMS

    def test_amount_rejects_zero(self):
        assert _code(validate_amount, 0) == ErrorCode.INVALID_PARAMS

    def test_amount_rejects_overflow(self):
        assert _code(validate_amount, UINT64_MAX + 1) == ErrorCode.INVALID_PARAMS

    def test_amount_custom_code(self):
        """Цена использует INVALID_PRICE."""
        assert _code(validate_amount, 0, ErrorCode.INVALID_PRICE) == ErrorCode.INVALID_PRICE

    def test_amount_rejects_bool(self):
        assert _code(validate_amount, True) == ErrorCode.INVALID_PARAMS

    def test_amount_passes(self):
        assert validate_amount(UINT64_MAX) == UINT64_MAX


class TestStrings:
    def test_bounds_inclusive(self):
        assert validate_string("a", 1, 32) == "a"
        assert validate_string("a" * 32, 1, 32) == "a" * 32

    def test_empty(self):
        assert _code(validate_string, "", 1, 32) == ErrorCode.INVALID_STRING

    def test_too_long(self):
        assert _code(validate_string, "a" * 33, 1, 32) == ErrorCode.INVALID_STRING

    def test_ascii_only(self):
        assert _code(validate_string, "дом", 1, 32, ascii_only=True) == ErrorCode.INVALID_STRING

    def test_utf8_allowed_by_default(self):
        assert validate_string("дом", 1, 256) == "дом"

    def test_not_a_string(self):
        assert _code(validate_string, 42, 1, 32) == ErrorCode.INVALID_STRING

    def test_lone_surrogate_rejected(self):
        """Строка, не кодируемая в UTF-8."""
        assert _code(validate_string, "ipfs://\ud800", 1, 256) == ErrorCode.INVALID_STRING


class TestAssetId:
    def test_in_range(self):
        assert validate_asset_id(1, 3) == 1
        assert validate_asset_id(3, 3) == 3

    @pytest.mark.parametrize("asset_id", [0, 4, -1, "1", None])
    def test_out_of_range(self, asset_id):
        assert _code(validate_asset_id, asset_id, 3) == ErrorCode.ASSET_NOT_FOUND

    def test_no_assets_registered(self):
        assert _code(validate_asset_id, 1, 0) == ErrorCode.ASSET_NOT_FOUND


class TestExpiry:
    def test_current_height_allowed(self):
        assert validate_expiry(100, 100) == 100

    def test_future_allowed(self):
        assert validate_expiry(600, 100) == 600

    def test_past_rejected(self):
        assert _code(validate_expiry, 99, 100) == ErrorCode.INVALID_EXPIRY


class TestPrincipals:
    def test_principal_empty(self):
        assert _code(validate_principal, "") == ErrorCode.INVALID_PARAMS

    def test_principal_custom_code(self):
        assert _code(validate_principal, None, ErrorCode.INVALID_AUTHORITY) == ErrorCode.INVALID_AUTHORITY

    def test_recipient_contract_rejected(self):
        assert _code(validate_recipient, CONTRACT, CONTRACT) == ErrorCode.INVALID_RECIPIENT

    def test_recipient_empty_rejected(self):
        assert _code(validate_recipient, "", CONTRACT) == ErrorCode.INVALID_RECIPIENT

    def test_recipient_ok(self):
        assert validate_recipient("SP-BOB", CONTRACT) == "SP-BOB"

    def test_distinct(self):
        validate_distinct("a", "b", ErrorCode.SELF_TRANSFER)
        assert _code(validate_distinct, "a", "a", ErrorCode.SELF_TRADE) == ErrorCode.SELF_TRADE


# =============================================================================
# ACCESS CONTROL
# =============================================================================


@pytest.fixture
def asset():
    return Asset(id=1, owner="SP-OWNER", kind="ART", metadata_uri="ipfs://a", total_supply=10)


class TestAccessControl:
    def test_contract_owner(self):
        require_contract_owner(CallContext("SP-OWNER", 1), "SP-OWNER")
        code = _code(require_contract_owner, CallContext("SP-ALICE", 1), "SP-OWNER")
        assert code == ErrorCode.NOT_AUTHORIZED

    def test_compliance_authority(self):
        require_compliance_authority(CallContext("SP-AUTH", 1), "SP-AUTH")
        code = _code(require_compliance_authority, CallContext("SP-OWNER", 1), "SP-AUTH")
        assert code == ErrorCode.NOT_AUTHORIZED

    def test_asset_owner(self, asset):
        require_asset_owner(CallContext("SP-OWNER", 1), asset)
        assert _code(require_asset_owner, CallContext("SP-BOB", 1), asset) == ErrorCode.NOT_AUTHORIZED

    def test_not_frozen(self, asset):
        require_not_frozen(asset)
        frozen = asset.model_copy(update={"is_frozen": True})
        assert _code(require_not_frozen, frozen) == ErrorCode.NOT_AUTHORIZED
        assert _code(require_not_frozen, frozen, ErrorCode.MARKETPLACE_FROZEN) == ErrorCode.MARKETPLACE_FROZEN
