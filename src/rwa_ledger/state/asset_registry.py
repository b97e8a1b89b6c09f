"""AssetRegistry — реестр активов и монотонный счётчик asset id.

Операции:
- register: только владелец контракта; id = total_assets + 1; начальная
  эмиссия зачисляется вызывающему
- mint: только владелец актива, актив не заморожен; total_supply и баланс
  получателя растут на одну и ту же величину

Инвариант: для каждого актива сумма балансов == total_supply.
"""

import logging
from typing import Optional

from rwa_ledger.core.config import LedgerConfig
from rwa_ledger.core.domain.asset import Asset
from rwa_ledger.core.domain.event import EventType
from rwa_ledger.core.domain.units import (
    KIND_MAX_LENGTH,
    KIND_MIN_LENGTH,
    METADATA_URI_MAX_LENGTH,
    METADATA_URI_MIN_LENGTH,
    checked_add,
)
from rwa_ledger.core.errors import ErrorCode, LedgerError
from rwa_ledger.gatekeeper.access_control import (
    require_asset_owner,
    require_contract_owner,
    require_not_frozen,
)
from rwa_ledger.gatekeeper.validator import (
    validate_amount,
    validate_asset_id,
    validate_recipient,
    validate_string,
)
from rwa_ledger.host.host import CallContext
from rwa_ledger.host.store import StateStore
from rwa_ledger.state.balance_ledger import BalanceLedger
from rwa_ledger.state.event_log import EventLog


logger = logging.getLogger(__name__)

GLOBALS_TABLE = "globals"
TOTAL_ASSETS_KEY = "total_assets"


class AssetRegistry:
    """Реестр активов.

    Таблица assets: asset_id → Asset. Счётчик total_assets хранит последний
    выданный id (0 до первой регистрации).
    """

    TABLE = "assets"

    def __init__(
        self,
        store: StateStore,
        balances: BalanceLedger,
        events: EventLog,
        contract_owner: str,
        config: Optional[LedgerConfig] = None,
    ):
        self.config = config or LedgerConfig()
        self.contract_owner = contract_owner
        self._assets = store.table(self.TABLE)
        self._globals = store.table(GLOBALS_TABLE)
        self._globals.setdefault(TOTAL_ASSETS_KEY, 0)
        self._balances = balances
        self._events = events

    @property
    def total_assets(self) -> int:
        return self._globals[TOTAL_ASSETS_KEY]

    def get(self, asset_id: int) -> Optional[Asset]:
        return self._assets.get(asset_id)

    def require(self, asset_id: int) -> Asset:
        """Актив по id.

        Raises:
            LedgerError(ASSET_NOT_FOUND): id вне [1, total_assets] или записи нет
        """
        validate_asset_id(asset_id, self.total_assets)
        asset = self._assets.get(asset_id)
        if asset is None:
            raise LedgerError(ErrorCode.ASSET_NOT_FOUND, f"asset {asset_id} not found")
        return asset

    def register(
        self,
        ctx: CallContext,
        kind: str,
        metadata_uri: str,
        initial_supply: int,
    ) -> int:
        """Регистрация нового актива.

        Args:
            ctx: конверт вызова (sender станет владельцем актива)
            kind: тип актива, ASCII, 1..32 символа
            metadata_uri: URI метаданных, 1..256 символов
            initial_supply: начальная эмиссия (> 0), зачисляется sender

        Returns:
            id нового актива

        Raises:
            LedgerError: INVALID_STRING, INVALID_PARAMS, NOT_AUTHORIZED, ASSET_EXISTS
        """
        validate_string(kind, KIND_MIN_LENGTH, KIND_MAX_LENGTH, ascii_only=True)
        validate_string(metadata_uri, METADATA_URI_MIN_LENGTH, METADATA_URI_MAX_LENGTH)
        validate_amount(initial_supply)

        require_contract_owner(ctx, self.contract_owner)

        asset_id = checked_add(self.total_assets, 1)
        if asset_id in self._assets:
            raise LedgerError(ErrorCode.ASSET_EXISTS, f"asset {asset_id} already registered")

        asset = Asset(
            id=asset_id,
            owner=ctx.sender,
            kind=kind,
            metadata_uri=metadata_uri,
            total_supply=initial_supply,
            is_frozen=False,
        )
        self._assets[asset_id] = asset
        self._globals[TOTAL_ASSETS_KEY] = asset_id
        self._balances.credit(asset_id, ctx.sender, initial_supply)

        self._events.append(
            ctx,
            EventType.ASSET_REGISTERED,
            asset_id=asset_id,
            kind=kind,
            metadata_uri=metadata_uri,
            initial_supply=initial_supply,
        )
        logger.info(
            "Asset %d registered: kind=%s supply=%d owner=%s",
            asset_id, kind, initial_supply, ctx.sender,
        )
        return asset_id

    def mint(self, ctx: CallContext, asset_id: int, amount: int, recipient: str) -> bool:
        """Дополнительная эмиссия.

        Raises:
            LedgerError: ASSET_NOT_FOUND, INVALID_PARAMS, INVALID_RECIPIENT, NOT_AUTHORIZED
        """
        asset = self.require(asset_id)
        validate_amount(amount)
        validate_recipient(recipient, self.config.contract_principal)

        require_asset_owner(ctx, asset)
        require_not_frozen(asset)

        new_supply = checked_add(asset.total_supply, amount)
        self._balances.credit(asset_id, recipient, amount)
        self._assets[asset_id] = asset.with_supply(new_supply)

        self._events.append(
            ctx,
            EventType.ASSET_MINTED,
            asset_id=asset_id,
            amount=amount,
            recipient=recipient,
            total_supply=new_supply,
        )
        logger.info(
            "Asset %d minted: amount=%d recipient=%s total_supply=%d",
            asset_id, amount, recipient, new_supply,
        )
        return True
