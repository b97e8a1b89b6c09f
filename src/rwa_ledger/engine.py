"""Ledger Engine — публичные точки входа контракта.

Каждый вызов:
1. открывает транзакционную область над всем StateStore хоста
2. выполняет операцию компонента (Validator → AccessControl → мутация)
3. при LedgerError откатывает все изменения и возвращает CallResult с кодом
   ошибки; при успехе — CallResult со значением

Неожиданные исключения (ошибки программирования) тоже откатывают состояние,
но пробрасываются без изменений.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel

from rwa_ledger.core.config import LedgerConfig
from rwa_ledger.core.contracts.validators import OutputContracts
from rwa_ledger.core.domain.compliance import ComplianceRecord
from rwa_ledger.core.domain.event import LedgerEvent
from rwa_ledger.core.domain.listing import Listing
from rwa_ledger.core.errors import ErrorCode, LedgerError
from rwa_ledger.gatekeeper.validator import validate_principal
from rwa_ledger.host.host import CallContext, HostLedger
from rwa_ledger.state.asset_registry import AssetRegistry
from rwa_ledger.state.balance_ledger import BalanceLedger
from rwa_ledger.state.compliance_registry import ComplianceRegistry
from rwa_ledger.state.event_log import EventLog
from rwa_ledger.state.marketplace import Marketplace


logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CallResult:
    """Результат вызова точки входа."""

    ok: bool
    value: Any
    error: Optional[ErrorCode]

    # Детали
    details: str

    @classmethod
    def success(cls, value: Any, details: str = "") -> "CallResult":
        return cls(ok=True, value=value, error=None, details=details)

    @classmethod
    def failure(cls, exc: LedgerError) -> "CallResult":
        return cls(ok=False, value=None, error=exc.code, details=exc.message)

    def unwrap(self) -> Any:
        """Значение успешного вызова.

        Raises:
            LedgerError: если вызов завершился ошибкой
        """
        if not self.ok:
            raise LedgerError(self.error, self.details)  # type: ignore[arg-type]
        return self.value

    def to_dict(self) -> Dict[str, Any]:
        """JSON представление (контракт call_result)."""
        value = self.value
        if isinstance(value, BaseModel):
            value = value.model_dump(mode="json")
        error = None
        if self.error is not None:
            error = {"code": int(self.error), "kind": self.error.kind}
        return {"ok": self.ok, "value": value, "error": error, "details": self.details}


# =============================================================================
# ENGINE
# =============================================================================


class AssetLedgerEngine:
    """Tokenized asset ledger: регистрация, эмиссия, переводы, marketplace, compliance.

    Развёртывается на HostLedger; deployer становится владельцем контракта
    и начальным compliance authority.
    """

    def __init__(
        self,
        host: HostLedger,
        deployer: str,
        config: Optional[LedgerConfig] = None,
    ):
        """
        Args:
            host: окружение исполнения (state store, высота, native currency)
            deployer: principal, развёртывающий контракт
            config: конфигурация (опционально, используется default)
        """
        self.config = config or LedgerConfig()
        self.host = host
        self.contract_owner = validate_principal(deployer)

        store = host.store
        self.events = EventLog(store)
        self.balances = BalanceLedger(store, self.events, self.config)
        self.assets = AssetRegistry(store, self.balances, self.events, deployer, self.config)
        self.marketplace = Marketplace(
            store, self.assets, self.balances, host.native, self.events, self.config
        )
        self.compliance = ComplianceRegistry(
            store, self.assets, self.events, deployer, self.config
        )

        self._contracts: Optional[OutputContracts] = None
        if self.config.validate_outputs:
            self._contracts = OutputContracts()

        logger.info(
            "Ledger deployed: owner=%s contract=%s height=%d",
            deployer, self.config.contract_principal, host.block_height,
        )

    # -------------------------------------------------------------------------
    # Public entry points (mutating)
    # -------------------------------------------------------------------------

    def register(
        self, ctx: CallContext, kind: str, metadata_uri: str, initial_supply: int
    ) -> CallResult:
        """Регистрация актива. Значение — новый asset id."""
        return self._execute("register", ctx, self.assets.register, kind, metadata_uri, initial_supply)

    def mint(self, ctx: CallContext, asset_id: int, amount: int, recipient: str) -> CallResult:
        return self._execute("mint", ctx, self.assets.mint, asset_id, amount, recipient)

    def transfer(self, ctx: CallContext, asset_id: int, to: str, amount: int) -> CallResult:
        """Перевод токенов вызывающего получателю to."""

        def _transfer(ctx: CallContext, asset_id: int, to: str, amount: int) -> bool:
            asset = self.assets.require(asset_id)
            return self.balances.transfer(ctx, asset, ctx.sender, to, amount)

        return self._execute("transfer", ctx, _transfer, asset_id, to, amount)

    def list(
        self, ctx: CallContext, asset_id: int, price: int, quantity: int, expiry: int
    ) -> CallResult:
        return self._execute("list", ctx, self.marketplace.list, asset_id, price, quantity, expiry)

    def buy(self, ctx: CallContext, asset_id: int, seller: str, quantity: int) -> CallResult:
        return self._execute("buy", ctx, self.marketplace.buy, asset_id, seller, quantity)

    def set_authority(self, ctx: CallContext, new_authority: str) -> CallResult:
        return self._execute("set_authority", ctx, self.compliance.set_authority, new_authority)

    def approve_user(self, ctx: CallContext, asset_id: int, user: str) -> CallResult:
        return self._execute("approve_user", ctx, self.compliance.approve_user, asset_id, user)

    # -------------------------------------------------------------------------
    # Read-only queries
    # -------------------------------------------------------------------------

    def get_asset_info(self, asset_id: int) -> CallResult:
        return self._query("get_asset_info", self.assets.require, asset_id)

    def get_user_balance(self, asset_id: int, user: str) -> CallResult:
        def _balance(asset_id: int, user: str) -> int:
            self.assets.require(asset_id)
            validate_principal(user)
            return self.balances.balance_of(asset_id, user)

        return self._query("get_user_balance", _balance, asset_id, user)

    def get_listing(self, asset_id: int, seller: str) -> CallResult:
        """Значение — Listing или None."""

        def _listing(asset_id: int, seller: str) -> Optional[Listing]:
            self.assets.require(asset_id)
            return self.marketplace.get(asset_id, seller)

        return self._query("get_listing", _listing, asset_id, seller)

    def is_user_approved(self, asset_id: int, user: str) -> CallResult:
        def _approved(asset_id: int, user: str) -> bool:
            self.assets.require(asset_id)
            return self.compliance.is_approved(asset_id, user)

        return self._query("is_user_approved", _approved, asset_id, user)

    def get_compliance_record(self, asset_id: int, user: str) -> CallResult:
        """Значение — ComplianceRecord или None."""

        def _record(asset_id: int, user: str) -> Optional[ComplianceRecord]:
            self.assets.require(asset_id)
            return self.compliance.get_record(asset_id, user)

        return self._query("get_compliance_record", _record, asset_id, user)

    def get_total_assets(self) -> CallResult:
        return self._query("get_total_assets", lambda: self.assets.total_assets)

    def get_compliance_authority(self) -> CallResult:
        return self._query("get_compliance_authority", lambda: self.compliance.authority)

    def get_contract_owner(self) -> CallResult:
        return self._query("get_contract_owner", lambda: self.contract_owner)

    def event_log(self) -> List[LedgerEvent]:
        """Все события успешных вызовов в порядке появления."""
        return self.events.events()

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _execute(
        self,
        operation: str,
        ctx: CallContext,
        fn: Callable[..., Any],
        *args: Any,
    ) -> CallResult:
        try:
            with self.host.store.transaction():
                result = CallResult.success(fn(ctx, *args), details=f"{operation} ok")
                # Нарушение контракта ответа откатывает вызов
                self._check_contract(result)
        except LedgerError as exc:
            logger.warning(
                "%s rejected for %s at height %d: %s",
                operation, ctx.sender, ctx.block_height, exc,
            )
            return self._check_contract(CallResult.failure(exc))
        return result

    def _query(self, operation: str, fn: Callable[..., Any], *args: Any) -> CallResult:
        try:
            result = CallResult.success(fn(*args))
        except LedgerError as exc:
            logger.debug("%s failed: %s", operation, exc)
            result = CallResult.failure(exc)
        return self._check_contract(result)

    def _check_contract(self, result: CallResult) -> CallResult:
        if self._contracts is not None:
            self._contracts.validate_value(result.value)
            self._contracts.validate_envelope(result.to_dict())
        return result
