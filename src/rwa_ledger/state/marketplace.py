"""Marketplace — listings (asset_id, seller) и расчёт покупок.

list():
- баланс продавца проверяется только в момент выставления
- новый listing перезаписывает прежний от того же продавца

buy():
- порядок проверок: актив → listing есть (NOT_LISTED) → не истёк (INVALID_EXPIRY)
  → quantity (INVALID_PARAMS) → не заморожен (MARKETPLACE_FROZEN) → не себе (SELF_TRADE)
- расчёт: (a) native оплата покупатель → продавец, (b) токены продавец → покупатель
- живой баланс продавца заново не проверяется: нехватка проявляется как
  INSUFFICIENT_BALANCE внутри (b), после того как (a) уже выполнена
- (a) и (b) в одной транзакционной области: частичный расчёт не наблюдаем
"""

import logging
from typing import Optional

from rwa_ledger.core.config import LedgerConfig
from rwa_ledger.core.domain.event import EventType
from rwa_ledger.core.domain.listing import Listing
from rwa_ledger.core.errors import ErrorCode, LedgerError
from rwa_ledger.gatekeeper.access_control import require_not_frozen
from rwa_ledger.gatekeeper.validator import (
    validate_amount,
    validate_distinct,
    validate_expiry,
)
from rwa_ledger.host.host import CallContext, NativeCurrency
from rwa_ledger.host.store import StateStore
from rwa_ledger.state.asset_registry import AssetRegistry
from rwa_ledger.state.balance_ledger import BalanceLedger
from rwa_ledger.state.event_log import EventLog


logger = logging.getLogger(__name__)


class Marketplace:
    """Sell-side listings и settlement покупок."""

    TABLE = "listings"

    def __init__(
        self,
        store: StateStore,
        assets: AssetRegistry,
        balances: BalanceLedger,
        native: NativeCurrency,
        events: EventLog,
        config: Optional[LedgerConfig] = None,
    ):
        self.config = config or LedgerConfig()
        self._store = store
        self._listings = store.table(self.TABLE)
        self._assets = assets
        self._balances = balances
        self._native = native
        self._events = events

    def get(self, asset_id: int, seller: str) -> Optional[Listing]:
        return self._listings.get((asset_id, seller))

    def list(
        self,
        ctx: CallContext,
        asset_id: int,
        price: int,
        quantity: int,
        expiry: int,
    ) -> bool:
        """Выставление (или перезапись) listing вызывающего.

        Raises:
            LedgerError: ASSET_NOT_FOUND, INVALID_PRICE, INVALID_PARAMS,
                INVALID_EXPIRY, INSUFFICIENT_BALANCE
        """
        self._assets.require(asset_id)
        validate_amount(price, ErrorCode.INVALID_PRICE)
        validate_amount(quantity)
        validate_expiry(expiry, ctx.block_height)

        balance = self._balances.balance_of(asset_id, ctx.sender)
        if balance < quantity:
            raise LedgerError(
                ErrorCode.INSUFFICIENT_BALANCE,
                f"cannot list {quantity}, balance is {balance}",
            )

        listing = Listing(price=price, quantity=quantity, expiry=expiry)
        self._listings[(asset_id, ctx.sender)] = listing

        self._events.append(
            ctx,
            EventType.LISTING_CREATED,
            asset_id=asset_id,
            seller=ctx.sender,
            price=price,
            quantity=quantity,
            expiry=expiry,
        )
        logger.info(
            "Listing asset=%d seller=%s price=%d quantity=%d expiry=%d",
            asset_id, ctx.sender, price, quantity, expiry,
        )
        return True

    def buy(self, ctx: CallContext, asset_id: int, seller: str, quantity: int) -> bool:
        """Покупка quantity токенов из listing продавца.

        Raises:
            LedgerError: ASSET_NOT_FOUND, NOT_LISTED, INVALID_EXPIRY, INVALID_PARAMS,
                MARKETPLACE_FROZEN, SELF_TRADE, INSUFFICIENT_BALANCE
        """
        asset = self._assets.require(asset_id)

        listing = self.get(asset_id, seller)
        if listing is None:
            raise LedgerError(ErrorCode.NOT_LISTED, f"no listing for asset {asset_id} by {seller}")
        if listing.is_expired(ctx.block_height):
            raise LedgerError(
                ErrorCode.INVALID_EXPIRY,
                f"listing expired at {listing.expiry}, current height {ctx.block_height}",
            )

        validate_amount(quantity)
        if quantity > listing.quantity:
            raise LedgerError(
                ErrorCode.INVALID_PARAMS,
                f"quantity {quantity} exceeds listed {listing.quantity}",
            )
        require_not_frozen(asset, ErrorCode.MARKETPLACE_FROZEN)
        validate_distinct(ctx.sender, seller, ErrorCode.SELF_TRADE)

        total_cost = listing.total_cost(quantity)

        with self._store.transaction():
            self._native.transfer(total_cost, ctx.sender, seller)
            self._balances.transfer(ctx, asset, seller, ctx.sender, quantity)

            remaining = listing.consume(quantity)
            if remaining is None:
                del self._listings[(asset_id, seller)]
            else:
                self._listings[(asset_id, seller)] = remaining

        self._events.append(
            ctx,
            EventType.PURCHASE,
            asset_id=asset_id,
            seller=seller,
            buyer=ctx.sender,
            quantity=quantity,
            total_cost=total_cost,
        )
        logger.info(
            "Purchase asset=%d seller=%s buyer=%s quantity=%d cost=%d remaining=%d",
            asset_id, seller, ctx.sender, quantity, total_cost,
            remaining.quantity if remaining else 0,
        )
        return True
