"""BalanceLedger — балансы (asset_id, holder) → uint64.

Отсутствующий ключ означает нулевой баланс (не ошибка).
transfer — атомарный debit-then-credit: оба новых значения вычисляются до
записи, поэтому ни одна проверка не может сработать между ними.
"""

import logging
from typing import Optional

from rwa_ledger.core.config import LedgerConfig
from rwa_ledger.core.domain.asset import Asset
from rwa_ledger.core.domain.event import EventType
from rwa_ledger.core.domain.units import checked_add, checked_sub
from rwa_ledger.core.errors import ErrorCode, LedgerError
from rwa_ledger.gatekeeper.access_control import require_not_frozen
from rwa_ledger.gatekeeper.validator import (
    validate_amount,
    validate_distinct,
    validate_recipient,
)
from rwa_ledger.host.host import CallContext
from rwa_ledger.host.store import StateStore
from rwa_ledger.state.event_log import EventLog


logger = logging.getLogger(__name__)


class BalanceLedger:
    """Балансы токенов по активам."""

    TABLE = "balances"

    def __init__(
        self,
        store: StateStore,
        events: EventLog,
        config: Optional[LedgerConfig] = None,
    ):
        self.config = config or LedgerConfig()
        self._balances = store.table(self.TABLE)
        self._events = events

    def balance_of(self, asset_id: int, holder: str) -> int:
        return self._balances.get((asset_id, holder), 0)

    def total_held(self, asset_id: int) -> int:
        """Сумма всех балансов актива (должна совпадать с total_supply)."""
        return sum(
            balance for (entry_asset, _), balance in self._balances.items()
            if entry_asset == asset_id
        )

    def credit(self, asset_id: int, holder: str, amount: int) -> int:
        """Зачисление при register/mint. Возвращает новый баланс."""
        balance = checked_add(self.balance_of(asset_id, holder), amount)
        self._balances[(asset_id, holder)] = balance
        return balance

    def transfer(
        self,
        ctx: CallContext,
        asset: Asset,
        sender: str,
        recipient: str,
        amount: int,
    ) -> bool:
        """Перевод amount токенов актива от sender к recipient.

        Порядок проверок:
        1. amount > 0 → INVALID_PARAMS
        2. sender != recipient → SELF_TRANSFER
        3. recipient не контракт → INVALID_RECIPIENT
        4. актив не заморожен → NOT_AUTHORIZED
        5. баланс sender >= amount → INSUFFICIENT_BALANCE

        Args:
            ctx: конверт вызова (для журнала событий)
            asset: разрешённая запись актива (AssetRegistry.require)
            sender: списываемый держатель
            recipient: получатель
            amount: количество токенов
        """
        validate_amount(amount)
        validate_distinct(sender, recipient, ErrorCode.SELF_TRANSFER)
        validate_recipient(recipient, self.config.contract_principal)
        require_not_frozen(asset)

        sender_balance = self.balance_of(asset.id, sender)
        if sender_balance < amount:
            raise LedgerError(
                ErrorCode.INSUFFICIENT_BALANCE,
                f"balance {sender_balance} < {amount} for {sender} on asset {asset.id}",
            )

        new_sender_balance = checked_sub(sender_balance, amount)
        new_recipient_balance = checked_add(self.balance_of(asset.id, recipient), amount)
        self._balances[(asset.id, sender)] = new_sender_balance
        self._balances[(asset.id, recipient)] = new_recipient_balance

        self._events.append(
            ctx,
            EventType.TRANSFER,
            asset_id=asset.id,
            sender=sender,
            recipient=recipient,
            amount=amount,
        )
        logger.info("Asset %d transfer %d: %s -> %s", asset.id, amount, sender, recipient)
        return True
