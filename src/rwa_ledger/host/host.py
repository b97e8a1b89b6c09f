"""Host Ledger — окружение исполнения вызовов.

Внешние по отношению к контракту сущности:
- конверт вызова (sender, block height)
- производство блоков (монотонная высота)
- native payment asset и его примитив transfer

Контракт не владеет этими данными, но native balances хранятся в том же
StateStore, что и таблицы контракта: один transaction() откатывает и
оплату, и перевод токенов.
"""

import logging
from dataclasses import dataclass

from rwa_ledger.core.domain.units import checked_add, checked_sub, is_uint64
from rwa_ledger.core.errors import ErrorCode, LedgerError
from rwa_ledger.host.store import StateStore


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallContext:
    """Конверт внешнего вызова."""

    sender: str
    block_height: int


class NativeCurrency:
    """Native payment asset хоста.

    Ошибки transfer:
    - amount == 0 или sender == recipient → INVALID_PARAMS
    - баланс sender < amount → INSUFFICIENT_BALANCE
    """

    TABLE = "native_balances"

    def __init__(self, store: StateStore):
        self._balances = store.table(self.TABLE)

    def balance_of(self, principal: str) -> int:
        return self._balances.get(principal, 0)

    def credit(self, principal: str, amount: int) -> int:
        """Зачисление native units (genesis/faucet хоста, не вызов контракта).

        Returns:
            Новый баланс principal
        """
        if not is_uint64(amount):
            raise LedgerError(ErrorCode.INVALID_PARAMS, f"invalid native amount: {amount!r}")
        balance = checked_add(self.balance_of(principal), amount)
        self._balances[principal] = balance
        return balance

    def transfer(self, amount: int, sender: str, recipient: str) -> None:
        """Перевод native units от sender к recipient.

        Raises:
            LedgerError: INVALID_PARAMS или INSUFFICIENT_BALANCE
        """
        if not is_uint64(amount) or amount == 0:
            raise LedgerError(ErrorCode.INVALID_PARAMS, f"invalid native amount: {amount!r}")
        if sender == recipient:
            raise LedgerError(ErrorCode.INVALID_PARAMS, "native transfer to self")

        sender_balance = self.balance_of(sender)
        if sender_balance < amount:
            raise LedgerError(
                ErrorCode.INSUFFICIENT_BALANCE,
                f"native balance {sender_balance} < {amount} for {sender}",
            )

        self._balances[sender] = checked_sub(sender_balance, amount)
        self._balances[recipient] = checked_add(self.balance_of(recipient), amount)
        logger.debug("Native transfer %d: %s -> %s", amount, sender, recipient)


class HostLedger:
    """In-process хост: state store, высота блока, native currency.

    Вызовы сериализованы: каждый выполняется до конца до начала следующего.
    """

    def __init__(self, block_height: int = 0):
        if not is_uint64(block_height):
            raise ValueError(f"block_height must be uint64, got {block_height!r}")
        self.store = StateStore()
        self.native = NativeCurrency(self.store)
        self._block_height = block_height

    @property
    def block_height(self) -> int:
        return self._block_height

    def advance_blocks(self, count: int = 1) -> int:
        """Продвижение высоты на count блоков.

        Returns:
            Новая высота
        """
        if count < 0:
            raise ValueError(f"block height is monotonic, cannot advance by {count}")
        self._block_height += count
        return self._block_height

    def context(self, sender: str) -> CallContext:
        """Конверт вызова от sender на текущей высоте."""
        return CallContext(sender=sender, block_height=self._block_height)
