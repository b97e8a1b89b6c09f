"""Host — окружение исполнения вызовов ledger.

- StateStore: таблицы и all-or-nothing транзакции
- HostLedger: высота блока, конверты вызовов, native currency
"""

from .host import CallContext, HostLedger, NativeCurrency
from .store import StateStore

__all__ = [
    "StateStore",
    "CallContext",
    "HostLedger",
    "NativeCurrency",
]
