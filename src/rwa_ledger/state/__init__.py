"""State — компоненты, владеющие таблицами ledger.

- AssetRegistry: активы и счётчик id
- BalanceLedger: балансы и атомарный transfer
- Marketplace: listings и settlement покупок
- ComplianceRegistry: compliance authority и одобрения
- EventLog: журнал событий
"""

from .asset_registry import AssetRegistry
from .balance_ledger import BalanceLedger
from .compliance_registry import ComplianceRegistry
from .event_log import EventLog
from .marketplace import Marketplace

__all__ = [
    "AssetRegistry",
    "BalanceLedger",
    "ComplianceRegistry",
    "EventLog",
    "Marketplace",
]
