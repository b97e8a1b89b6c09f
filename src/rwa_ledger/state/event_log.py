"""EventLog — append-only журнал событий ledger."""

from typing import Any, List

from rwa_ledger.core.domain.event import EventType, LedgerEvent
from rwa_ledger.host.host import CallContext
from rwa_ledger.host.store import StateStore


class EventLog:
    """Журнал событий в таблице StateStore (откатывается вместе с вызовом)."""

    TABLE = "events"

    def __init__(self, store: StateStore):
        self._events = store.table(self.TABLE)

    def append(self, ctx: CallContext, event: EventType, **payload: Any) -> LedgerEvent:
        record = LedgerEvent(
            sequence=len(self._events),
            event=event,
            block_height=ctx.block_height,
            sender=ctx.sender,
            payload=payload,
        )
        self._events[record.sequence] = record
        return record

    def events(self) -> List[LedgerEvent]:
        return [self._events[seq] for seq in sorted(self._events)]

    def __len__(self) -> int:
        return len(self._events)
