"""StateStore — key-value таблицы ledger с транзакционной областью.

Все таблицы (контрактные, native balances, журнал событий) живут в одном
StateStore, поэтому один transaction() покрывает весь вызов:
- изменения применяются на месте
- каждая таблица при первой записи ключа внутри области запоминает его
  прежнее значение в undo-журнале области
- при любом исключении журнал проигрывается в обратном порядке
- исключение пробрасывается дальше без изменений

Стоимость отката пропорциональна числу записанных ключей, а не размеру
ledger. Значения в таблицах immutable (frozen модели, int), поэтому
журналу достаточно ссылки на прежнее значение.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Hashable, Iterator, List, Set, Tuple


logger = logging.getLogger(__name__)

_MISSING = object()

# (таблица, ключ, прежнее значение или _MISSING)
UndoEntry = Tuple["Table", Hashable, Any]


class Table(dict):
    """dict, который сообщает StateStore о каждой записи ключа."""

    def __init__(self, store: "StateStore", name: str):
        super().__init__()
        self._store = store
        self.name = name

    def _touch(self, key: Hashable) -> None:
        self._store._record(self, key)

    def __setitem__(self, key, value):
        self._touch(key)
        super().__setitem__(key, value)

    def __delitem__(self, key):
        self._touch(key)
        super().__delitem__(key)

    def pop(self, key, *default):
        self._touch(key)
        return super().pop(key, *default)

    def popitem(self):
        key, value = super().popitem()
        # Ключ уже удалён: восстанавливаем вручную
        self._store._record_removed(self, key, value)
        return key, value

    def setdefault(self, key, default=None):
        if key not in self:
            self._touch(key)
        return super().setdefault(key, default)

    def update(self, *args, **kwargs):
        for key, value in dict(*args, **kwargs).items():
            self[key] = value

    def clear(self):
        for key in list(self):
            self._touch(key)
        super().clear()

    def __ior__(self, other):
        self.update(other)
        return self


class _Frame:
    """Undo-журнал одной транзакционной области."""

    def __init__(self):
        self.entries: List[UndoEntry] = []
        self.seen: Set[Tuple[int, Hashable]] = set()

    def record(self, table: Table, key: Hashable, previous: Any) -> None:
        marker = (id(table), key)
        if marker in self.seen:
            return
        self.seen.add(marker)
        self.entries.append((table, key, previous))


class StateStore:
    """Набор именованных таблиц с all-or-nothing транзакциями.

    Таблица — dict (подкласс Table); компоненты держат ссылку на неё, поэтому
    откат восстанавливает содержимое на месте, не подменяя объекты.
    """

    def __init__(self):
        self._tables: Dict[str, Table] = {}
        self._frames: List[_Frame] = []

    def table(self, name: str) -> Table:
        """Таблица по имени (создаётся пустой при первом обращении)."""
        rows = self._tables.get(name)
        if rows is None:
            rows = self._tables[name] = Table(self, name)
        return rows

    @property
    def in_transaction(self) -> bool:
        return bool(self._frames)

    @contextmanager
    def transaction(self) -> Iterator["StateStore"]:
        """Транзакционная область: откат всех изменений при любом выходе с исключением.

        Вложенные области допустимы: внутренняя откатывает только свои изменения,
        если её исключение перехвачено внутри внешней. При успехе журнал
        внутренней области сливается во внешний.
        """
        frame = _Frame()
        self._frames.append(frame)
        try:
            yield self
        except BaseException as exc:
            self._frames.pop()
            self._undo(frame)
            logger.debug(
                "Transaction rolled back (depth=%d, keys=%d): %s",
                len(self._frames) + 1, len(frame.entries), exc,
            )
            raise
        else:
            self._frames.pop()
            if self._frames:
                outer = self._frames[-1]
                for table, key, previous in frame.entries:
                    outer.record(table, key, previous)

    def _record(self, table: Table, key: Hashable) -> None:
        if self._frames:
            self._frames[-1].record(table, key, dict.get(table, key, _MISSING))

    def _record_removed(self, table: Table, key: Hashable, value: Any) -> None:
        if self._frames:
            self._frames[-1].record(table, key, value)

    @staticmethod
    def _undo(frame: _Frame) -> None:
        for table, key, previous in reversed(frame.entries):
            if previous is _MISSING:
                dict.pop(table, key, None)
            else:
                dict.__setitem__(table, key, previous)
