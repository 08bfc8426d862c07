"""Clear events and the queue that buffers them between ticks.

:meth:`Board.place` reports which rows, columns and sections a placement
completed but leaves the cells occupied.  The caller pushes those events onto
a :class:`ClearQueue`; a single consumer drains it once per tick, awards
rewards while the completed lines are still visible and only then wipes the
cells.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Deque, Iterable, Iterator, List, Optional, Union


class ClearKind(str, Enum):
    ROW = "row"
    COLUMN = "column"
    SECTION = "section"


@dataclass(frozen=True)
class RowClear:
    """Row ``index`` became fully occupied."""

    index: int
    kind: ClassVar[ClearKind] = ClearKind.ROW


@dataclass(frozen=True)
class ColumnClear:
    """Column ``index`` became fully occupied."""

    index: int
    kind: ClassVar[ClearKind] = ClearKind.COLUMN


@dataclass(frozen=True)
class SectionClear:
    """Section ``index`` became fully occupied."""

    index: int
    used_special: bool = False
    kind: ClassVar[ClearKind] = ClearKind.SECTION


ClearEvent = Union[RowClear, ColumnClear, SectionClear]


class ClearQueue:
    """First-in first-out buffer of :data:`ClearEvent` values."""

    def __init__(self, events: Optional[Iterable[ClearEvent]] = None) -> None:
        self._events: Deque[ClearEvent] = deque(events or ())

    def push(self, event: ClearEvent) -> None:
        self._events.append(event)

    def extend(self, events: Iterable[ClearEvent]) -> None:
        """Append ``events`` keeping their order."""

        self._events.extend(events)

    def pop(self) -> ClearEvent:
        """Remove and return the oldest event.

        Raises:
            IndexError: If the queue is empty.
        """

        if not self._events:
            raise IndexError("pop from an empty clear queue")
        return self._events.popleft()

    def peek(self) -> Optional[ClearEvent]:
        return self._events[0] if self._events else None

    def drain(self) -> List[ClearEvent]:
        """Return every queued event in arrival order and empty the queue."""

        events = list(self._events)
        self._events.clear()
        return events

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)

    def __bool__(self) -> bool:
        return bool(self._events)

    def __iter__(self) -> Iterator[ClearEvent]:
        return iter(self._events)

    def __repr__(self) -> str:
        return f"ClearQueue({list(self._events)!r})"


__all__ = [
    "ClearKind",
    "RowClear",
    "ColumnClear",
    "SectionClear",
    "ClearEvent",
    "ClearQueue",
]
