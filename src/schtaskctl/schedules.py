from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class ScheduleDefinition:
    name: str
    max_modifier: int

    def __str__(self) -> str:
        return f"Option: Name={self.name} | MaximumValue={self.max_modifier}"


class ScheduleCatalog:
    """Immutable table of the schedule kinds the scheduler tool accepts.

    Lookups are case-insensitive. Building a catalog with duplicate names
    (ignoring case) or a negative maximum raises ``ValueError``.
    """

    def __init__(self, definitions: Iterable[ScheduleDefinition]) -> None:
        defs: Tuple[ScheduleDefinition, ...] = tuple(definitions)
        seen = set()
        for d in defs:
            key = d.name.lower()
            if key in seen:
                raise ValueError(f"Duplicate schedule kind: {d.name}")
            if d.max_modifier < 0:
                raise ValueError(f"Negative maximum modifier for {d.name}: {d.max_modifier}")
            seen.add(key)
        self._defs = defs
        self._by_key = {d.name.lower(): d for d in defs}

    def lookup(self, kind: str) -> Optional[ScheduleDefinition]:
        return self._by_key.get(kind.strip().lower())

    def names(self) -> List[str]:
        return [d.name for d in self._defs]

    def __iter__(self) -> Iterator[ScheduleDefinition]:
        return iter(self._defs)

    def __len__(self) -> int:
        return len(self._defs)

    def __contains__(self, kind: object) -> bool:
        return isinstance(kind, str) and self.lookup(kind) is not None


DEFAULT_CATALOG = ScheduleCatalog(
    [
        ScheduleDefinition("MINUTE", 1439),
        ScheduleDefinition("HOURLY", 23),
        ScheduleDefinition("DAILY", 365),
        ScheduleDefinition("WEEKLY", 52),
        ScheduleDefinition("MONTHLY", 12),
        ScheduleDefinition("ONCE", 0),
        ScheduleDefinition("ONLOGON", 0),
        ScheduleDefinition("ONIDLE", 0),
        ScheduleDefinition("ONEVENT", 0),
    ]
)
