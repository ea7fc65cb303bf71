from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List

from ..engines.interfaces import CalendarEngine
from .errors import UnknownCalendarError

@dataclass
class CalendarRegistry:
    _calendars: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._calendars:
            raise UnknownCalendarError(f"Unknown calendar '{name}'. Available: {sorted(self._calendars)}")
        return self._calendars[name]

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def register(self, name: str, calendar: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calendars):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._calendars[name] = calendar
