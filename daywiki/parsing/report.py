"""Data structures produced by the day article parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


class EmptyInputError(ValueError):
    """Raised when the article text is empty."""


@dataclass(slots=True)
class ReligiousHolidayEntry:
    group: str = ""
    descriptions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"group": self.group, "descriptions": list(self.descriptions)}


@dataclass(slots=True)
class Report:
    """Everything extracted from a single day article, in source order."""

    holidays_int: List[str] = field(default_factory=list)
    holidays_loc: List[str] = field(default_factory=list)
    holidays_prof: List[str] = field(default_factory=list)
    holidays_rlg: List[ReligiousHolidayEntry] = field(default_factory=list)
    name_days: List[str] = field(default_factory=list)
    omens: List[str] = field(default_factory=list)

    def add_religious_entry(self, group: str = "") -> ReligiousHolidayEntry:
        entry = ReligiousHolidayEntry(group=group)
        self.holidays_rlg.append(entry)
        return entry

    def is_empty(self) -> bool:
        return not any(
            (
                self.holidays_int,
                self.holidays_loc,
                self.holidays_prof,
                self.holidays_rlg,
                self.name_days,
                self.omens,
            )
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "holidays_int": list(self.holidays_int),
            "holidays_loc": list(self.holidays_loc),
            "holidays_prof": list(self.holidays_prof),
            "holidays_rlg": [entry.to_dict() for entry in self.holidays_rlg],
            "name_days": list(self.name_days),
            "omens": list(self.omens),
        }
