"""Line scanner that turns a day article into a :class:`Report`."""

from __future__ import annotations

import logging
import re
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from .denominations import classify, split_on_header
from .normalization import (
    split_sentences,
    strip_bullets,
    strip_header_remainder,
    trim_entry,
    trim_omen,
)
from .report import EmptyInputError, Report

LOGGER = logging.getLogger(__name__)

HOLIDAYS_HEADER = "Праздники и памятные дни"
HOLIDAY_TITLES = frozenset({HOLIDAYS_HEADER, "Праздники"})
IGNORED_TITLES = frozenset({"События", "Родились", "Скончались"})
OMEN_TITLES = frozenset(
    {
        "Приметы",
        "Народный календарь",
        "Народный календарь и приметы",
        "Народный календарь, приметы",
        "Народный календарь, приметы и фольклор Руси",
    }
)

INT_HOLIDAYS_SUBHEADER = "Международные"
LOC_HOLIDAYS_SUBHEADER = "Национальные"
PROF_HOLIDAYS_SUBHEADER = "Профессиональные"
RLG_HOLIDAYS_SUBHEADER = "Религиозные"
NAME_DAYS_SUBHEADER = "Именины"

SEE_ALSO_MARKER = "См. также:"
CHRISTIAN_LABEL = "Христианские"
ALSO_MARKER = "также:"
DERIVATIVES_MARKER = "и производные:"

MEMORIAL_PATTERN = re.compile(r"^[Пп]амять ")
APOSTLE_PATTERN = re.compile(r"память апостол")


class Mode(Enum):
    NONE = "none"
    HOLIDAYS = "holidays"
    NAME_DAYS = "name_days"
    OMENS = "omens"


def _header_text(line: str) -> str:
    return line.strip("=").strip()


class DayArticleParser:
    """Single-use parser; build a new one for every article."""

    def __init__(self) -> None:
        self.report = Report()
        self.header = ""
        self.subheader = ""
        self.target: Optional[List[str]] = None
        self.mode = Mode.NONE
        self._handlers: Dict[Mode, Callable[[str], None]] = {
            Mode.HOLIDAYS: self.parse_holidays,
            Mode.NAME_DAYS: self.parse_name_days,
            Mode.OMENS: self.parse_omens,
        }

    def parse(self, text: str) -> Report:
        if not text:
            raise EmptyInputError("empty report")

        for raw_line in text.split("\n"):
            line = raw_line.rstrip("\r")
            if line.startswith("== ") and line.endswith(" =="):
                self._enter_section(_header_text(line))
            elif line.startswith("=== ") and line.endswith(" ==="):
                self._set_subheader(_header_text(line))
            elif line.startswith("==== ") and line.endswith(" ===="):
                self._dispatch(_header_text(line))
            elif not line.strip():
                continue
            else:
                self._dispatch(line.strip())
        return self.report

    # --- section state -------------------------------------------------

    def _enter_section(self, header: str) -> None:
        if header in HOLIDAY_TITLES:
            self._set_header(header, Mode.HOLIDAYS)
        elif header in IGNORED_TITLES:
            self._set_header("", Mode.NONE)
        elif header in OMEN_TITLES:
            self._set_header(header, Mode.OMENS)
        else:
            self._set_header("", Mode.NONE)
            LOGGER.warning("Неизвестный раздел: %s", header)

    def _set_header(self, header: str, mode: Mode) -> None:
        self.header = header
        self.subheader = ""
        self.target = None
        self.mode = mode

    def _set_subheader(self, subheader: str) -> None:
        self.subheader = subheader.strip()
        self.target = None
        # Именины действуют только до следующего подраздела
        if self.mode is Mode.NAME_DAYS:
            self.mode = Mode.HOLIDAYS

    def _dispatch(self, line: str) -> None:
        handler = self._handlers.get(self.mode)
        if handler is None:
            LOGGER.debug("Строка вне разбираемых разделов: %s", line)
            return
        handler(line)

    # --- holidays ------------------------------------------------------

    def parse_holidays(self, line: str) -> None:
        line = trim_entry(line)
        if line.startswith(SEE_ALSO_MARKER):
            return

        if not self.subheader:
            if line:
                self.report.holidays_int.append(line)
            return

        if self.subheader != RLG_HOLIDAYS_SUBHEADER:
            if self.target is None:
                if self.subheader == INT_HOLIDAYS_SUBHEADER:
                    self.target = self.report.holidays_int
                elif self.subheader == LOC_HOLIDAYS_SUBHEADER:
                    self.target = self.report.holidays_loc
                elif self.subheader == PROF_HOLIDAYS_SUBHEADER:
                    self.target = self.report.holidays_prof
                elif self.subheader == NAME_DAYS_SUBHEADER:
                    self.mode = Mode.NAME_DAYS
                    self.parse_name_days(line)
                    return
                else:
                    LOGGER.debug("Пропущен подраздел %s", self.subheader)
                    self.subheader = ""
                    return
        else:
            if line == CHRISTIAN_LABEL:
                return
            if self._split_religious(line):
                return
            if self.target is None:
                self.target = self.report.add_religious_entry().descriptions
            if MEMORIAL_PATTERN.match(line) and not APOSTLE_PATTERN.search(line):
                return

        if self.target is None:
            LOGGER.warning("Не удалось разобрать строку: %s", line)
            return
        if not line:
            return
        self.target.append(line)

    def _split_religious(self, line: str) -> bool:
        """Handle a denomination header found in ``line``.

        Text before the header belongs to the group that was open so far, the
        header itself opens a new entry (unless it is only a note) and the rest
        of the line is parsed again under the new target. Returns ``False`` when
        no header is present and the line must be handled by the caller.
        """

        found = classify(line)
        if found is None:
            return False

        rule, match = found
        before, after = split_on_header(line, match)
        if match.start() > 0:
            self.parse_holidays(before)
        if rule.opens_entry:
            self.target = self.report.add_religious_entry(rule.label).descriptions

        after = strip_header_remainder(after)
        if after:
            self.parse_holidays(after)
        return True

    # --- name days -----------------------------------------------------

    def parse_name_days(self, line: str) -> None:
        line = trim_entry(line)
        if ALSO_MARKER in line:
            for part in line.split(ALSO_MARKER, 1):
                part = part.strip()
                if part:
                    self.report.name_days.append(part)
            return

        if DERIVATIVES_MARKER in line:
            line = line.split(DERIVATIVES_MARKER, 1)[0]
        line = line.strip()
        if line:
            self.report.name_days.append(line)

    # --- omens ---------------------------------------------------------

    def parse_omens(self, line: str) -> None:
        if self.target is None:
            self.target = self.report.omens

        if not self.target:
            self.target.extend(split_sentences(line))
            return

        line = trim_omen(strip_bullets(line))
        if line:
            self.target.append(line)


def parse_article(text: str) -> Report:
    """Parse the full wiki text of a day article."""

    return DayArticleParser().parse(text)


def parse_file(path: Union[str, Path], encoding: str = "utf-8") -> Report:
    return parse_article(Path(path).read_text(encoding=encoding))
