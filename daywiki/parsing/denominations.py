"""Ordered rules that recognise religious group headers inside holiday lines."""

from __future__ import annotations

import re
from dataclasses import dataclass
from re import Match, Pattern
from typing import Optional, Tuple

ORTHODOX_LABEL = "правосл."
CATHOLIC_LABEL = "катол."
BAHAI_LABEL = "бахаи"


@dataclass(frozen=True)
class DenominationRule:
    name: str
    pattern: Pattern[str]
    label: str = ""
    opens_entry: bool = True


DENOMINATION_RULES: Tuple[DenominationRule, ...] = (
    # Примечания о високосных годах и перекрёстные ссылки: группу не открывают
    DenominationRule(
        name="note",
        pattern=re.compile(
            r"Примечание: указано для невисокосных лет, в високосные годы список иной, "
            r"см\. \d+ .*?\."
            r"|\(.*, см\. \d+ .*?\)"
        ),
        opens_entry=False,
    ),
    DenominationRule(
        name="orthodox",
        pattern=re.compile(
            r"Православ(?:ие|ные)(?: (?:\(|.*)Русская Православная Церковь(?:\)|.*))?"
            r"|В .*[Пп]равосл.* церкв(?:и|ях):?"
            r"|(?:\(|.*)Русская Православная Церковь(?:\)|.*)"
        ),
        label=ORTHODOX_LABEL,
    ),
    DenominationRule(
        name="catholic",
        pattern=re.compile(r"Католи(?:цизм|ческие|чество)|В [Кк]атолич.* церкв(?:и|ях)"),
        label=CATHOLIC_LABEL,
    ),
    DenominationRule(
        name="others",
        pattern=re.compile(
            r"Зороастризм"
            r"|Другие конфессии"
            r"|В католичестве и протестантстве"
            r"|:?Славянские праздники:?"
            r"|Ислам(?:ские|.?)"
            r"|В Древневосточных церквях"
            r"|Буддизм"
        ),
    ),
    DenominationRule(
        name="bahai",
        pattern=re.compile(r"Бахаи"),
        label=BAHAI_LABEL,
    ),
)


def classify(line: str) -> Optional[Tuple[DenominationRule, Match[str]]]:
    """Return the first rule whose header occurs in ``line`` with its match."""

    for rule in DENOMINATION_RULES:
        match = rule.pattern.search(line)
        if match:
            return rule, match
    return None


def split_on_header(line: str, match: Match[str]) -> Tuple[str, str]:
    """Cut the matched header out of ``line``; return text before and after it."""

    return line[: match.start()], line[match.end() :]
