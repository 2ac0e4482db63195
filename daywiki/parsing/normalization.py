"""Line trimming helpers shared by the extractors."""

from __future__ import annotations

from typing import List

# Символы, отрезаемые по краям строк праздников и именин
ENTRY_TRIM_CHARS = ".;— "
# Символы, отрезаемые по краям примет
OMEN_TRIM_CHARS = "…,. "

BULLET_MARKER = "* "


def trim_entry(line: str) -> str:
    return line.strip(ENTRY_TRIM_CHARS)


def trim_omen(line: str) -> str:
    return line.strip(OMEN_TRIM_CHARS)


def strip_header_remainder(text: str) -> str:
    """Drop the colon and spaces left behind after a group header is cut off."""

    return text.lstrip(": \t")


def strip_bullets(line: str) -> str:
    return line.replace(BULLET_MARKER, "")


def split_sentences(line: str) -> List[str]:
    """Split an omen block on periods, dropping fragments that trim to nothing."""

    fragments: List[str] = []
    for chunk in line.split("."):
        chunk = trim_omen(chunk)
        if chunk:
            fragments.append(chunk)
    return fragments
