from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Iterable, Optional

from daywiki.parsing import EmptyInputError, Report, parse_article

LOGGER = logging.getLogger(__name__)

DEFAULT_ENCODING = os.getenv("DAYWIKI_ENCODING", "utf-8")


def _read_source(path: Optional[Path], encoding: str) -> str:
    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding=encoding)


def _export_report(path: Path, report: Report) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(report.to_dict(), ensure_ascii=False, indent=2),
        encoding="utf-8",
    )


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Разбор вики-статьи о календарном дне.",
    )
    parser.add_argument(
        "source",
        nargs="?",
        type=Path,
        help="Файл со статьёй; без аргумента текст читается из stdin",
    )
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help="Кодировка входного файла (default: %(default)s)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Сохранить результат в JSON-файл вместо вывода на экран",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Включить подробный лог.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Iterable[str]] = None) -> None:
    args = parse_args(argv)
    level = logging.INFO if not args.verbose else logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")
    logging.getLogger("daywiki").setLevel(level)

    text = _read_source(args.source, args.encoding)
    try:
        report = parse_article(text)
    except EmptyInputError:
        print("Пустая статья, разбирать нечего", file=sys.stderr)
        raise SystemExit(1)

    if report.is_empty():
        LOGGER.info("В статье не найдено ни праздников, ни примет")

    if args.output:
        _export_report(args.output, report)
        print(f"Результат сохранён в {args.output}")
        return

    print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
