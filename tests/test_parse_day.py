import io
import json
import logging
import sys

import pytest

from daywiki.tools import parse_day
from daywiki.tools.parse_day import main


def test_prints_report(tmp_path, capsys):
    source = tmp_path / "day.txt"
    source.write_text("== Праздники ==\nДень А.\n", encoding="utf-8")
    main([str(source)])
    data = json.loads(capsys.readouterr().out)
    assert data["holidays_int"] == ["День А"]


def test_saves_report(tmp_path):
    source = tmp_path / "day.txt"
    source.write_text("== Приметы ==\nРоса.\n", encoding="utf-8")
    output = tmp_path / "out" / "report.json"
    main([str(source), "--output", str(output)])
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["omens"] == ["Роса"]


def test_empty_article_exits(tmp_path):
    source = tmp_path / "empty.txt"
    source.write_text("", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main([str(source)])
    assert exc.value.code == 1


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("== Приметы ==\nРоса. Туман.\n"))
    main([])
    data = json.loads(capsys.readouterr().out)
    assert data["omens"] == ["Роса", "Туман"]


def test_encoding_flag(tmp_path, capsys):
    source = tmp_path / "day.txt"
    source.write_bytes("== Праздники ==\nДень флага.\n".encode("cp1251"))
    main([str(source), "--encoding", "cp1251"])
    data = json.loads(capsys.readouterr().out)
    assert data["holidays_int"] == ["День флага"]


def test_default_encoding_from_environment(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(parse_day, "DEFAULT_ENCODING", "cp1251")
    source = tmp_path / "day.txt"
    source.write_bytes("== Праздники ==\nДень флага.\n".encode("cp1251"))
    main([str(source)])
    data = json.loads(capsys.readouterr().out)
    assert data["holidays_int"] == ["День флага"]


def test_verbose_logs_dropped_lines(tmp_path, capsys, caplog):
    source = tmp_path / "day.txt"
    source.write_text("Вступление\n== Праздники ==\nДень\n", encoding="utf-8")
    try:
        main([str(source), "--verbose"])
    finally:
        logging.getLogger("daywiki").setLevel(logging.NOTSET)
    capsys.readouterr()
    assert "Вступление" in caplog.text
    assert any(record.levelno == logging.DEBUG for record in caplog.records)
