"""Tests for the structured logger."""

import io

from tvrename.utils import LogLevel, logger


def test_format_kv_quotes_and_escapes():
    line = logger._format_kv({"file": 'a "b"\nc', "count": 2, "ok": True, "missing": None})
    assert line == 'file="a \\"b\\"\\nc" | count=2 | ok=true | missing=null'


def test_log_respects_level(capsys):
    logger.set_log_level(LogLevel.WARN)
    logger.log("match.found", LogLevel.INFO, episode="x")
    logger.log("match.none", LogLevel.WARN, episode="Show S01E01 Pilot")

    out = capsys.readouterr().out
    assert "match.found" not in out
    assert '[WARN] | match.none | episode="Show S01E01 Pilot"' in out


def test_log_file_mirror(capsys):
    handle = io.StringIO()
    logger.set_log_file(handle)
    logger.log("tvrename.start", LogLevel.INFO)
    logger.safe_print("- Show S01E01 Pilot")

    assert "[INFO] | tvrename.start" in handle.getvalue()
    assert handle.getvalue().endswith("- Show S01E01 Pilot\n")
    assert "- Show S01E01 Pilot" in capsys.readouterr().out
