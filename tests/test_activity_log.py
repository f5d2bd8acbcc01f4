"""Tests for the activity log file."""

import activity_log


def test_log_path_comes_from_environment(isolated_log):
    assert activity_log.get_log_path() == isolated_log


def test_log_path_default(monkeypatch):
    monkeypatch.delenv("ITEMTREE_LOG_PATH", raising=False)
    assert str(activity_log.get_log_path()) == activity_log.DEFAULT_LOG_PATH


def test_log_event_appends_tab_separated_lines(isolated_log):
    activity_log.log_event("ok", "parse", "11 items")
    activity_log.log_event("error", "sort")
    lines = isolated_log.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[0].split("\t")[1:] == ["OK", "parse", "11 items"]
    assert lines[1].split("\t")[1:] == ["ERROR", "sort"]


def test_log_event_keeps_detail_on_one_line(isolated_log):
    activity_log.log_event("ok", "parse", "  a\nb  ")
    assert isolated_log.read_text(encoding="utf-8").endswith("\tparse\ta b\n")


def test_reset_log_truncates(isolated_log):
    activity_log.log_event("ok", "parse")
    activity_log.reset_log()
    assert isolated_log.read_text(encoding="utf-8") == ""
