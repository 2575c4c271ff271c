import re

import pytest

from visol.basic_logger import (
    CRITICAL_COLOR,
    ERROR_COLOR,
    INFO_COLOR,
    RESET_COLOR,
    BasicLogger,
    LogLevel,
)

LINE_RE = re.compile(
    r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] \[(?P<loc>.+)\] \[(?P<level>[A-Z]+)\] (?P<msg>.*)$"
)

ALL_LEVELS = [LogLevel.INFO, LogLevel.WARNING, LogLevel.ERROR, LogLevel.CRITICAL]


def read_lines(path):
    return path.read_text(encoding="utf-8").splitlines()


def test_line_format_with_explicit_location(tmp_path):
    path = tmp_path / "app.log"
    with BasicLogger(str(path), show_console=False) as logger:
        logger.info("Application started", "main.py", "run", 12)
    (line,) = read_lines(path)
    match = LINE_RE.match(line)
    assert match is not None
    assert match["loc"] == "main.py:12 [run]"
    assert match["level"] == "INFO"
    assert match["msg"] == "Application started"


def test_default_location_is_caller(tmp_path):
    path = tmp_path / "app.log"
    with BasicLogger(str(path), show_console=False) as logger:
        logger.warning("here")
        logger.log(LogLevel.ERROR, "there")
    lines = read_lines(path)
    assert len(lines) == 2
    for line in lines:
        loc = LINE_RE.match(line)["loc"]
        assert "test_basic_logger.py" in loc
        assert loc.endswith("[test_default_location_is_caller]")


def test_minimum_level_filters(tmp_path):
    path = tmp_path / "app.log"
    with BasicLogger(str(path), show_console=False) as logger:
        logger.min_level = LogLevel.WARNING
        logger.info("This won't be logged due to minimum level")
        logger.warning("This will be logged")
        logger.critical("Null pointer access attempted")
    levels = [LINE_RE.match(line)["level"] for line in read_lines(path)]
    assert levels == ["WARNING", "CRITICAL"]


def test_appends_to_existing_file(tmp_path):
    path = tmp_path / "app.log"
    path.write_text("old\n", encoding="utf-8")
    with BasicLogger(str(path), show_console=False) as logger:
        logger.info("new")
    lines = read_lines(path)
    assert lines[0] == "old"
    assert LINE_RE.match(lines[1])["msg"] == "new"


def test_console_streams_and_colors(tmp_path, capsys):
    with BasicLogger(str(tmp_path / "app.log")) as logger:
        logger.info("fine")
        logger.error("Division by zero attempted")
        logger.critical("boom")
    captured = capsys.readouterr()
    assert captured.out.startswith(INFO_COLOR)
    assert captured.out.rstrip("\n").endswith("fine" + RESET_COLOR)
    err_lines = captured.err.splitlines()
    assert err_lines[0].startswith(ERROR_COLOR)
    assert err_lines[1].startswith(CRITICAL_COLOR)


def test_console_disabled(tmp_path, capsys):
    with BasicLogger(str(tmp_path / "app.log"), show_console=False) as logger:
        logger.error("quiet")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_changing_file_name(tmp_path):
    first = tmp_path / "first.log"
    second = tmp_path / "second.log"
    with BasicLogger(str(first), show_console=False) as logger:
        logger.info("one")
        logger.file_name = str(second)
        logger.info("two")
        assert logger.file_name == str(second)
    assert [LINE_RE.match(x)["msg"] for x in read_lines(first)] == ["one"]
    assert [LINE_RE.match(x)["msg"] for x in read_lines(second)] == ["two"]


def test_unopenable_file_reports_and_keeps_console(tmp_path, capsys):
    logger = BasicLogger(str(tmp_path), show_console=True)
    logger.info("still shown")
    logger.close()
    captured = capsys.readouterr()
    assert f"Failed to open log file: {tmp_path}" in captured.err
    assert "still shown" in captured.out


def test_close_stops_file_writes(tmp_path):
    path = tmp_path / "app.log"
    logger = BasicLogger(str(path), show_console=False)
    logger.info("before")
    logger.close()
    logger.info("after")
    logger.flush()
    assert [LINE_RE.match(x)["msg"] for x in read_lines(path)] == ["before"]


@pytest.mark.parametrize(
    "level,name",
    [
        (LogLevel.INFO, "INFO"),
        (LogLevel.WARNING, "WARNING"),
        (LogLevel.ERROR, "ERROR"),
        (LogLevel.CRITICAL, "CRITICAL"),
    ],
)
def test_level_names_in_output(tmp_path, level, name):
    path = tmp_path / "app.log"
    with BasicLogger(str(path), show_console=False) as logger:
        logger.log(level, "msg", "f.py", "fn", 1)
    assert LINE_RE.match(read_lines(path)[0])["level"] == name


@pytest.mark.parametrize(
    "minimum,expected",
    [
        (LogLevel.INFO, ["INFO", "WARNING", "ERROR", "CRITICAL"]),
        (LogLevel.WARNING, ["WARNING", "ERROR", "CRITICAL"]),
        (LogLevel.ERROR, ["ERROR", "CRITICAL"]),
        (LogLevel.CRITICAL, ["CRITICAL"]),
    ],
)
def test_levels_are_ordered(tmp_path, minimum, expected):
    path = tmp_path / "app.log"
    with BasicLogger(str(path), show_console=False, min_level=minimum) as logger:
        for level in ALL_LEVELS:
            logger.log(level, "msg", "f.py", "fn", 1)
    assert [LINE_RE.match(x)["level"] for x in read_lines(path)] == expected