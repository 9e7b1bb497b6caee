# tests/test_error_log.py

import os
import re

from src.infrastructure.error_log import FileErrorLog


def test_log_appends_timestamped_lines(tmp_path):
    log_path = tmp_path / "sha256-check.log"
    error_log = FileErrorLog(str(log_path))

    error_log.log("cant find file in /home/gateway/pf")
    error_log.log("second")

    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert re.fullmatch(r"\d{2}:\d{2}:\d{2}: cant find file in /home/gateway/pf", lines[0])
    assert lines[1].endswith(": second")


def test_log_keeps_existing_content(tmp_path):
    log_path = tmp_path / "sha256-check.log"
    log_path.write_text("12:00:00: earlier\n", encoding="utf-8")

    FileErrorLog(str(log_path)).log("later")

    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "12:00:00: earlier"
    assert lines[1].endswith(": later")


def test_log_failure_is_swallowed(tmp_path):
    error_log = FileErrorLog(str(tmp_path / "missing-dir" / "sha256-check.log"))

    error_log.log("nowhere to go")

    assert not (tmp_path / "missing-dir").exists()


def test_log_escapes_undecodable_file_names(tmp_path):
    log_path = tmp_path / "sha256-check.log"
    name = os.fsdecode(b"/home/gateway/pf/pf.conf.\xff")

    FileErrorLog(str(log_path)).log(f"cant hash {name}: Permission denied")

    line = log_path.read_text(encoding="utf-8").splitlines()[0]
    assert line.endswith(": cant hash /home/gateway/pf/pf.conf.\\udcff: Permission denied")
