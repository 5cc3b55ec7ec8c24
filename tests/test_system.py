import os
import pwd
import re
import socket
import sys
import time

from barstatus.components import system


def test_cat_returns_first_line(tmp_path):
    path = tmp_path / "file"
    path.write_text("first\nsecond\n")
    assert system.cat(str(path)) == "first"


def test_cat_without_trailing_newline(tmp_path):
    path = tmp_path / "file"
    path.write_text("only")
    assert system.cat(str(path)) == "only"


def test_cat_empty_file(tmp_path):
    path = tmp_path / "file"
    path.write_text("")
    assert system.cat(str(path)) is None


def test_cat_blank_first_line(tmp_path):
    path = tmp_path / "file"
    path.write_text("\nmore\n")
    assert system.cat(str(path)) is None


def test_cat_missing_file(tmp_path, capsys):
    missing = tmp_path / "nope"
    assert system.cat(str(missing)) is None
    assert "fopen" in capsys.readouterr().err


def test_datetime_year():
    result = system.datetime("%Y")
    assert result is not None
    assert int(result) in {time.localtime().tm_year, time.localtime().tm_year - 1}


def test_datetime_literal_text():
    assert system.datetime("plain") == "plain"


def test_datetime_empty_result_is_none():
    assert system.datetime("") is None


def test_datetime_too_long_is_none():
    assert system.datetime("x" * 2000) is None


def test_hostname_matches_socket():
    assert system.hostname() == socket.gethostname()


def test_kernel_release_matches_uname():
    assert system.kernel_release() == os.uname().release


def test_load_avg_format():
    result = system.load_avg()
    parts = result.split(" ")
    assert len(parts) == 3
    assert all(float(part) >= 0 for part in parts)
    assert [len(part.split(".")[1]) for part in parts] == [2, 2, 2]


def test_uptime_format():
    result = system.uptime()
    match = re.fullmatch(r"(\d+)h (\d+)m", result)
    assert match
    assert int(match.group(2)) < 60


def test_gid_and_uid():
    assert system.gid() == str(os.getgid())
    assert system.uid() == str(os.geteuid())


def test_username_matches_passwd():
    assert system.username() == pwd.getpwuid(os.geteuid()).pw_name


def test_entropy_reads_file(tmp_path, monkeypatch):
    path = tmp_path / "entropy_avail"
    path.write_text("256\n")
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(system, "ENTROPY_AVAIL", str(path))
    assert system.entropy() == "256"


def test_entropy_missing_file(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(system, "ENTROPY_AVAIL", str(tmp_path / "nope"))
    assert system.entropy() is None


def test_entropy_on_bsd_is_infinite(monkeypatch):
    monkeypatch.setattr(sys, "platform", "openbsd7")
    assert system.entropy() == "\u221e"


def test_run_command_first_line():
    assert system.run_command("printf 'a\\nb\\n'") == "a"


def test_run_command_echo():
    assert system.run_command("echo foo") == "foo"


def test_run_command_no_output():
    assert system.run_command("true") is None