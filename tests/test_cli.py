import logging
from pathlib import Path

import pytest

from owl import config
from owl.__main__ import main


@pytest.fixture
def script(tmp_path):
    def _write(text):
        path = tmp_path / "script.owl"
        path.write_text(text, encoding="utf-8")
        return path
    return _write


def test_prints_rendered_result(script, capsys):
    path = script('(echo "hi") (list 1 2 3)')
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "hi\n(1 2 3)\n"


def test_default_script_path_from_env(script, monkeypatch, capsys):
    path = script("(* 6 7)")
    monkeypatch.setenv("OWL_SCRIPT_PATH", str(path))
    assert main([]) == 0
    assert capsys.readouterr().out == "42\n"


def test_missing_script_exits_abnormally(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert main([str(tmp_path / "nope.owl")]) == 2
    assert "Cannot read" in caplog.text


def test_evaluation_error_exits_with_1(script, caplog, capsys):
    path = script('(+ 1 "a")')
    with caplog.at_level(logging.ERROR):
        assert main([str(path)]) == 1
    assert "OwlTypeError" in caplog.text
    assert capsys.readouterr().out == ""


def test_parse_error_exits_with_1(script, caplog):
    path = script("(+ 1")
    with caplog.at_level(logging.ERROR):
        assert main([str(path)]) == 1
    assert "OwlSyntaxError" in caplog.text


def test_config_defaults(monkeypatch):
    monkeypatch.delenv("OWL_SCRIPT_PATH", raising=False)
    monkeypatch.delenv("OWL_LOG_LEVEL", raising=False)
    assert config.get_script_path() == Path("scripts") / "repl.owl"
    assert config.get_log_level() == logging.WARNING


def test_config_log_level(monkeypatch):
    monkeypatch.setenv("OWL_LOG_LEVEL", "debug")
    assert config.get_log_level() == logging.DEBUG
    assert config.get_log_level("error") == logging.ERROR
    assert config.get_log_level("bogus") == logging.WARNING


def test_deeply_nested_script_exits_with_1(script, caplog):
    path = script("(list " * 5000 + ")" * 5000)
    with caplog.at_level(logging.ERROR):
        assert main([str(path)]) == 1
    assert "OwlSyntaxError" in caplog.text


def test_undecodable_script_exits_abnormally(tmp_path, caplog):
    path = tmp_path / "binary.owl"
    path.write_bytes(b'(echo "\xff\xfe")')
    with caplog.at_level(logging.ERROR):
        assert main([str(path)]) == 2
    assert "Cannot read" in caplog.text
