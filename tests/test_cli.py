"""Tests for the command line interface."""

import logging

import pytest

from running_total import cli
from running_total.tui import TerminalUnavailableError


class StubApp:
    """Stands in for RunningTotalApp and records how it was built."""

    instances = []
    error = None

    def __init__(self, terminal, settings):
        self.terminal = terminal
        self.settings = settings
        StubApp.instances.append(self)

    def run(self):
        if StubApp.error is not None:
            raise StubApp.error


@pytest.fixture
def stub_app(monkeypatch):
    StubApp.instances = []
    StubApp.error = None
    monkeypatch.setattr(cli, "RunningTotalApp", StubApp)
    monkeypatch.setattr(cli, "BlessedTerminal", lambda: object())
    yield StubApp
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
        handler.close()


class TestCLI:
    """Test CLIInterface."""

    def test_normal_exit(self, stub_app):
        assert cli.main([]) == 0
        assert len(stub_app.instances) == 1

    def test_terminal_failure_exit_code(self, stub_app, capsys):
        stub_app.error = TerminalUnavailableError("stdout is not a terminal")
        assert cli.main([]) == 1
        assert "stdout is not a terminal" in capsys.readouterr().err

    def test_config_is_loaded(self, stub_app, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("prompt: '= '\n", encoding="utf-8")
        cli.main(["--config", str(path)])
        assert stub_app.instances[0].settings.prompt == "= "

    def test_log_file(self, stub_app, tmp_path):
        log_file = tmp_path / "run.log"
        cli.main(["--log-file", str(log_file), "--config", str(tmp_path / "nope.yaml")])
        assert "not found" in log_file.read_text(encoding="utf-8")

    def test_no_log_file_installs_null_handler(self, stub_app):
        cli.main([])
        assert any(isinstance(h, logging.NullHandler) for h in logging.root.handlers)

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--version"])
        assert exc_info.value.code == 0
        assert "running-total 0.1.0" in capsys.readouterr().out

    def test_bad_argument(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--nope"])
        assert exc_info.value.code == 2
