"""Tests for the promo command line."""
from pathlib import Path

import pytest

import promo.cli as cli
from promo import __version__
from promo.program import Program
from promo.types import RenderLoopError


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    return tmp_path


@pytest.fixture
def runs(monkeypatch):
    """Record Program.run calls instead of entering the loop."""
    calls = []
    monkeypatch.setattr(Program, "run", lambda self, terminal, console: calls.append(self))
    return calls


class _Child:
    pid = 4242


@pytest.fixture
def played(monkeypatch):
    calls = []

    def popen(args, **kwargs):
        calls.append(args)
        return _Child()

    monkeypatch.setattr("promo.notify.subprocess.Popen", popen)
    return calls


@pytest.fixture
def fake_loop(monkeypatch, clock, make_terminal):
    """Run the real loop against a scripted terminal and clock."""
    terminals = []
    run = Program.run

    def make():
        terminal = make_terminal()
        terminals.append(terminal)
        return terminal

    monkeypatch.setattr(cli, "Terminal", make)
    monkeypatch.setattr(
        Program, "run", lambda self, terminal, console: run(self, terminal, console, now=clock)
    )
    return terminals


def _write_config(home: Path, text: str) -> Path:
    path = home / ".config" / "promo" / "config.yaml"
    path.parent.mkdir(parents=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestStartupErrors:
    def test_missing_duration(self, capsys, runs):
        assert cli.main([]) == 1
        assert capsys.readouterr().out == "Usage: promo <duration>\n"
        assert runs == []

    def test_invalid_duration(self, capsys, home, runs):
        assert cli.main(["abc"]) == 1
        out = capsys.readouterr().out
        assert out.startswith("Invalid duration:")
        assert 'invalid duration "abc"' in out
        assert runs == []

    def test_unknown_unit(self, capsys, home, runs):
        assert cli.main(["5x"]) == 1
        assert 'unknown unit "x"' in capsys.readouterr().out

    def test_malformed_config_is_fatal(self, capsys, home, runs):
        _write_config(home, "sound_path: [oops\n")
        assert cli.main(["2s"]) == 1
        assert "Error decoding config file" in capsys.readouterr().out
        assert runs == []

    def test_home_dir_failure(self, capsys, monkeypatch, runs):
        def no_home(cls):
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(Path, "home", classmethod(no_home))
        assert cli.main(["2s"]) == 1
        assert "Error getting home dir" in capsys.readouterr().out
        assert runs == []

    def test_loop_failure(self, capsys, home, monkeypatch):
        def boom(self, terminal, console):
            raise RenderLoopError("Error running program: boom")

        monkeypatch.setattr(Program, "run", boom)
        assert cli.main(["2s"]) == 1
        assert "Error running program: boom" in capsys.readouterr().out

    def test_unknown_option(self, capsys, home, runs):
        assert cli.main(["--bogus", "5m"]) == 1
        out = capsys.readouterr().out
        assert out.startswith("Usage: promo <duration>\n")
        assert "unrecognized arguments: --bogus" in out
        assert runs == []

    def test_config_flag_without_value(self, capsys, home, runs):
        assert cli.main(["5m", "--config"]) == 1
        assert "--config" in capsys.readouterr().out
        assert runs == []


class TestStartup:
    def test_missing_config_uses_defaults(self, home, runs):
        assert cli.main(["25m"]) == 0
        (program,) = runs
        assert program.config.sound_path == ""
        assert program.countdown.total.total_seconds() == 25 * 60

    def test_config_sound_path(self, home, runs):
        _write_config(home, "sound_path: /tmp/ding.wav\n")
        assert cli.main(["1h30m"]) == 0
        assert runs[0].config.sound_path == "/tmp/ding.wav"

    def test_config_flag_overrides_location(self, tmp_path, home, runs):
        _write_config(home, "sound_path: /tmp/home.wav\n")
        other = tmp_path / "other.yaml"
        other.write_text("sound_path: /tmp/other.wav\n", encoding="utf-8")
        assert cli.main(["--config", str(other), "5s"]) == 0
        assert runs[0].config.sound_path == "/tmp/other.wav"

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as info:
            cli.main(["--version"])
        assert info.value.code == 0
        assert capsys.readouterr().out.strip() == f"promo {__version__}"


    def test_extra_arguments_ignored(self, home, runs):
        assert cli.main(["5m", "extra", "more"]) == 0
        (program,) = runs
        assert program.countdown.total.total_seconds() == 300

    def test_negative_duration_expires_at_once(self, home, runs):
        """A signed duration is not mistaken for an option; negatives clamp to zero."""
        assert cli.main(["-5m"]) == 0
        (program,) = runs
        assert program.countdown.total.total_seconds() == 0
        assert program.countdown.expired

    def test_plus_signed_duration(self, home, runs):
        assert cli.main(["+90s"]) == 0
        assert runs[0].countdown.total.total_seconds() == 90

    def test_unsigned_duration_wins_over_signed(self, home, runs):
        assert cli.main(["2s", "-5m"]) == 0
        assert runs[0].countdown.total.total_seconds() == 2

    def test_verbose_with_signed_duration(self, home, runs):
        assert cli.main(["-v", "-1s"]) == 0
        assert runs[0].countdown.expired


class TestEndToEnd:
    def test_two_seconds_without_sound(self, home, played, fake_loop, capsys):
        assert cli.main(["2s"]) == 0
        assert played == []
        assert fake_loop[0].exited
        assert "00:00 / 00:02" in capsys.readouterr().out

    def test_sound_played_on_expiry(self, home, played, fake_loop):
        _write_config(home, "sound_path: /tmp/ding.wav\n")
        assert cli.main(["1s"]) == 0
        assert played == [["pw-play", "/tmp/ding.wav"]]
