from __future__ import annotations
import logging
import pytest
from gitps1 import __version__
from gitps1 import __main__ as cli
from gitps1 import prompt
from gitps1.git import RepositoryStatus
from gitps1.styles import Painter


def test_main_default_bash(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    timeouts: list[float] = []

    def fake_status(timeout: float = 3) -> RepositoryStatus:
        timeouts.append(timeout)
        return RepositoryStatus(branch="main", dirty=False)

    monkeypatch.setattr(prompt, "repository_status", fake_status)
    cli.main([])
    assert capsys.readouterr().out == (
        " \x01\x1B[0;31m\x02(\x01\x1B[m\x02"
        "\x01\x1B[0;91m\x02main\x01\x1B[m\x02"
        "\x01\x1B[0;31m\x02)\x01\x1B[m\x02 \n"
    )
    assert timeouts == [3]


def test_main_zsh_light_timeout(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    timeouts: list[float] = []

    def fake_status(timeout: float = 3) -> RepositoryStatus:
        timeouts.append(timeout)
        return RepositoryStatus(branch="topic", dirty=False)

    monkeypatch.setattr(prompt, "repository_status", fake_status)
    cli.main(["--zsh", "-T", "light", "--git-timeout", "0.5"])
    assert capsys.readouterr().out == " %F{2}(%f%F{2}%Btopic%b%f%F{2})%f \n"
    assert timeouts == [0.5]


def test_main_not_a_repo(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(prompt, "repository_status", lambda timeout=3: None)
    cli.main(["--ansi"])
    assert capsys.readouterr().out == "\n"


def test_main_git_off(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def fail(paint: Painter, timeout: float = 3) -> str:
        raise AssertionError("compose() should not be called")

    monkeypatch.setattr(cli, "compose", fail)
    cli.main(["off"])
    assert capsys.readouterr().out == "\n"


def test_main_debug_logging(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    configured: list[int] = []
    monkeypatch.setattr(
        logging, "basicConfig", lambda **kwargs: configured.append(kwargs["level"])
    )
    monkeypatch.setattr(cli, "compose", lambda paint, timeout=3: "")
    cli.main(["--debug"])
    assert configured == [logging.DEBUG]


def test_main_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.endswith(f" {__version__}\n")
