import logging
from pathlib import Path
from typing import Iterator

import pytest

from apologies.__main__ import main


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_cli_prints_tally(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--universes", "4", "--seed", "1", "--guess", "red"]) == 0
    out = capsys.readouterr().out
    assert "Wins" in out
    for color in ("red", "blue", "green", "yellow"):
        assert color in out
    assert "won" in out


def test_cli_reads_toml(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "run.toml"
    path.write_text('size = 5\ncolors = ["cyan", "magenta"]\nuniverses = 2\nseed = 9\n')
    assert main(["--config", str(path)]) == 0
    out = capsys.readouterr().out
    assert "cyan" in out and "magenta" in out
    assert "5x5" in out


@pytest.mark.parametrize(
    "argv",
    [
        ["--size", "1"],
        ["--universes", "0"],
        ["--guess", "purple"],
        ["--config", "does-not-exist.toml"],
    ],
)
def test_cli_rejects_bad_input(argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    assert main(argv) == 2
    assert "ERROR" in capsys.readouterr().err
