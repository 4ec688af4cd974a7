import subprocess
import sys
from pathlib import Path

import pytest

from tictacgo.cli import main


def _run_cli(args: list[str], cwd: Path) -> subprocess.CompletedProcess:
    exe = [sys.executable, "-m", "tictacgo.cli"]
    return subprocess.run(exe + args, cwd=cwd, capture_output=True, text=True)


def scripted(lines):
    it = iter(lines)

    def read(prompt: str) -> str:
        read.prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    read.prompts = []
    return read


def test_cli_status_and_suggest(tmp_path: Path):
    r = _run_cli(["status", "--board", "111220000"], cwd=tmp_path)
    assert r.returncode == 0
    s = r.stdout + r.stderr
    assert "status=won" in s and "winner=X" in s and "line=[0, 1, 2]" in s
    assert "forks=" not in s

    r = _run_cli(["suggest", "--board", "x...o.xo.", "--mark", "O"], cwd=tmp_path)
    assert r.returncode == 0
    s = r.stdout + r.stderr
    assert "board=100020120" in s and "move=1" in s


@pytest.mark.parametrize("bad", ["abc", "0123456789", "12345678x", "220000000"])
def test_cli_error_invalid_boards(tmp_path: Path, bad: str):
    r = _run_cli(["status", "--board", bad], cwd=tmp_path)
    assert r.returncode != 0
    r = _run_cli(["suggest", "--board", bad], cwd=tmp_path)
    assert r.returncode != 0


def test_cli_suggest_refuses_finished_board(tmp_path: Path):
    r = _run_cli(["suggest", "--board", "111220000"], cwd=tmp_path)
    assert r.returncode == 2


def test_cli_help_smoke(tmp_path: Path):
    for args in (["--help"], ["play", "--help"], ["status", "--help"], ["suggest", "--help"]):
        r = _run_cli(args, cwd=tmp_path)
        assert r.returncode == 0
        assert r.stdout or r.stderr


def test_play_two_player_game_to_win(capsys):
    rc = main(["play", "--mode", "human"], read=scripted(["0", "3", "1", "4", "2", "q"]))
    assert rc == 0
    out = capsys.readouterr().out
    assert "Player X wins!" in out
    assert "Score: X 1 | draws 0 | O 0 (1 played)" in out


def test_play_rejects_bad_input_and_continues(capsys):
    read = scripted(["hello", "4", "4", "11", "n", "q"])
    rc = main(["play", "--mode", "human"], read=read)
    assert rc == 0
    turns = [p.split()[1] for p in read.prompts]
    # Bad input keeps O to move; the reset hands the move back to X.
    assert turns == ["X", "X", "O", "O", "O", "X"]


def test_play_against_computer(capsys):
    rc = main(
        ["--seed", "3", "play", "--mode", "ai", "--difficulty", "hard", "--delay-ms", "0"],
        read=scripted(["0", "q"]),
    )
    assert rc == 0
    out = capsys.readouterr().out
    # The hard opponent answered in the center before the next prompt.
    assert "X | . | .\n---------\n. | O | ." in out


def test_play_bad_env_config(monkeypatch):
    monkeypatch.setenv("TTT_AI_DELAY_MS", "later")
    assert main(["play"], read=scripted([])) == 2
