from __future__ import annotations

import io
import sys
from pathlib import Path

from tinyrogue.__main__ import main
from tinyrogue.app import choose_difficulty, run_session
from tinyrogue.config import Difficulty, Settings
from tinyrogue.engine.turns import TurnResolver
from tinyrogue.persistence.highscore import HighScoreStore
from tinyrogue.rng import SeededRandom


def make_session(tmp_path: Path) -> TurnResolver:
    return TurnResolver.new_session(
        Settings.load(),
        Difficulty.NORMAL,
        SeededRandom(11),
        high_scores=HighScoreStore(tmp_path / "hs.txt"),
    )


def test_choose_difficulty_skips_blank_lines():
    out = []
    assert choose_difficulty(iter(["\n", "3\n"]), out.append) is Difficulty.HARD
    assert "Choose difficulty" in out[0]


def test_choose_difficulty_end_of_input():
    assert choose_difficulty(iter([]), lambda s: None) is None


def test_unknown_key_then_quit(tmp_path: Path):
    resolver = make_session(tmp_path)
    out = []
    run_session(resolver, ["x\n", "q\n"], out.append)
    text = "".join(out)

    assert "Unknown input. Use w/a/s/d." in text
    assert "Quitting." in text
    assert "Thanks for playing!" in text
    assert resolver.ended
    assert resolver.turns == 0


def test_end_of_input_quits(tmp_path: Path):
    resolver = make_session(tmp_path)
    out = []
    score = run_session(resolver, ["w"], out.append)
    assert resolver.ended
    assert score == resolver.score
    assert resolver.turns == 1


def test_main_runs_a_session(monkeypatch, capsys, tmp_path: Path):
    monkeypatch.setattr(sys, "stdin", io.StringIO("d\nq\n"))
    rc = main(["--difficulty", "easy", "--seed", "3", "--highscore-file", str(tmp_path / "hs.txt")])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Diff: Easy" in out
    assert "Thanks for playing!" in out


def test_main_prompts_for_difficulty(monkeypatch, capsys, tmp_path: Path):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\nq\n"))
    rc = main(["--seed", "5", "--highscore-file", str(tmp_path / "hs.txt")])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Choose difficulty" in out
    assert "Diff: Hard" in out


def test_main_rejects_bad_config(capsys, tmp_path: Path):
    rc = main(["--config", str(tmp_path / "missing.yaml")])
    assert rc == 2
    assert "Configuration error" in capsys.readouterr().err
