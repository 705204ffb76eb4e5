import io

import pytest
from rich.console import Console

from imposter import main
from imposter.config import GameConfig, GameSettings, LoggingSettings


CATEGORIES = {"Animals": ["Cat"], "Food": ["Pizza"]}


@pytest.fixture
def screen(monkeypatch):
    """Capture console output and answer every Enter prompt."""
    console = Console(file=io.StringIO(), width=100)
    console.enter_presses = []

    def press_enter(prompt="", **kwargs):
        console.enter_presses.append(prompt)
        return ""

    monkeypatch.setattr(main, "console", console)
    monkeypatch.setattr(console, "input", press_enter)
    return console


@pytest.fixture
def answers(monkeypatch):
    """Script the answers to Prompt, IntPrompt and Confirm.

    A None answer to Prompt.ask takes the prompt's default.
    """
    scripted = {"prompt": [], "int": [], "confirm": [], "seen": []}

    def prompt_ask(prompt, **kwargs):
        scripted["seen"].append((prompt, kwargs))
        answer = scripted["prompt"].pop(0)
        return kwargs.get("default") if answer is None else answer

    monkeypatch.setattr(main.Prompt, "ask", prompt_ask)
    monkeypatch.setattr(main.IntPrompt, "ask", lambda prompt, **kwargs: scripted["int"].pop(0))
    monkeypatch.setattr(main.Confirm, "ask", lambda prompt, **kwargs: scripted["confirm"].pop(0))
    return scripted


def output(screen):
    return screen.file.getvalue()


def test_choose_category_defaults_to_first(screen, answers):
    answers["prompt"] = [None]

    assert main.choose_category(CATEGORIES, None) == "Animals"
    _, kwargs = answers["seen"][0]
    assert kwargs["default"] == "1"
    assert kwargs["choices"] == ["1", "2"]


def test_choose_category_prefers_configured(screen, answers):
    answers["prompt"] = [None, None]

    assert main.choose_category(CATEGORIES, "Food") == "Food"
    assert main.choose_category(CATEGORIES, "Sports") == "Animals"


def test_choose_category_by_number(screen, answers):
    answers["prompt"] = ["2"]
    assert main.choose_category(CATEGORIES, None) == "Food"


@pytest.mark.parametrize("requested, expected", [(20, 12), (1, 3), (5, 5)])
def test_choose_player_count_clamps(screen, answers, requested, expected):
    answers["int"] = [requested]

    assert main.choose_player_count(3) == expected
    assert ("Using" in output(screen)) is (requested != expected)


def test_play_single_game(screen, answers):
    answers["prompt"] = [None, "reveal"]
    answers["int"] = [3]
    answers["confirm"] = [False]

    main.play(GameConfig(game=GameSettings(seed=3)), CATEGORIES)

    text = output(screen)
    assert "Who is the Imposter?" in text
    assert "Mission Report" in text
    assert "Cat" in text
    assert "The Imposter" in text
    # Reveal and hide for each of the three players
    assert len(screen.enter_presses) == 6
    assert "Start The Game" in screen.enter_presses[-1]
    assert answers["confirm"] == []


def test_abort_returns_to_setup(screen, answers):
    answers["prompt"] = [None, "abort", "2", "reveal"]
    answers["int"] = [3, 4]
    answers["confirm"] = [False]

    main.play(GameConfig(), CATEGORIES)

    text = output(screen)
    assert "Game aborted." in text
    assert "Pizza" in text
    assert answers["prompt"] == []
    assert answers["int"] == []


def test_play_again_starts_another_game(screen, answers, tmp_path):
    answers["prompt"] = [None, "reveal", None, "reveal"]
    answers["int"] = [3, 3]
    answers["confirm"] = [True, False]
    log_dir = tmp_path / "games"

    main.play(GameConfig(logging=LoggingSettings(dir=str(log_dir))), CATEGORIES)

    assert answers["confirm"] == []
    assert len(list(log_dir.iterdir())) == 2
    assert "Game logs saved to" in output(screen)


def test_failed_game_log_is_reported(screen, answers, tmp_path):
    blocker = tmp_path / "games"
    blocker.write_text("plain file", encoding="utf-8")
    answers["prompt"] = [None, "reveal"]
    answers["int"] = [3]
    answers["confirm"] = [False]

    main.play(GameConfig(logging=LoggingSettings(dir=str(blocker))), CATEGORIES)

    text = output(screen)
    assert "Game log is incomplete" in text
    assert "Mission Report" in text
