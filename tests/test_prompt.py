"""Tests for the questionary-backed prompts (questionary itself is replaced)."""

import pytest

from tvrename.utils import prompt
from tvrename.utils.prompt import DeclineChooser, QuestionaryChooser, ask_text


class _Answer:
    """Stand-in for a questionary Question: `ask()` returns a canned answer."""

    def __init__(self, answer):
        self.answer = answer

    def ask(self):
        return self.answer


@pytest.fixture
def select(monkeypatch):
    calls = []

    def _install(answer):
        def fake_select(message, choices):
            calls.append((message, choices))
            return _Answer(answer)

        monkeypatch.setattr(prompt.questionary, "select", fake_select)
        return calls

    return _install


def test_choose_returns_selected_index(select):
    calls = select(1)

    assert QuestionaryChooser().choose("Pick one", ["/a.mkv", "/b.mkv"]) == 1

    message, choices = calls[0]
    assert message == "Pick one"
    assert [c.title for c in choices[:2]] == ["/a.mkv", "/b.mkv"]
    assert [c.value for c in choices[:2]] == [0, 1]


def test_none_of_the_above_is_last_and_maps_to_none(select):
    calls = select(0)
    chooser = QuestionaryChooser()
    chooser.choose("Pick one", ["/a.mkv", "/b.mkv"])

    last = calls[0][1][-1]
    assert last.title == "None of the above"
    assert len(calls[0][1]) == 3

    select(last.value)
    assert chooser.choose("Pick one", ["/a.mkv", "/b.mkv"]) is None


def test_cancelled_select_raises_keyboard_interrupt(select):
    select(None)
    with pytest.raises(KeyboardInterrupt):
        QuestionaryChooser().choose("Pick one", ["/a.mkv"])


def test_decline_chooser_never_picks():
    assert DeclineChooser().choose("Pick one", ["/a.mkv", "/b.mkv"]) is None


def test_ask_text_strips_answer(monkeypatch):
    monkeypatch.setattr(prompt.questionary, "text", lambda message: _Answer("  Firefly \n"))
    assert ask_text("Series?") == "Firefly"


def test_ask_text_cancelled(monkeypatch):
    monkeypatch.setattr(prompt.questionary, "text", lambda message: _Answer(None))
    with pytest.raises(KeyboardInterrupt):
        ask_text("Series?")
