"""
Interactive prompts.

`QuestionaryChooser` is the terminal implementation of the matcher's chooser:
it lists the candidates plus a "None of the above" entry. `DeclineChooser`
is used when prompting is disabled; it never picks anything, so ambiguous
episodes end up reported as unmatched instead of being guessed.
"""
from typing import Sequence

import questionary

from tvrename.utils.constants import NONE_OF_THE_ABOVE

_NONE = "__none__"


class QuestionaryChooser:
    """Ask the user at the terminal."""

    def choose(self, message: str, options: Sequence[str]) -> int | None:
        choices = [questionary.Choice(option, value=i) for i, option in enumerate(options)]
        choices.append(questionary.Choice(NONE_OF_THE_ABOVE, value=_NONE))

        selection = questionary.select(message, choices=choices).ask()
        if selection is None:
            # questionary returns None when the prompt is cancelled with Ctrl-C
            raise KeyboardInterrupt
        if selection == _NONE:
            return None
        return selection


class DeclineChooser:
    """Non-interactive chooser that always answers "none of the above"."""

    def choose(self, message: str, options: Sequence[str]) -> int | None:
        return None


def ask_text(message: str) -> str:
    """Prompt for a line of text; an empty answer is returned as ''."""
    answer = questionary.text(message).ask()
    if answer is None:
        raise KeyboardInterrupt
    return answer.strip()
