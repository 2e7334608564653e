import pytest

from rpsls.game.game_logic import MatchController


class ScriptedOpponent:
    """Plays a fixed sequence of shapes, cycling when it runs out"""

    def __init__(self, *choices):
        self.choices = list(choices)
        self.calls = 0

    def choose(self):
        choice = self.choices[self.calls % len(self.choices)]
        self.calls += 1
        return choice


@pytest.fixture
def make_controller():
    def factory(*bot_choices, target_score=3):
        return MatchController(ScriptedOpponent(*bot_choices), target_score=target_score)
    return factory
