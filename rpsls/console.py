"""Text front end: the same match, played from a terminal prompt."""
import logging
import sys

from .utils.constants import *
from .game.game_logic import InvalidChoiceError, MatchController
from .ui.formatting import initial_view, round_view, tally_line, target_text

logger = logging.getLogger(__name__)

HELP_TEXT = [
    "COMMANDS:",
    "- rock, paper, scissors, lizard, spock (or r, p, s, l, k): play a round",
    "- reset (or x): reset the scores",
    "- help: show this text",
    "- quit (or q): leave the game",
]


class ConsoleGame:
    def __init__(self, controller=None, stdin=None, stdout=None):
        self.controller = controller if controller is not None else MatchController()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text=""):
        self.stdout.write(text + "\n")

    def show_view(self, view):
        self.write(view.caption)
        if view.detail:
            self.write(view.detail)
        if view.reason:
            self.write(view.reason)
        self.write(f"Score  You {view.player_score} - {view.bot_score} Bot")

    def handle_command(self, command):
        """Handle one line of input. Returns False when the game should stop."""
        command = command.strip().lower()
        if not command:
            return True
        if command in ("quit", "q", "exit"):
            return False
        if command == "help":
            for line in HELP_TEXT:
                self.write(line)
            return True
        if command in ("reset", RESET_KEY):
            self.controller.reset_match()
            self.show_view(initial_view())
            return True

        choice = CHOICE_KEYS.get(command, command)
        try:
            report = self.controller.play_round(choice)
        except InvalidChoiceError:
            self.write(f"Unknown command: {command!r} (type 'help')")
            return True
        self.show_view(round_view(report))
        return True

    def run(self):
        self.write(WINDOW_NAME)
        self.write(target_text(self.controller.target_score))
        self.show_view(initial_view())

        for line in self.stdin:
            if not self.handle_command(line):
                break

        self.write(tally_line(self.controller.tally))
