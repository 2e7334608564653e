import logging
import random
from collections import deque, namedtuple

from ..utils.constants import *

logger = logging.getLogger(__name__)


class InvalidChoiceError(ValueError):
    """Raised when a tag does not name one of the five shapes"""


RoundReport = namedtuple(
    "RoundReport",
    [
        "player_choice",
        "bot_choice",
        "outcome",
        "match_concluded",
        "message",
        "player_score",
        "bot_score",
        "match_winner",
    ],
)


def to_choice(value):
    """Accept a Choice or its tag ("rock", "Spock", ...) and return the Choice"""
    if isinstance(value, Choice):
        return value
    if isinstance(value, str):
        try:
            return Choice(value.strip().lower())
        except ValueError:
            pass
    raise InvalidChoiceError(f"Unknown choice: {value!r}")


def beats(winner, loser):
    return loser in WINNING_RULES[winner]


def resolve(player, opponent):
    """Determine the winner of a single round.

    Equal shapes are a draw. Otherwise the player wins when the pair is in
    the beats relation; every other pair goes to the opponent.
    """
    if player == opponent:
        return Outcome.DRAW
    if beats(player, opponent):
        return Outcome.PLAYER_WINS
    return Outcome.BOT_WINS


def win_message(winner, loser):
    return WIN_MESSAGES.get((winner, loser))


class RandomOpponent:
    """Picks the bot's shape uniformly at random"""

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random

    def choose(self):
        return self.rng.choice(CHOICES)


class MatchState:
    def __init__(self, target_score=TARGET_SCORE):
        if isinstance(target_score, bool) or not isinstance(target_score, int) or target_score <= 0:
            raise ValueError(f"Target score must be a positive integer, got {target_score!r}")
        self.target_score = target_score
        self.player_score = 0
        self.bot_score = 0

    def record(self, outcome):
        if outcome == Outcome.PLAYER_WINS:
            self.player_score += 1
        elif outcome == Outcome.BOT_WINS:
            self.bot_score += 1

    def target_reached(self):
        return self.player_score >= self.target_score or self.bot_score >= self.target_score

    def reset(self):
        self.player_score = 0
        self.bot_score = 0


class SessionTally:
    """In-memory statistics for the current session"""

    def __init__(self, history_length=HISTORY_LENGTH):
        self.rounds_played = 0
        self.draws = 0
        self.player_matches = 0
        self.bot_matches = 0
        self.history = deque(maxlen=history_length)

    def add_round(self, player_choice, bot_choice, outcome):
        self.rounds_played += 1
        if outcome == Outcome.DRAW:
            self.draws += 1
        self.history.append((player_choice, bot_choice, outcome))

    def add_match(self, winner):
        if winner == Outcome.PLAYER_WINS:
            self.player_matches += 1
        else:
            self.bot_matches += 1

    def get_results(self):
        return {
            "rounds_played": self.rounds_played,
            "draws": self.draws,
            "player_matches": self.player_matches,
            "bot_matches": self.bot_matches,
        }


class MatchController:
    """Plays rounds against the bot and runs the match lifecycle.

    The opponent is anything with a ``choose()`` method returning a Choice.
    """

    def __init__(self, opponent=None, target_score=TARGET_SCORE):
        self.opponent = opponent if opponent is not None else RandomOpponent()
        self.state = MatchState(target_score)
        self.tally = SessionTally()

    @property
    def player_score(self):
        return self.state.player_score

    @property
    def bot_score(self):
        return self.state.bot_score

    @property
    def target_score(self):
        return self.state.target_score

    def play_round(self, player_choice):
        player_choice = to_choice(player_choice)
        bot_choice = self.opponent.choose()

        outcome = resolve(player_choice, bot_choice)
        self.state.record(outcome)
        self.tally.add_round(player_choice, bot_choice, outcome)
        logger.debug("Round: %s vs %s -> %s (%d-%d)", player_choice.name, bot_choice.name,
                     outcome.name, self.player_score, self.bot_score)

        match_winner = self.check_for_match_end()
        if match_winner is None:
            message = VERDICTS[outcome]
        elif match_winner == Outcome.PLAYER_WINS:
            message = f"{PLAYER_MATCH_MESSAGE} {RESET_SUFFIX}"
        else:
            message = f"{BOT_MATCH_MESSAGE} {RESET_SUFFIX}"

        return RoundReport(
            player_choice=player_choice,
            bot_choice=bot_choice,
            outcome=outcome,
            match_concluded=match_winner is not None,
            message=message,
            player_score=self.player_score,
            bot_score=self.bot_score,
            match_winner=match_winner,
        )

    def check_for_match_end(self):
        # Only one side scores per round, so the scores cannot be tied here
        if not self.state.target_reached():
            return None
        if self.player_score > self.bot_score:
            winner = Outcome.PLAYER_WINS
        else:
            winner = Outcome.BOT_WINS
        logger.debug("Match over: %s (%d-%d)", winner.name, self.player_score, self.bot_score)
        self.tally.add_match(winner)
        self.state.reset()
        return winner

    def reset_match(self):
        logger.debug("Match reset at %d-%d", self.player_score, self.bot_score)
        self.state.reset()
