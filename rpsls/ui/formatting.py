"""Display strings for a played round.

Everything here is pure: the OpenCV screen and the console front end both
render whatever these functions return.
"""
from collections import namedtuple

from ..utils.constants import *
from ..game.game_logic import win_message

RoundView = namedtuple("RoundView", ["caption", "detail", "reason", "player_score", "bot_score"])


def verdict_label(outcome):
    return VERDICTS[outcome]


def choice_label(choice):
    return choice.name


def choice_symbol(choice):
    return SYMBOLS.get(choice, UNKNOWN_SYMBOL)


def detail_line(player_choice, bot_choice, symbols=True):
    if symbols:
        player, bot = choice_symbol(player_choice), choice_symbol(bot_choice)
    else:
        player, bot = choice_label(player_choice), choice_label(bot_choice)
    return f"You {player}  vs  {bot} Bot"


def score_text(score):
    return str(score)


def target_text(target):
    return f"First to {target} wins the match"


def reason_line(report):
    if report.outcome == Outcome.PLAYER_WINS:
        return win_message(report.player_choice, report.bot_choice)
    if report.outcome == Outcome.BOT_WINS:
        return win_message(report.bot_choice, report.player_choice)
    return ""


def initial_view():
    return RoundView(PROMPT_TEXT, "", "", score_text(0), score_text(0))


def round_view(report, symbols=True):
    """Build the texts shown after a round.

    A concluded match shows the conclusion message and clears the detail,
    since the scores it referred to have already been reset.
    """
    if report.match_concluded:
        detail, reason = "", ""
    else:
        detail = detail_line(report.player_choice, report.bot_choice, symbols)
        reason = reason_line(report)
    return RoundView(
        caption=report.message,
        detail=detail,
        reason=reason,
        player_score=score_text(report.player_score),
        bot_score=score_text(report.bot_score),
    )


def tally_line(tally):
    results = tally.get_results()
    return (f"Matches  You {results['player_matches']} - {results['bot_matches']} Bot"
            f"   Rounds {results['rounds_played']}   Draws {results['draws']}")


HISTORY_MARKS = {
    Outcome.PLAYER_WINS: ">",
    Outcome.BOT_WINS: "<",
    Outcome.DRAW: "=",
}


def history_line(history):
    """Recent rounds, oldest first, e.g. ``ROCK>SCISSORS  PAPER=PAPER``"""
    if not history:
        return ""
    rounds = [f"{player.name}{HISTORY_MARKS[outcome]}{bot.name}" for player, bot, outcome in history]
    return "Last rounds: " + "  ".join(rounds)
