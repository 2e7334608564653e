from enum import Enum


class Choice(Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"
    SPOCK = "spock"
    LIZARD = "lizard"

    @property
    def tag(self):
        return self.value


class Outcome(Enum):
    PLAYER_WINS = 0
    BOT_WINS = 1
    DRAW = 2


# Game constants
CHOICES = list(Choice)
TARGET_SCORE = 3

# Game rules
WINNING_RULES = {
    Choice.ROCK: {Choice.SCISSORS, Choice.LIZARD},
    Choice.PAPER: {Choice.ROCK, Choice.SPOCK},
    Choice.SCISSORS: {Choice.PAPER, Choice.LIZARD},
    Choice.LIZARD: {Choice.SPOCK, Choice.PAPER},
    Choice.SPOCK: {Choice.SCISSORS, Choice.ROCK},
}

WIN_MESSAGES = {
    (Choice.ROCK, Choice.SCISSORS): "Rock crushes Scissors",
    (Choice.ROCK, Choice.LIZARD): "Rock crushes Lizard",
    (Choice.PAPER, Choice.ROCK): "Paper covers Rock",
    (Choice.PAPER, Choice.SPOCK): "Paper disproves Spock",
    (Choice.SCISSORS, Choice.PAPER): "Scissors cut Paper",
    (Choice.SCISSORS, Choice.LIZARD): "Scissors decapitate Lizard",
    (Choice.LIZARD, Choice.SPOCK): "Lizard poisons Spock",
    (Choice.LIZARD, Choice.PAPER): "Lizard eats Paper",
    (Choice.SPOCK, Choice.SCISSORS): "Spock smashes Scissors",
    (Choice.SPOCK, Choice.ROCK): "Spock vaporizes Rock",
}

# Display text
PROMPT_TEXT = "Choose a shape:"
VERDICTS = {
    Outcome.PLAYER_WINS: "Player wins",
    Outcome.BOT_WINS: "Bot wins",
    Outcome.DRAW: "Draw",
}
PLAYER_MATCH_MESSAGE = "You won the match!"
BOT_MATCH_MESSAGE = "Bot won the match!"
RESET_SUFFIX = "(Scores reset.)"

SYMBOLS = {
    Choice.ROCK: "\U0001FAA8",
    Choice.PAPER: "\U0001F4C4",
    Choice.SCISSORS: "✂️",
    Choice.SPOCK: "\U0001F596",
    Choice.LIZARD: "\U0001F98E",
}
UNKNOWN_SYMBOL = "?"

# Keyboard shortcuts
CHOICE_KEYS = {
    "r": Choice.ROCK,
    "p": Choice.PAPER,
    "s": Choice.SCISSORS,
    "l": Choice.LIZARD,
    "k": Choice.SPOCK,
}
RESET_KEY = "x"
QUIT_KEYS = ("q", chr(27))
RESET_TAG = "reset"
QUIT_TAG = "quit"

# UI constants
WINDOW_NAME = "Rock Paper Scissors Lizard Spock"
WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 760
CIRCLE_RADIUS = 60
HISTORY_LENGTH = 5
FRAME_DELAY_MS = 30

# Colours (BGR)
BACKGROUND_TOP = (79, 27, 27)
BACKGROUND_BOTTOM = (50, 20, 50)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREEN = (0, 255, 0)
ORANGE = (0, 165, 255)
RED = (0, 0, 255)
BUTTON_COLOR = (90, 60, 40)
BUTTON_HOVER_COLOR = (160, 110, 60)
CHOICE_COLORS = {
    Choice.ROCK: (0, 0, 255),
    Choice.PAPER: (0, 200, 0),
    Choice.SCISSORS: (255, 0, 0),
    Choice.LIZARD: (0, 200, 200),
    Choice.SPOCK: (255, 0, 255),
}
OUTCOME_COLORS = {
    Outcome.PLAYER_WINS: GREEN,
    Outcome.BOT_WINS: RED,
    Outcome.DRAW: ORANGE,
}
