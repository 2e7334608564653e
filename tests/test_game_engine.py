import logging

import cv2
import numpy as np

from rpsls.utils.constants import Choice, Outcome, PROMPT_TEXT, QUIT_TAG, RESET_TAG, WINDOW_HEIGHT, WINDOW_WIDTH
from rpsls.core.game_engine import GameEngine
from rpsls.ui.screens import GameScreen


def make_engine(make_controller, *bot_choices):
    return GameEngine(make_controller(*bot_choices))


def center_of(button):
    return button.x + button.width // 2, button.y + button.height // 2


def find_button(engine, tag):
    return next(b for b in engine.screen.buttons if b.tag == tag)


def test_screen_has_a_button_per_choice_plus_controls():
    tags = [button.tag for button in GameScreen().buttons]
    assert tags == [choice.tag for choice in Choice] + [RESET_TAG, QUIT_TAG]


def test_pick_tag_plays_a_round(make_controller):
    engine = make_engine(make_controller, Choice.SCISSORS)
    assert engine.handle_tag("rock")
    assert engine.controller.player_score == 1
    assert engine.view.caption == "Player wins"
    assert engine.last_round == (Choice.ROCK, Choice.SCISSORS, Outcome.PLAYER_WINS)


def test_unknown_tag_is_logged_and_ignored(make_controller, caplog):
    engine = make_engine(make_controller, Choice.SCISSORS)
    with caplog.at_level(logging.WARNING):
        assert engine.handle_tag("banana")
        assert engine.handle_tag(None)
    assert engine.controller.tally.rounds_played == 0
    assert engine.view.caption == PROMPT_TEXT
    assert "unknown tag" in caplog.text


def test_reset_clears_scores_and_detail(make_controller):
    engine = make_engine(make_controller, Choice.SCISSORS)
    engine.handle_tag("rock")
    engine.handle_tag(RESET_TAG)
    assert (engine.controller.player_score, engine.controller.bot_score) == (0, 0)
    assert engine.view.detail == ""
    assert engine.view.caption == PROMPT_TEXT
    assert engine.last_round is None


def test_quit_tag_stops(make_controller):
    engine = make_engine(make_controller, Choice.ROCK)
    assert engine.handle_tag(QUIT_TAG) is False


def test_keyboard_shortcuts(make_controller):
    engine = make_engine(make_controller, Choice.ROCK)
    assert engine.handle_key(-1)
    assert engine.handle_key(ord("k"))
    assert engine.last_round[0] == Choice.SPOCK
    assert engine.handle_key(ord("x"))
    assert engine.last_round is None
    assert engine.handle_key(ord("z"))
    assert engine.handle_key(27) is False
    assert engine.handle_key(ord("q")) is False


def test_mouse_click_on_pick_button(make_controller):
    engine = make_engine(make_controller, Choice.PAPER)
    x, y = center_of(find_button(engine, "lizard"))
    engine.handle_mouse(cv2.EVENT_MOUSEMOVE, x, y)
    assert find_button(engine, "lizard").hover
    engine.handle_mouse(cv2.EVENT_LBUTTONDOWN, x, y)
    assert engine.controller.player_score == 1
    assert engine.running


def test_mouse_click_on_quit_button(make_controller):
    engine = make_engine(make_controller, Choice.PAPER)
    engine.running = True
    engine.handle_mouse(cv2.EVENT_LBUTTONDOWN, *center_of(find_button(engine, QUIT_TAG)))
    assert engine.running is False


def test_click_outside_buttons_does_nothing(make_controller):
    engine = make_engine(make_controller, Choice.PAPER)
    engine.handle_mouse(cv2.EVENT_LBUTTONDOWN, 1, 1)
    assert engine.controller.tally.rounds_played == 0


def test_concluded_match_clears_icons(make_controller):
    engine = make_engine(make_controller, Choice.SCISSORS)
    for _ in range(3):
        engine.handle_tag("spock")
    assert engine.last_round is None
    assert engine.view.caption.startswith("You won the match!")


def test_render_produces_a_frame(make_controller):
    engine = make_engine(make_controller, Choice.SCISSORS)
    blank = engine.render()
    engine.handle_tag("rock")
    frame = engine.render()
    assert frame.shape == (WINDOW_HEIGHT, WINDOW_WIDTH, 3)
    assert frame.dtype == np.uint8
    assert not np.array_equal(blank, frame)


def test_arrow_keys_do_nothing(make_controller):
    engine = make_engine(make_controller, Choice.ROCK)
    # GTK arrow codes, masked to the low byte as cv2.waitKey returns them
    for code in (0xFF51, 0xFF52, 0xFF53, 0xFF54):
        assert engine.handle_key(code & 0xFF)
    assert engine.controller.tally.rounds_played == 0
    assert engine.last_round is None


def test_render_shows_recent_rounds(make_controller):
    engine = make_engine(make_controller, Choice.SCISSORS, Choice.ROCK)
    engine.handle_tag("rock")
    engine.handle_tag("spock")
    before = engine.render()
    engine.controller.tally.history.clear()
    after = engine.render()
    assert not np.array_equal(before, after)
