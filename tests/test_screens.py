import numpy as np

from rpsls.utils.constants import CIRCLE_RADIUS, Choice
from rpsls.utils.image_utils import choice_icon, gradient_background, overlay_image
from rpsls.ui.screens import GameScreen, draw_rules_reminder


def test_gradient_runs_top_to_bottom():
    frame = gradient_background(40, 30, top=(0, 0, 0), bottom=(200, 200, 200))
    assert frame.shape == (30, 40, 3)
    assert frame[0, 0].tolist() == [0, 0, 0]
    assert frame[-1, -1].tolist() == [200, 200, 200]


def test_icons_are_transparent_around_the_shape():
    for choice in Choice:
        icon = choice_icon(choice)
        assert icon.shape == (2 * CIRCLE_RADIUS, 2 * CIRCLE_RADIUS, 4)
        assert icon[0, 0, 3] == 0
        assert icon[:, :, 3].any()


def test_overlay_outside_the_frame_is_skipped():
    frame = np.zeros((50, 50, 3), dtype=np.uint8)
    icon = np.full((20, 20, 3), 255, dtype=np.uint8)
    overlay_image(frame, icon, (40, 40))
    assert not frame.any()
    overlay_image(frame, icon, (10, 10))
    assert frame[15, 15].tolist() == [255, 255, 255]


def test_button_lookup_and_hover():
    screen = GameScreen()
    button = screen.buttons[0]
    assert screen.button_at(button.x + 1, button.y + 1) is button
    assert screen.button_at(0, 0) is None
    screen.update_hover(button.x + 1, button.y + 1)
    assert [b.hover for b in screen.buttons].count(True) == 1


def test_rules_reminder_draws_text():
    frame = np.zeros((200, 600, 3), dtype=np.uint8)
    draw_rules_reminder(frame, (10, 20))
    assert frame.any()
