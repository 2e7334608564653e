import logging

import cv2

from ..utils.constants import *
from ..game.game_logic import InvalidChoiceError, MatchController
from ..ui.formatting import history_line, initial_view, round_view, tally_line
from ..ui.screens import GameScreen

logger = logging.getLogger(__name__)


class GameEngine:
    """Owns the OpenCV window and routes mouse and keyboard events to the controller"""

    def __init__(self, controller=None, screen=None):
        self.controller = controller if controller is not None else MatchController()
        self.screen = screen if screen is not None else GameScreen()
        self.window_name = WINDOW_NAME
        self.view = initial_view()
        self.last_round = None
        self.running = False

    def handle_tag(self, tag):
        """Dispatch a button tag. Returns False when the game should stop."""
        if tag == QUIT_TAG:
            return False
        if tag == RESET_TAG:
            self.reset()
            return True

        try:
            report = self.controller.play_round(tag)
        except InvalidChoiceError:
            logger.warning("Ignoring pick with unknown tag: %r", tag)
            return True

        self.view = round_view(report, symbols=False)
        if report.match_concluded:
            self.last_round = None
        else:
            self.last_round = (report.player_choice, report.bot_choice, report.outcome)
        return True

    def handle_key(self, key):
        if key < 0:
            return True
        char = chr(key & 0xFF)
        if char in QUIT_KEYS:
            return False
        if char == RESET_KEY:
            return self.handle_tag(RESET_TAG)
        if char in CHOICE_KEYS:
            return self.handle_tag(CHOICE_KEYS[char].tag)
        return True

    def handle_mouse(self, event, x, y):
        if event == cv2.EVENT_MOUSEMOVE:
            self.screen.update_hover(x, y)
        elif event == cv2.EVENT_LBUTTONDOWN:
            button = self.screen.button_at(x, y)
            if button is not None:
                self.running = self.handle_tag(button.tag)

    def reset(self):
        self.controller.reset_match()
        self.view = initial_view()
        self.last_round = None

    def render(self):
        return self.screen.draw(self.view, self.controller.target_score, self.last_round,
                                tally_line(self.controller.tally), history_line(self.controller.tally.history))

    def window_closed(self):
        try:
            return cv2.getWindowProperty(self.window_name, cv2.WND_PROP_VISIBLE) < 1
        except cv2.error:
            return True

    def run(self):
        """Run the game"""
        cv2.namedWindow(self.window_name, cv2.WINDOW_AUTOSIZE)

        def mouse_callback(event, x, y, flags, param):
            self.handle_mouse(event, x, y)

        cv2.setMouseCallback(self.window_name, mouse_callback)
        self.running = True

        try:
            while self.running:
                cv2.imshow(self.window_name, self.render())

                key = cv2.waitKey(FRAME_DELAY_MS)
                if not self.handle_key(key):
                    break
                if self.window_closed():
                    break
        finally:
            cv2.destroyAllWindows()
