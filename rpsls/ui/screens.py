import cv2

from ..utils.constants import *
from ..utils.image_utils import *
from .formatting import target_text


class Button:
    def __init__(self, tag, label, x, y, width, height):
        self.tag = tag
        self.label = label
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.hover = False

    def contains(self, x, y):
        return (self.x <= x <= self.x + self.width and
                self.y <= y <= self.y + self.height)

    def draw(self, frame):
        color = BUTTON_HOVER_COLOR if self.hover else BUTTON_COLOR
        cv2.rectangle(frame, (self.x, self.y), (self.x + self.width, self.y + self.height), color, -1)
        cv2.rectangle(frame, (self.x, self.y), (self.x + self.width, self.y + self.height), WHITE, 2)

        size = cv2.getTextSize(self.label, cv2.FONT_HERSHEY_SIMPLEX, 0.6, 2)[0]
        text_x = self.x + (self.width - size[0]) // 2
        text_y = self.y + (self.height + size[1]) // 2
        put_text(frame, self.label, (text_x, text_y), 0.6)
        return frame


class GameScreen:
    """The single game window: scoreboard, round result and buttons"""

    def __init__(self, width=WINDOW_WIDTH, height=WINDOW_HEIGHT):
        self.width = width
        self.height = height
        self.background = gradient_background(width, height)
        self.icons = {choice: choice_icon(choice) for choice in CHOICES}
        self.buttons = self.create_buttons()

    def create_buttons(self):
        buttons = []
        button_width, button_height, gap = 150, 60, 20
        total_width = len(CHOICES) * button_width + (len(CHOICES) - 1) * gap
        start_x = (self.width - total_width) // 2
        pick_y = self.height - 170

        for i, choice in enumerate(CHOICES):
            x = start_x + i * (button_width + gap)
            buttons.append(Button(choice.tag, choice.name, x, pick_y, button_width, button_height))

        control_y = self.height - 90
        buttons.append(Button(RESET_TAG, "RESET", self.width // 2 - 170, control_y, 150, 50))
        buttons.append(Button(QUIT_TAG, "QUIT", self.width // 2 + 20, control_y, 150, 50))
        return buttons

    def button_at(self, x, y):
        for button in self.buttons:
            if button.contains(x, y):
                return button
        return None

    def update_hover(self, x, y):
        for button in self.buttons:
            button.hover = button.contains(x, y)

    def draw(self, view, target_score, last_round=None, tally_text="", history_text=""):
        """Render the whole window.

        ``last_round`` is a ``(player_choice, bot_choice, outcome)`` tuple for
        the icons, or None to leave the arena empty.
        """
        frame = self.background.copy()
        w = self.width

        put_centered_text(frame, "ROCK PAPER SCISSORS LIZARD SPOCK", 50, 1.1, WHITE, 3)
        put_centered_text(frame, target_text(target_score), 85, 0.6)

        # Scoreboard
        put_text(frame, "YOU", (60, 140), 0.8)
        put_text(frame, view.player_score, (70, 200), 1.8, GREEN, 4)
        size = cv2.getTextSize("BOT", cv2.FONT_HERSHEY_SIMPLEX, 0.8, 2)[0]
        put_text(frame, "BOT", (w - 60 - size[0], 140), 0.8)
        put_text(frame, view.bot_score, (w - 60 - size[0] + 10, 200), 1.8, RED, 4)

        caption_color = WHITE
        if last_round is not None:
            player_choice, bot_choice, outcome = last_round
            caption_color = OUTCOME_COLORS[outcome]
            frame = overlay_image(frame, self.icons[player_choice], (w // 2 - 200, 130), CIRCLE_RADIUS)
            frame = overlay_image(frame, self.icons[bot_choice], (w // 2 + 200 - 2 * CIRCLE_RADIUS, 130),
                                  CIRCLE_RADIUS)

        put_centered_text(frame, view.caption, 300, 1.0, caption_color, 2)
        put_centered_text(frame, view.detail, 340, 0.7)
        put_centered_text(frame, view.reason, 375, 0.6, caption_color, 1)
        put_centered_text(frame, tally_text, 405, 0.5, WHITE, 1)
        put_centered_text(frame, history_text, 430, 0.45, WHITE, 1)
        draw_rules_reminder(frame, (self.width // 2 - 260, 460))

        for button in self.buttons:
            button.draw(frame)

        put_text(frame, "Keys: r p s l k pick, x reset, q quit", (10, self.height - 12), 0.45, WHITE, 1)
        return frame


def draw_rules_reminder(frame, origin=(10, 470)):
    """Draw a small reminder of the rules"""
    x, y = origin
    put_text(frame, "Rules:", (x, y), 0.5, WHITE, 1, shadow=False)
    for i, message in enumerate(WIN_MESSAGES.values()):
        row, col = divmod(i, 2)
        put_text(frame, f"- {message}", (x + col * 260, y + 18 * (row + 1)), 0.45, WHITE, 1, shadow=False)
    return frame
