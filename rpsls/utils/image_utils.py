import cv2
import numpy as np

from .constants import *


def gradient_background(width, height, top=BACKGROUND_TOP, bottom=BACKGROUND_BOTTOM):
    """Create a frame with a vertical colour gradient"""
    alpha = np.linspace(0.0, 1.0, height, dtype=np.float32).reshape(height, 1, 1)
    top = np.array(top, dtype=np.float32).reshape(1, 1, 3)
    bottom = np.array(bottom, dtype=np.float32).reshape(1, 1, 3)
    column = top * (1 - alpha) + bottom * alpha
    return np.repeat(column, width, axis=1).astype(np.uint8)


def choice_icon(choice, size=2 * CIRCLE_RADIUS):
    """Draw a simple BGRA icon for a shape on a transparent square"""
    img = np.zeros((size, size, 4), dtype=np.uint8)
    color = CHOICE_COLORS[choice] + (255,)
    c = size // 2
    r = size // 4

    if choice == Choice.ROCK:
        cv2.circle(img, (c, c), r, color, -1)
    elif choice == Choice.PAPER:
        cv2.rectangle(img, (c - r, c - r), (c + r, c + r), color, -1)
    elif choice == Choice.SCISSORS:
        cv2.line(img, (c - r, c - r), (c + r, c + r), color, max(2, size // 20))
        cv2.line(img, (c + r, c - r), (c - r, c + r), color, max(2, size // 20))
    elif choice == Choice.LIZARD:
        pts = np.array([[c, c - r], [c - r, c], [c, c + r], [c + r, c]], np.int32)
        cv2.fillPoly(img, [pts.reshape((-1, 1, 2))], color)
    elif choice == Choice.SPOCK:
        for dx, top in ((-r, c - r // 2), (0, c - r), (r, c - r // 2)):
            cv2.line(img, (c + dx, top), (c + dx, c + r), color, max(2, size // 20))
    return img


def overlay_image(background, foreground, position, radius=None):
    """Overlay the foreground image on the background at the specified position with optional circular mask"""
    if foreground is None:
        return background

    h, w = foreground.shape[:2]
    x, y = position

    # Skip anything that would fall outside the frame
    bg_h, bg_w = background.shape[:2]
    if x + w > bg_w or y + h > bg_h or x < 0 or y < 0:
        return background

    if foreground.shape[2] == 4:
        alpha = foreground[:, :, 3] / 255.0
    else:
        alpha = np.ones((h, w), dtype=np.float64)

    if radius is not None:
        mask = np.zeros((h, w), dtype=np.uint8)
        cv2.circle(mask, (w // 2, h // 2), radius, 255, -1)
        alpha = alpha * (mask / 255.0)

    region = background[y:y + h, x:x + w]
    for ch in range(3):
        region[:, :, ch] = region[:, :, ch] * (1 - alpha) + foreground[:, :, ch] * alpha

    return background


def put_text(frame, text, origin, scale=0.7, color=WHITE, thickness=2, shadow=True):
    """Draw text with a drop shadow"""
    if not text:
        return frame
    x, y = origin
    font = cv2.FONT_HERSHEY_SIMPLEX
    if shadow:
        cv2.putText(frame, text, (x + 2, y + 2), font, scale, BLACK, thickness, cv2.LINE_AA)
    cv2.putText(frame, text, (x, y), font, scale, color, thickness, cv2.LINE_AA)
    return frame


def put_centered_text(frame, text, y, scale=0.7, color=WHITE, thickness=2):
    if not text:
        return frame
    size = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, scale, thickness)[0]
    x = (frame.shape[1] - size[0]) // 2
    return put_text(frame, text, (x, y), scale, color, thickness)
