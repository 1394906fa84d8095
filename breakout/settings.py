"""Screen geometry, window and colour settings shared by the game."""

SCREEN_SIZE = 320
WINDOW_SIZE = 1000
WINDOW_TITLE = "Breakout"
TARGET_FPS = 500

WHITE = (255, 255, 255)
SKYBLUE = (102, 191, 255)


def camera_zoom() -> float:
    """Return the scale factor that fits the logical screen into the window."""
    return WINDOW_SIZE / SCREEN_SIZE