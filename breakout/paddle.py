"""The player's paddle."""

from dataclasses import dataclass, field

import pygame
from pygame.math import Vector2

from breakout.settings import SCREEN_SIZE, WHITE

PADDLE_WIDTH = 50
PADDLE_HEIGHT = 6
PADDLE_POS_Y = 260.0
PADDLE_SPEED = 300.0


def _start_position() -> Vector2:
    return Vector2((SCREEN_SIZE - PADDLE_WIDTH) / 2.0, PADDLE_POS_Y)


@dataclass
class Paddle:
    """Paddle position, horizontal velocity, sprite and hit sound."""

    texture: pygame.Surface | None = None
    hit_sound: pygame.mixer.Sound | None = None
    position: Vector2 = field(default_factory=_start_position)
    velocity: float = 0.0

    def reset(self) -> None:
        """Centre the paddle and stop it."""
        self.position = _start_position()
        self.velocity = 0.0

    def rect(self) -> tuple[float, float, float, float]:
        """Return the paddle's bounds as ``(x, y, width, height)``."""
        return (
            self.position.x,
            self.position.y,
            float(PADDLE_WIDTH),
            float(PADDLE_HEIGHT),
        )

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the paddle with its top-left corner at its position."""
        if self.texture is not None:
            surface.blit(self.texture, (self.position.x, self.position.y))
        else:
            pygame.draw.rect(surface, WHITE, pygame.Rect(self.rect()))