"""The ball."""

from dataclasses import dataclass, field

import pygame
from pygame.math import Vector2

from breakout.settings import SCREEN_SIZE, WHITE

BALL_START_POS_Y = 160.0
BALL_SPEED = 350.0
BALL_RADIUS = 4.0


def _start_position() -> Vector2:
    return Vector2(SCREEN_SIZE / 2.0, BALL_START_POS_Y)


def _start_direction() -> Vector2:
    return Vector2(0.0, 1.0)


@dataclass
class Ball:
    """Ball position, unit direction of travel and optional sprite."""

    texture: pygame.Surface | None = None
    position: Vector2 = field(default_factory=_start_position)
    direction: Vector2 = field(default_factory=_start_direction)

    def reset(self) -> None:
        """Put the ball back at its starting point, heading down."""
        self.direction = _start_direction()
        self.position = _start_position()

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the ball centred on its position."""
        if self.texture is not None:
            top_left = self.position - Vector2(BALL_RADIUS, BALL_RADIUS)
            surface.blit(self.texture, (top_left.x, top_left.y))
        else:
            pygame.draw.circle(
                surface, WHITE, (self.position.x, self.position.y), BALL_RADIUS
            )