"""Game state: fixed-step ball, paddle and block simulation plus drawing."""

import math
from dataclasses import dataclass, field
from typing import Protocol

import pygame
from pygame.math import Vector2

from breakout.ball import BALL_RADIUS, BALL_SPEED, BALL_START_POS_Y, Ball
from breakout.blocks import NUM_BLOCKS_X, NUM_BLOCKS_Y, Blocks, block_rect
from breakout.geometry import circle_rect_collision, reflect
from breakout.paddle import (
    PADDLE_POS_Y,
    PADDLE_SPEED,
    PADDLE_WIDTH,
    Paddle,
)
from breakout.settings import SCREEN_SIZE, WHITE

DELTA_TIME = 1.0 / 60.0
MESSAGE_FONT_SIZE = 15
SCORE_FONT_SIZE = 10


class _Playable(Protocol):
    def play(self) -> object: ...


def _play(sound: _Playable | None) -> None:
    if sound is not None:
        sound.play()


def _normalized(vector: Vector2) -> Vector2:
    if vector.length_squared() == 0.0:
        return Vector2(vector)
    return vector.normalize()


@dataclass
class GameState:
    """Everything that changes while a game is played."""

    ball: Ball = field(default_factory=Ball)
    paddle: Paddle = field(default_factory=Paddle)
    blocks: Blocks = field(default_factory=Blocks)
    game_over_sound: _Playable | None = None
    started: bool = False
    game_over: bool = False
    score: int = 0
    accumulated_time: float = 0.0

    def start(self) -> None:
        """Launch the ball towards the middle of the paddle."""
        self.started = True
        paddle_middle = Vector2(
            self.paddle.position.x + PADDLE_WIDTH / 2.0, PADDLE_POS_Y
        )
        self.ball.direction = _normalized(paddle_middle - self.ball.position)

    def restart(self) -> None:
        """Return to the waiting screen with a fresh wall and score."""
        self.started = False
        self.game_over = False
        self.score = 0
        self.ball.reset()
        self.paddle.reset()
        self.blocks.reset()

    def update(
        self,
        now: float,
        space_pressed: bool = False,
        left_down: bool = False,
        right_down: bool = False,
    ) -> None:
        """Advance the game; ``now`` is the time in seconds since the game opened."""
        if not self.started:
            self.ball.position.y = BALL_START_POS_Y
            self.ball.position.x = SCREEN_SIZE / 2.0 + math.cos(now) * SCREEN_SIZE / 2.5
            if space_pressed:
                self.start()
        elif self.game_over:
            if space_pressed:
                self.restart()
        else:
            self.accumulated_time += now

        if self.accumulated_time < DELTA_TIME:
            return

        prev_ball_pos = Vector2(self.ball.position)
        self._move_ball()
        self._move_paddle(left_down, right_down)
        self._bounce_off_paddle(prev_ball_pos)
        self._hit_blocks()
        self.accumulated_time -= DELTA_TIME

    def _move_ball(self) -> None:
        ball = self.ball
        ball.position += ball.direction * BALL_SPEED * DELTA_TIME

        if ball.position.x + BALL_RADIUS > SCREEN_SIZE:
            ball.position.x = SCREEN_SIZE - BALL_RADIUS
            ball.direction = reflect(ball.direction, (-1.0, 0.0))
        if ball.position.x - BALL_RADIUS < 0.0:
            ball.position.x = BALL_RADIUS
            ball.direction = reflect(ball.direction, (1.0, 0.0))
        if ball.position.y - BALL_RADIUS < 0.0:
            ball.position.y = BALL_RADIUS
            ball.direction = reflect(ball.direction, (0.0, 1.0))
        if not self.game_over and ball.position.y > SCREEN_SIZE + BALL_RADIUS * 9.0:
            self.game_over = True
            _play(self.game_over_sound)

    def _move_paddle(self, left_down: bool, right_down: bool) -> None:
        paddle = self.paddle
        paddle.velocity = 0.0
        if left_down:
            paddle.velocity -= PADDLE_SPEED
        if right_down:
            paddle.velocity += PADDLE_SPEED
        x = paddle.position.x + paddle.velocity * DELTA_TIME
        paddle.position.x = min(max(x, 0.0), float(SCREEN_SIZE - PADDLE_WIDTH))

    def _bounce_off_paddle(self, prev_ball_pos: Vector2) -> None:
        ball = self.ball
        x, y, width, height = self.paddle.rect()
        if not circle_rect_collision(ball.position, BALL_RADIUS, (x, y, width, height)):
            return

        normal = Vector2(0.0, 0.0)
        if prev_ball_pos.y < y + height:
            normal += Vector2(0.0, -1.0)
            ball.position.y = y - BALL_RADIUS
        if prev_ball_pos.y > y + height:
            normal += Vector2(0.0, 1.0)
            ball.position.y = y + height + BALL_RADIUS
        if prev_ball_pos.x < x:
            normal += Vector2(-1.0, 0.0)
        if prev_ball_pos.x > x + width:
            normal += Vector2(1.0, 0.0)

        if normal != Vector2(0.0, 0.0):
            ball.direction = reflect(ball.direction, normal.normalize())
        _play(self.paddle.hit_sound)

    def _hit_blocks(self) -> None:
        ball = self.ball
        for y in range(NUM_BLOCKS_Y):
            for x in range(NUM_BLOCKS_X):
                if not self.blocks.grid[y][x]:
                    continue
                rect = block_rect(x, y)
                if not circle_rect_collision(ball.position, BALL_RADIUS, rect):
                    continue

                left, top, width, height = rect
                right, bottom = left + width, top + height
                overlap_left = (ball.position.x + BALL_RADIUS) - left
                overlap_right = right - (ball.position.x - BALL_RADIUS)
                overlap_top = (ball.position.y + BALL_RADIUS) - top
                overlap_bottom = bottom - (ball.position.y - BALL_RADIUS)
                min_overlap = min(overlap_left, overlap_right, overlap_top, overlap_bottom)

                normal: tuple[float, float] | None = None
                if min_overlap == overlap_left:
                    normal = (-1.0, 0.0)
                    ball.position.x = left - BALL_RADIUS
                elif min_overlap == overlap_right:
                    normal = (1.0, 0.0)
                    ball.position.x = right + BALL_RADIUS
                elif min_overlap == overlap_top:
                    normal = (0.0, -1.0)
                    ball.position.y = top - BALL_RADIUS
                elif min_overlap == overlap_bottom:
                    normal = (0.0, 1.0)
                    ball.position.y = bottom + BALL_RADIUS

                if normal is not None:
                    ball.direction = reflect(ball.direction, normal)
                self.blocks.grid[y][x] = False
                self.score += self.blocks.row_scores[y]
                _play(self.blocks.hit_sound)
                break

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        """Draw the ball, paddle, blocks and the current message or score."""
        self.ball.draw(surface)
        self.paddle.draw(surface)
        self.blocks.draw(surface)
        if self.game_over:
            self._draw_centred(
                surface, font, f"Score: {self.score}. press space to reset"
            )
        elif not self.started:
            self._draw_centred(surface, font, "Press space to start")
        else:
            surface.blit(font.render(str(self.score), True, WHITE), (5, 5))

    @staticmethod
    def _draw_centred(surface: pygame.Surface, font: pygame.font.Font, message: str) -> None:
        text = font.render(message, True, WHITE)
        x = SCREEN_SIZE // 2 - text.get_width() // 2
        surface.blit(text, (x, int(BALL_START_POS_Y) - 30))