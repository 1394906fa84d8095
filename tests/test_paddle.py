import pygame
import pytest
from pygame.math import Vector2

from breakout.paddle import PADDLE_HEIGHT, PADDLE_POS_Y, PADDLE_WIDTH, Paddle
from breakout.settings import SCREEN_SIZE


def test_new_paddle_is_centred_horizontally():
    paddle = Paddle()
    left = paddle.position.x
    right = SCREEN_SIZE - (paddle.position.x + PADDLE_WIDTH)
    assert left == pytest.approx(right)
    assert paddle.position.y == PADDLE_POS_Y
    assert paddle.velocity == 0.0


def test_reset_recentres_and_stops():
    paddle = Paddle()
    paddle.position = Vector2(0.0, PADDLE_POS_Y)
    paddle.velocity = -300.0
    paddle.reset()
    assert paddle.position == Paddle().position
    assert paddle.velocity == 0.0


def test_rect_follows_position():
    paddle = Paddle()
    paddle.position = Vector2(12.5, PADDLE_POS_Y)
    assert paddle.rect() == (12.5, PADDLE_POS_Y, PADDLE_WIDTH, PADDLE_HEIGHT)


def test_draw_without_texture_fills_rect():
    surface = pygame.Surface((SCREEN_SIZE, SCREEN_SIZE))
    surface.fill((0, 0, 0))
    paddle = Paddle()
    paddle.draw(surface)
    x, y, w, h = paddle.rect()
    assert surface.get_at((int(x) + 1, int(y) + 1))[:3] == (255, 255, 255)
    assert surface.get_at((int(x + w) + 2, int(y) + 1))[:3] == (0, 0, 0)


def test_draw_with_texture_blits_at_position():
    texture = pygame.Surface((PADDLE_WIDTH, PADDLE_HEIGHT))
    texture.fill((10, 200, 10))
    surface = pygame.Surface((SCREEN_SIZE, SCREEN_SIZE))
    surface.fill((0, 0, 0))
    paddle = Paddle(texture=texture)
    paddle.position = Vector2(30.0, 100.0)
    paddle.draw(surface)
    assert surface.get_at((30, 100))[:3] == (10, 200, 10)
    assert surface.get_at((29, 100))[:3] == (0, 0, 0)