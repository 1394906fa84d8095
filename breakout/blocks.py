"""The wall of breakable blocks."""

from dataclasses import dataclass, field

import pygame

NUM_BLOCKS_X = 10
NUM_BLOCKS_Y = 8
BLOCK_WIDTH = 28.0
BLOCK_HEIGHT = 10.0
GRID_OFFSET_X = 20.0
GRID_OFFSET_Y = 40.0

PURPLE = (200, 122, 255)
VIOLET = (135, 60, 190)
BLUEVIOLET = (138, 43, 226)
BLUE = (0, 121, 241)
GREEN = (0, 228, 48)
YELLOWGREEN = (154, 205, 50)
YELLOW = (253, 249, 0)
ORANGE = (255, 161, 0)
LIGHTGRAY = (200, 200, 200)
DARKGRAY = (80, 80, 80)

ROW_COLORS = (PURPLE, VIOLET, BLUEVIOLET, BLUE, GREEN, YELLOWGREEN, YELLOW, ORANGE)
ROW_SCORES = (8, 7, 6, 5, 4, 3, 2, 1)


def block_rect(x: int, y: int) -> tuple[float, float, float, float]:
    """Return the bounds ``(x, y, width, height)`` of the block at column x, row y."""
    return (
        GRID_OFFSET_X + x * BLOCK_WIDTH,
        GRID_OFFSET_Y + y * BLOCK_HEIGHT,
        BLOCK_WIDTH,
        BLOCK_HEIGHT,
    )


def _full_grid() -> list[list[bool]]:
    return [[True] * NUM_BLOCKS_X for _ in range(NUM_BLOCKS_Y)]


@dataclass
class Blocks:
    """Which blocks are still standing, with per-row colours and scores."""

    hit_sound: pygame.mixer.Sound | None = None
    grid: list[list[bool]] = field(default_factory=_full_grid)
    row_colors: tuple[tuple[int, int, int], ...] = ROW_COLORS
    row_scores: tuple[int, ...] = ROW_SCORES

    def reset(self) -> None:
        """Restore every block."""
        self.grid = _full_grid()

    def remaining(self) -> int:
        """Return how many blocks are still standing."""
        return sum(sum(row) for row in self.grid)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw each standing block with a bevelled outline."""
        for y, (row, color) in enumerate(zip(self.grid, self.row_colors)):
            for x, standing in enumerate(row):
                if not standing:
                    continue
                left, top, width, height = block_rect(x, y)
                right, bottom = left + width, top + height
                pygame.draw.rect(surface, color, pygame.Rect(left, top, width, height))
                pygame.draw.line(surface, LIGHTGRAY, (left, top), (right, top), 1)
                pygame.draw.line(surface, LIGHTGRAY, (left, top), (left, bottom), 1)
                pygame.draw.line(surface, DARKGRAY, (right, top), (right, bottom), 1)
                pygame.draw.line(surface, DARKGRAY, (left, bottom), (right, bottom), 1)