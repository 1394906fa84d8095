"""Window setup, asset loading and the main loop."""

import argparse
import time
from dataclasses import dataclass
from pathlib import Path

import pygame

from breakout.ball import Ball
from breakout.blocks import Blocks
from breakout.game import MESSAGE_FONT_SIZE, GameState
from breakout.paddle import Paddle
from breakout.settings import (
    SCREEN_SIZE,
    SKYBLUE,
    TARGET_FPS,
    WINDOW_SIZE,
    WINDOW_TITLE,
)

ASSET_FILES = (
    "ball.png",
    "paddle.png",
    "hit_paddle.wav",
    "hit_block.wav",
    "game_over.wav",
)


@dataclass
class Assets:
    """Textures and sounds the game uses."""

    ball_texture: pygame.Surface
    paddle_texture: pygame.Surface
    hit_paddle: pygame.mixer.Sound
    hit_block: pygame.mixer.Sound
    game_over: pygame.mixer.Sound


def _asset_paths(asset_dir: str | Path) -> dict[str, Path]:
    directory = Path(asset_dir)
    paths = {name: directory / name for name in ASSET_FILES}
    for name, path in paths.items():
        if not path.is_file():
            raise FileNotFoundError(f"missing asset {name}: {path}")
    return paths


def load_assets(asset_dir: str | Path) -> Assets:
    """Load every texture and sound from ``asset_dir``.

    Raises FileNotFoundError if any asset is missing.
    """
    paths = _asset_paths(asset_dir)
    return Assets(
        ball_texture=pygame.image.load(str(paths["ball.png"])),
        paddle_texture=pygame.image.load(str(paths["paddle.png"])),
        hit_paddle=pygame.mixer.Sound(str(paths["hit_paddle.wav"])),
        hit_block=pygame.mixer.Sound(str(paths["hit_block.wav"])),
        game_over=pygame.mixer.Sound(str(paths["game_over.wav"])),
    )


def _build_game(assets: Assets) -> GameState:
    return GameState(
        ball=Ball(texture=assets.ball_texture),
        paddle=Paddle(texture=assets.paddle_texture, hit_sound=assets.hit_paddle),
        blocks=Blocks(hit_sound=assets.hit_block),
        game_over_sound=assets.game_over,
    )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="breakout", description="Play Breakout.")
    parser.add_argument(
        "--assets", default="assets", help="directory holding textures and sounds"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the game until it is closed."""
    args = _parse_args(argv)
    _asset_paths(args.assets)

    pygame.init()
    try:
        window = pygame.display.set_mode((WINDOW_SIZE, WINDOW_SIZE), vsync=1)
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.mixer.init()
        game = _build_game(load_assets(args.assets))
        font = pygame.font.Font(None, MESSAGE_FONT_SIZE)
        canvas = pygame.Surface((SCREEN_SIZE, SCREEN_SIZE))
        clock = pygame.time.Clock()
        opened = time.perf_counter()

        running = True
        while running:
            space_pressed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                    space_pressed = True
            if not running:
                break

            keys = pygame.key.get_pressed()
            game.update(
                time.perf_counter() - opened,
                space_pressed=space_pressed,
                left_down=keys[pygame.K_LEFT],
                right_down=keys[pygame.K_RIGHT],
            )

            canvas.fill(SKYBLUE)
            game.draw(canvas, font)
            pygame.transform.scale(canvas, (WINDOW_SIZE, WINDOW_SIZE), window)
            pygame.display.flip()
            clock.tick(TARGET_FPS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())