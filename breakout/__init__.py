"""A pygame Breakout game: ball, paddle, block wall, fixed-step simulation and window loop."""

__version__ = "0.1.0"