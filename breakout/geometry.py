"""Vector reflection and circle/rectangle collision helpers.

Rectangles are ``(x, y, width, height)`` tuples of floats.
"""

from collections.abc import Sequence

from pygame.math import Vector2

Rect = tuple[float, float, float, float]


def _normalized(vector: Vector2) -> Vector2:
    if vector.length_squared() == 0.0:
        return Vector2(vector)
    return vector.normalize()


def reflect(vector: Sequence[float], normal: Sequence[float]) -> Vector2:
    """Reflect ``vector`` about ``normal`` and return the result normalised.

    A zero-length result is returned unchanged.
    """
    v = Vector2(vector)
    n = Vector2(normal)
    dot = v.dot(n)
    reflected = Vector2(v.x - (2.0 * n.x) * dot, v.y - (2.0 * n.y) * dot)
    return _normalized(reflected)


def circle_rect_collision(
    center: Sequence[float], radius: float, rect: Sequence[float]
) -> bool:
    """Return True when the circle overlaps or touches the rectangle."""
    x, y, width, height = rect
    half_w = width / 2.0
    half_h = height / 2.0
    dx = abs(center[0] - (x + half_w))
    dy = abs(center[1] - (y + half_h))

    if dx > half_w + radius or dy > half_h + radius:
        return False
    if dx <= half_w or dy <= half_h:
        return True
    corner_distance_sq = (dx - half_w) ** 2 + (dy - half_h) ** 2
    return corner_distance_sq <= radius * radius