"""Drawing of a simulation world onto a pygame surface."""

from __future__ import annotations

import math
from collections.abc import Sequence

import pygame

from emerge.graph import Color, Edge, World

GRAY: Color = (128, 128, 128)
WHITE: Color = (255, 255, 255)
EDGE_NODE_RADIUS = 15.0
EDGE_THICKNESS = 3.0
ARROWHEAD_SIZE = 15.0

Point = tuple[float, float]


def arrow_positions(
    start: Sequence[float],
    end: Sequence[float],
    start_radius: float,
    end_radius: float,
) -> tuple[Point, Point, Point, Point]:
    """Return the arrow's start, tip, and the ends of the two arrowhead strokes.

    The arrow runs between the rims of two circles centred on ``start`` and
    ``end``. Raise ValueError when the two centres coincide.
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length = math.hypot(dx, dy)
    if length == 0:
        raise ValueError("an arrow needs two distinct points")
    ux, uy = dx / length, dy / length
    # (uy, -ux) is perpendicular to (ux, uy): their dot product is zero.
    px, py = uy, -ux

    arrow_start = (start[0] + ux * start_radius, start[1] + uy * start_radius)
    arrow_end = (end[0] - ux * end_radius, end[1] - uy * end_radius)
    back_x = arrow_end[0] - ux * ARROWHEAD_SIZE
    back_y = arrow_end[1] - uy * ARROWHEAD_SIZE
    half = ARROWHEAD_SIZE * 0.5
    left = (back_x + px * half, back_y + py * half)
    right = (back_x - px * half, back_y - py * half)
    return arrow_start, arrow_end, left, right


def draw_arrow_line(
    surface: pygame.Surface,
    start: Sequence[float],
    end: Sequence[float],
    start_radius: float,
    end_radius: float,
    color: Color,
    thickness: float,
) -> None:
    """Draw an arrow from the rim of one circle to the rim of another."""
    arrow_start, arrow_end, left, right = arrow_positions(
        start, end, start_radius, end_radius
    )
    width = max(1, round(thickness))
    pygame.draw.line(surface, color, arrow_start, arrow_end, width)
    pygame.draw.line(surface, color, arrow_end, left, width)
    pygame.draw.line(surface, color, arrow_end, right, width)


def _finite(x: float, y: float) -> bool:
    return math.isfinite(x) and math.isfinite(y)


def render(surface: pygame.Surface, world: World, font: pygame.font.Font | None) -> None:
    """Draw every body and, over them, one arrow per source node.

    Only the last edge leaving each node is drawn. Labels are drawn when a
    font is given.
    """
    surface.fill(GRAY)

    for body in world.bodies:
        x, y = body.position.x, body.position.y
        if not _finite(x, y):
            continue
        pygame.draw.circle(surface, body.color, (x, y), body.size.radius)
        if font is not None:
            text = font.render(body.label, True, WHITE)
            surface.blit(text, text.get_rect(center=(round(x), round(y))))

    positions = {body.node_id: body.position for body in world.bodies}
    edges_by_source: dict[int, Edge] = {}
    for edge in world.edges:
        edges_by_source[edge.source] = edge

    for edge in edges_by_source.values():
        source = positions.get(edge.source)
        destination = positions.get(edge.destination)
        if source is None or destination is None:
            continue
        if not (_finite(source.x, source.y) and _finite(destination.x, destination.y)):
            continue
        if (source.x, source.y) == (destination.x, destination.y):
            continue
        draw_arrow_line(
            surface,
            (source.x, source.y),
            (destination.x, destination.y),
            EDGE_NODE_RADIUS,
            EDGE_NODE_RADIUS,
            WHITE,
            EDGE_THICKNESS,
        )