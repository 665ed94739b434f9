import math

import pygame
import pytest

from emerge.graph import Body, Edge, Force, Position, Size, Velocity, World
from emerge.renderer import GRAY, WHITE, arrow_positions, draw_arrow_line, render


def _body(node_id, x, y, label="n"):
    return Body(
        node_id=node_id,
        label=label,
        velocity=Velocity(),
        force=Force(),
        position=Position(x, y),
        size=Size(15.0),
    )


def _rgb(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def test_should_calculate_arrow_positions():
    start, end, left, right = arrow_positions((0.0, 0.0), (100.0, 0.0), 2.0, 2.0)
    assert start == pytest.approx((2.0, 0.0))
    assert end == pytest.approx((98.0, 0.0))
    assert left == pytest.approx((83.0, -7.5))
    assert right == pytest.approx((83.0, 7.5))


def test_arrow_ends_lie_on_circle_rims():
    start, end, _, _ = arrow_positions((10.0, 20.0), (70.0, 100.0), 5.0, 8.0)
    assert math.dist(start, (10.0, 20.0)) == pytest.approx(5.0)
    assert math.dist(end, (70.0, 100.0)) == pytest.approx(8.0)


def test_arrowhead_is_symmetric_about_the_tip():
    _, end, left, right = arrow_positions((0.0, 0.0), (30.0, 40.0), 1.0, 1.0)
    assert math.dist(end, left) == pytest.approx(math.dist(end, right))


def test_coincident_points_raise():
    with pytest.raises(ValueError):
        arrow_positions((5.0, 5.0), (5.0, 5.0), 1.0, 1.0)


def test_draw_arrow_line_colours_the_shaft_only_outside_the_circles():
    surface = pygame.Surface((200, 100))
    surface.fill(GRAY)
    draw_arrow_line(surface, (20.0, 50.0), (180.0, 50.0), 15.0, 15.0, WHITE, 3.0)
    assert _rgb(surface, 100, 50) == WHITE
    assert _rgb(surface, 20, 50) == GRAY
    assert _rgb(surface, 180, 50) == GRAY


def test_render_fills_background_and_draws_nodes():
    surface = pygame.Surface((100, 100))
    world = World(bodies=[_body(0, 50.0, 50.0)])
    render(surface, world, None)
    assert _rgb(surface, 0, 0) == GRAY
    assert _rgb(surface, 50, 50) == (0, 0, 0)


def test_render_draws_edge_between_nodes():
    surface = pygame.Surface((200, 100))
    world = World(
        bodies=[_body(0, 20.0, 50.0), _body(1, 180.0, 50.0)],
        edges=[Edge(0, 1)],
    )
    render(surface, world, None)
    assert _rgb(surface, 100, 50) == WHITE
    assert _rgb(surface, 20, 50) == (0, 0, 0)


def test_render_draws_only_last_edge_per_source():
    surface = pygame.Surface((200, 200))
    world = World(
        bodies=[_body(0, 20.0, 20.0), _body(1, 180.0, 20.0), _body(2, 20.0, 180.0)],
        edges=[Edge(0, 1), Edge(0, 2)],
    )
    render(surface, world, None)
    assert _rgb(surface, 100, 20) == GRAY
    assert _rgb(surface, 20, 100) == WHITE


def test_render_draws_label_inside_node():
    pygame.font.init()
    font = pygame.font.Font(None, 20)
    surface = pygame.Surface((100, 100))
    world = World(bodies=[_body(0, 50.0, 50.0, label="W")])
    render(surface, world, font)
    white = sum(
        1
        for x in range(36, 65)
        for y in range(36, 65)
        if _rgb(surface, x, y) == WHITE
    )
    assert white > 0