"""Spring-based layout physics for a simulation world."""

from __future__ import annotations

import math

from emerge.graph import Edge, Force, Position, World

TIME_STEP = 0.5
SPRING_CONSTANT = 0.5
SPRING_RESTING_LENGTH = 100.0
ELECTROSTATIC_CONSTANT = 100.0


def _delta(source: Position, destination: Position) -> tuple[float, float, float]:
    dx = destination.x - source.x
    dy = destination.y - source.y
    return dx, dy, math.hypot(dx, dy)


def spring_force(source: Position, destination: Position) -> Force:
    """Hooke's-law force of the spring between two points.

    Coincident points have no direction; the result is then NaN.
    """
    dx, dy, length = _delta(source, destination)
    if length == 0:
        return Force(math.nan, math.nan)
    displacement = length - SPRING_RESTING_LENGTH
    return Force(
        -SPRING_CONSTANT * displacement * (dx / length),
        -SPRING_CONSTANT * displacement * (dy / length),
    )


def electrostatic_force(source: Position, destination: Position) -> Force:
    """Inverse-square force between two points.

    Coincident points have no direction; the result is then NaN.
    """
    dx, dy, distance = _delta(source, destination)
    if distance == 0:
        return Force(math.nan, math.nan)
    magnitude = ELECTROSTATIC_CONSTANT / distance**2
    return Force(magnitude * (dx / distance), magnitude * (dy / distance))


def apply_force(world: World, node_id: int, force: Force) -> None:
    """Set the force on a node's body; raise KeyError if it has none."""
    world.body(node_id).force = force


def simulate_time_step(world: World) -> None:
    """Advance every body's position by one time step."""
    half_step_squared = 0.5 * TIME_STEP**2
    for body in world.bodies:
        body.position = Position(
            body.position.x + body.velocity.x * TIME_STEP + body.force.x * half_step_squared,
            body.position.y + body.velocity.y * TIME_STEP + body.force.y * half_step_squared,
        )


def physics_update(world: World) -> None:
    """Set spring forces along edges, then advance one time step.

    Only the last edge leaving each node is considered, and a later edge
    overwrites the force set by an earlier one.
    """
    positions = {body.node_id: body.position for body in world.bodies}
    edges_by_source: dict[int, Edge] = {}
    for edge in world.edges:
        edges_by_source[edge.source] = edge

    for edge in edges_by_source.values():
        source = positions.get(edge.source)
        destination = positions.get(edge.destination)
        if source is None or destination is None:
            continue
        force = spring_force(destination, source)
        apply_force(world, edge.source, force)
        apply_force(world, edge.destination, Force(-force.x, -force.y))

    simulate_time_step(world)