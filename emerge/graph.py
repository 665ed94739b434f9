"""Graph model and the simulation world built from it."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
NODE_RADIUS = 15.0
DEFAULT_WIDTH = 1280.0
DEFAULT_HEIGHT = 720.0


@dataclass(frozen=True)
class Position:
    """A point on the canvas."""

    x: float
    y: float


@dataclass(frozen=True)
class Velocity:
    """Velocity of a body."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Force:
    """Force acting on a body."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Size:
    """Size of a drawn node."""

    radius: float = NODE_RADIUS


@dataclass
class PhysicsData:
    """The physical state of a node."""

    velocity: Velocity
    force: Force
    position: Position
    size: Size


def random_physics_data(
    width: float, height: float, rng: random.Random | None = None
) -> PhysicsData:
    """Return resting physics data placed at a random point inside the area."""
    if width <= 0 or height <= 0:
        raise ValueError(f"area must be positive, got {width}x{height}")
    rng = rng if rng is not None else random.Random()
    return PhysicsData(
        velocity=Velocity(),
        force=Force(),
        position=Position(rng.random() * width, rng.random() * height),
        size=Size(NODE_RADIUS),
    )


@dataclass
class Node:
    """A labelled node together with its edges and physical state."""

    id: int
    label: str
    physics_data: PhysicsData
    outgoing_edges: set[int] = field(default_factory=set)
    incoming_edges: set[int] = field(default_factory=set)


@dataclass(frozen=True)
class Edge:
    """A directed edge between two node ids."""

    source: int
    destination: int


@dataclass
class Graph:
    """A directed graph whose nodes are placed at random inside an area."""

    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    rng: random.Random = field(default_factory=random.Random, repr=False)
    nodes: list[Node] = field(default_factory=list)
    node_lookup: dict[str, int] = field(default_factory=dict)

    def add_node(self, label: str) -> int:
        """Add a node and return its id. A repeated label now names the new node."""
        node_id = len(self.nodes)
        self.node_lookup[label] = node_id
        self.nodes.append(
            Node(
                id=node_id,
                label=label,
                physics_data=random_physics_data(self.width, self.height, self.rng),
            )
        )
        return node_id

    def _check_id(self, node_id: int) -> None:
        if not 0 <= node_id < len(self.nodes):
            raise IndexError(f"no node with id {node_id}")

    def add_edge(self, source: int, destination: int) -> None:
        """Add a directed edge; edges from a node to itself are ignored."""
        if source == destination:
            return
        self._check_id(source)
        self._check_id(destination)
        self.nodes[source].outgoing_edges.add(destination)
        self.nodes[destination].incoming_edges.add(source)

    def add_edge_by_name(self, source_name: str, destination_name: str) -> None:
        """Add an edge between labelled nodes; unknown labels are ignored."""
        if source_name == destination_name:
            return
        source = self.node_lookup.get(source_name)
        destination = self.node_lookup.get(destination_name)
        if source is not None and destination is not None:
            self.add_edge(source, destination)

    def edges(self) -> list[Edge]:
        """Return every edge, grouped by source node in id order."""
        return [
            Edge(node.id, destination)
            for node in self.nodes
            for destination in sorted(node.outgoing_edges)
        ]


@dataclass
class Body:
    """A simulated, drawable node."""

    node_id: int
    label: str
    velocity: Velocity
    force: Force
    position: Position
    size: Size
    color: Color = BLACK


@dataclass
class World:
    """Bodies and edges taking part in the simulation."""

    bodies: list[Body] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    def body(self, node_id: int) -> Body:
        """Return the body of a node; raise KeyError if there is none."""
        for body in self.bodies:
            if body.node_id == node_id:
                return body
        raise KeyError(f"no body for node {node_id}")


def build_world(graph: Graph) -> World:
    """Create the simulation world for a graph."""
    bodies = [
        Body(
            node_id=node.id,
            label=node.label,
            velocity=node.physics_data.velocity,
            force=node.physics_data.force,
            position=node.physics_data.position,
            size=node.physics_data.size,
        )
        for node in graph.nodes
    ]
    return World(bodies=bodies, edges=graph.edges())