"""Random graph generator shown in the viewer."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field

from emerge.graph import Graph
from emerge.viewer import default_window_conf, render_graph


@dataclass
class Simulator:
    """Builds random graphs of up to 19 nodes and 19 edges."""

    number_of_nodes: int = 30
    number_of_edges: int = 30
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def graph(self) -> Graph:
        """Draw new node and edge counts and build a random graph from them."""
        self.number_of_edges = self.rng.randrange(1, 20)
        self.number_of_nodes = self.rng.randrange(1, 20)

        graph = Graph(rng=self.rng)
        for node_id in range(self.number_of_nodes):
            graph.add_node(f"node{node_id}")
        for _ in range(self.number_of_edges):
            graph.add_edge(
                self.rng.randrange(self.number_of_nodes),
                self.rng.randrange(self.number_of_nodes),
            )
        return graph


def main(argv: list[str] | None = None) -> int:
    """Show a random graph in the viewer."""
    parser = argparse.ArgumentParser(description="Animate a random graph.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)

    simulator = Simulator(rng=random.Random(args.seed))
    render_graph(simulator.graph(), default_window_conf(), args.frames)
    return 0