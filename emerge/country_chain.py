"""A small hand-made chain of countries shown in the viewer."""

from __future__ import annotations

import argparse

from emerge.graph import Graph
from emerge.viewer import default_window_conf, render_graph


def build_graph() -> Graph:
    """Return the sample chain of four countries."""
    graph = Graph()
    for name in ("Albania", "Cambodia", "Cameroon", "Nigeria"):
        graph.add_node(name)
    graph.add_edge_by_name("Cambodia", "Albania")
    graph.add_edge_by_name("Cameroon", "Nigeria")
    graph.add_edge_by_name("Nigeria", "Albania")
    return graph


def main(argv: list[str] | None = None) -> int:
    """Show the sample country chain in the viewer."""
    parser = argparse.ArgumentParser(description="Animate a chain of countries.")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)
    render_graph(build_graph(), default_window_conf(), args.frames)
    return 0