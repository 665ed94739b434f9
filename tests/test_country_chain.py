from emerge.country_chain import build_graph, main
from emerge.graph import Edge


def test_build_graph_nodes():
    graph = build_graph()
    assert [node.label for node in graph.nodes] == [
        "Albania",
        "Cambodia",
        "Cameroon",
        "Nigeria",
    ]
    assert graph.node_lookup["Nigeria"] == 3


def test_build_graph_edges():
    graph = build_graph()
    assert graph.edges() == [Edge(1, 0), Edge(2, 3), Edge(3, 0)]
    assert graph.nodes[0].incoming_edges == {1, 3}
    assert graph.nodes[0].outgoing_edges == set()


def test_main_runs_headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    assert main(["--frames", "1"]) == 0