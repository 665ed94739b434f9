# emerge

emerge lays out small directed graphs with a simple spring model and draws them live in a pygame window.

Nodes start at random points inside the drawing area. On each frame the world is drawn, spring forces are set along the edges, and every node's position moves forward by one time step.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from emerge.graph import Graph
from emerge.viewer import default_window_conf, render_graph

graph = Graph()
for name in ("Albania", "Cambodia", "Cameroon", "Nigeria"):
    graph.add_node(name)

graph.add_edge_by_name("Cambodia", "Albania")
graph.add_edge_by_name("Cameroon", "Nigeria")
graph.add_edge_by_name("Nigeria", "Albania")

world = render_graph(graph, default_window_conf(), max_frames=600)
```

### `emerge.graph`

- `Graph(width=1280.0, height=720.0, rng=None)` is the graph. Its nodes are placed at random inside `width` × `height`. You can pass a `random.Random` as `rng` to get the same layout every time.
- `Graph.add_node(label)` returns the new node's id. Ids start at 0 and go up in the order nodes are added. If you reuse a label, the label then refers to the newer node.
- `Graph.add_edge(source, destination)` adds a directed edge by id. A self-loop is ignored. An unknown id raises `IndexError`.
- `Graph.add_edge_by_name(source_name, destination_name)` adds a directed edge by label. A self-loop or an unknown label is ignored.
- `Graph.edges()` returns every `Edge(source, destination)`, ordered by source id and then by destination id.
- `build_world(graph)` turns a graph into a `World` of `Body` objects plus the edges. `World.body(node_id)` raises `KeyError` if that node has no body.

### `emerge.physics`

- `spring_force(source, destination)` gives the spring force between two positions. The spring constant is 0.5 and the rest length is 100.
- `electrostatic_force(source, destination)` gives an inverse-square force with constant 100.
- Both functions return NaN components when the two points are the same.
- `physics_update(world)` sets spring forces and then calls `simulate_time_step(world)`. The time step is 0.5.
  - Only the last edge leaving each node is used.
  - A force set later replaces an earlier one. Forces are not added together.
  - Velocities are never changed.

### `emerge.renderer` and `emerge.viewer`

- `render(surface, world, font)` fills the surface with gray and draws each body as a circle. If a font is given, it also draws each body's label.
  - It then draws one white arrow for each source node, which is the last edge leaving that node.
  - `arrow_positions` calculates the arrow's geometry.
- `render_graph(graph, config=None, max_frames=None)` opens a window and animates the graph.
  - It runs until the window is closed or until `max_frames` frames have been drawn.
  - It returns the final `World`.
- `default_window_conf()` returns a `WindowConfig`: 1280×720 pixels, not resizable, titled "Emerge - Graph", 60 frames per second.

## Commands

`emerge-simulator [--seed N] [--frames N]`
: Builds and shows a random graph. It has between 1 and 19 nodes, named `node0`, `node1`, and so on. It makes between 1 and 19 edge attempts. Self-loops are dropped.

`emerge-country-chain [--frames N]`
: Shows four countries joined in a name chain. In each edge, the first country's name ends with the letter that the second country's name begins with.

`emerge-builder [PATH]`
: Reads a CSV file of countries and prints each country name as a starting candidate, with its first and last letters. The file must have the columns `Country code`, `Name`, `Official name` and `Citizen names`. `PATH` defaults to `resources/countries.csv`.

## What it does not do

- `emerge-builder` only lists candidates. It does not search for chains of country names, and it does not draw them.
- The animation uses only spring forces. The electrostatic force is available, but nodes do not repel each other on screen.