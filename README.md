# netvis

netvis reads an undirected network from a plain edge-list file, places its
nodes on a canvas with one of three layouts, and lets you explore the result
in a desktop window: zoom with the mouse wheel, pan by dragging, and press on
a node or an edge to mark it.

It has no third-party dependencies. The window is built with `tkinter`, so
the Python you run it with needs Tk support.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## The data file

Each line holds one edge: two node numbers separated by whitespace. Fields
after the second are ignored and blank lines are skipped. Nodes are numbered
from 1, and the largest number seen decides how many nodes the network has;
every edge makes each end a neighbour of the other.

    1 2
    2 3
    3 1
    3 4

A non-blank line that does not start with two whole numbers raises
`netvis.reader.LinkFormatError` (a `ValueError`) giving the line number. A
node number below 1 raises `ValueError` when the nodes are built.

## The application

Start the viewer, optionally with a file to open straight away:

    netvis
    netvis network.txt

and see its options with:

    netvis --help

The window has three menus:

- **File → Load Data File** asks for an edge-list file (`*.txt`) and loads
  it. Files that cannot be read or parsed are reported in an error dialog.
- **LayOut → LayOutType** places the nodes:
  - *random* scatters them uniformly over the canvas;
  - *force_directed* starts from random positions, lets nodes repel each
    other while edges pull neighbours together over a cooling schedule, and
    then scales the result to fill the canvas;
  - *circleforce* spaces the nodes evenly around a circle.
  Every layout resets the node colours.
- **Option → DenseEmphasize** leaves the nodes where they are and colours the
  four nodes with most neighbours red, orange, yellow and green; edges
  touching them are drawn in the same colours.

On the canvas, the mouse wheel zooms around the pointer, dragging empty
space pans the whole network, and pressing on a node or an edge draws it in
magenta until the button is released. Other nodes and edges are drawn gray.

## Using the library

The pieces behind the viewer can be used on their own.

- `netvis.reader`: `parse_links(lines)` and `read_links(path)` turn an edge
  list into `(first, second)` pairs; `LinkFormatError` reports a bad line.
- `netvis.model`: `Node` holds a node's relative position `x`, `y`, its
  `color`, `size`, `name`, `id` and zero-based `neighbors`
  (`Node.degree()` counts them). `Color` is an RGB colour whose `hex()`
  gives `#rrggbb`; the module names `DARK_GRAY`, `GRAY`, `RED`, `ORANGE`,
  `YELLOW`, `GREEN` and `MAGENTA`.
- `netvis.layout`: `random_layout(nodes, rng)`,
  `force_directed_layout(nodes, rng)` and `circle_layout(nodes)` place nodes
  in the unit square in place (`rng` is an optional `random.Random`).
  `densest_nodes(nodes)` returns the indices of the four nodes of highest
  degree, densest first (slots can repeat in small graphs, and an empty list
  raises `ValueError`); `highlight_densest(nodes)` colours them.
- `netvis.session`: `build_nodes(links)` builds the node list from one-based
  links. `Session(on_change, rng)` keeps the current network:
  `load_file(path)` and `load_links(links)` replace it, and
  `layout(kind, emphasize_dense)` applies a `LayoutKind` (`RANDOM`,
  `FORCE_DIRECTED`, `CIRCLE`, or `None` to keep positions), optionally
  colouring the densest nodes. Every change passes a copy of the nodes to
  `on_change`; the `nodes` property returns a copy too.
- `netvis.viewport`: `Viewport(width, height)` holds the on-screen state:
  `set_nodes`, `resize`, `zoom(delta, x, y)`, `press(x, y)`, `release()`,
  `drag(x, y)`, and `node_color`, `edge_color` and `edges()` for drawing.
- `netvis.app`: `NetworkVisualizationApp(root)` builds the window on a Tk
  root; `main(argv)` is the `netvis` command.

A short example:

    from netvis.reader import parse_links
    from netvis.session import build_nodes
    from netvis.layout import circle_layout, highlight_densest

    links = parse_links(["1 2", "2 3", "3 1", "3 4"])
    nodes = build_nodes(links)
    circle_layout(nodes)
    highlight_densest(nodes)
    for node in nodes:
        print(node.x, node.y, node.color.hex())

## What it does not do

netvis only reads edge lists and only shows them. It does not save layouts,
export images, or edit the network.