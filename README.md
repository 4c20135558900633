# etudes

Three small, self-contained studies in one package:

- `etudes.poetic`: a mutable weighted directed graph with two interchangeable
  implementations, and a poet that uses a word-adjacency graph to bridge words.
- `etudes.turtlegfx`: turtle geometry with Logo semantics (heading 0 is "up",
  positive angles turn clockwise).
- `etudes.minesweeper`: a thread-safe minesweeper board, plus a TLS server that
  prints what clients send and a client that sends what is typed.

It needs nothing outside the Python standard library (3.10 or newer). The
minesweeper client uses `select.poll`, so it runs on POSIX systems.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Graphs

`etudes.poetic.graph.Graph` is the interface;
`etudes.poetic.edges_graph.ConcreteEdgesGraph` (a vertex set and a list of
`Edge` objects) and `etudes.poetic.vertices_graph.ConcreteVerticesGraph`
(`Vertex` objects that hold their own edges) implement it. Vertex labels must
be hashable. Edge weights are non-negative integers: setting a weight of zero
removes the edge, and a negative weight raises `ValueError`.

```python
from etudes.poetic.vertices_graph import ConcreteVerticesGraph

graph = ConcreteVerticesGraph()
graph.add("a")              # True: the vertex was new
graph.set("a", "b", 3)      # 0: there was no edge before
graph.set("a", "b", 10)     # 3: the previous weight
graph.targets("a")          # {"b": 10}
graph.sources("b")          # {"a": 10}
graph.remove("b")           # True; edges to and from "b" go with it
graph.vertices()            # {"a"}
```

`vertices`, `sources` and `targets` return fresh copies; asking about a vertex
that is not in the graph gives an empty dict.

## The poet

`etudes.poetic.poet.GraphPoet(graph, poet_file_path, absolute_path=False)`
reads a corpus file into the given graph. The text is split on spaces and
newlines and lower-cased, and each pair of adjacent words adds one to the
weight of the edge between them. Unless `absolute_path` is true, the path is
appended as written to the current working directory, so it should start with
a separator (for example `"/corpus.txt"`). An unreadable file raises `OSError`;
a word of 1024 characters or more raises `ValueError`.

`poem(text)` splits the input on whitespace and, between each pair of adjacent
words, inserts the word with the heaviest two-step path from the first to the
second, if there is one. Input words keep their case.

With a corpus reading `a b c d e f g`:

```
poem("a C e G")  ->  "a b C d e f G"
```

From the command line:

```
etudes-poet [CORPUS] [--text TEXT] [--absolute]
```

prints the poem for `--text` (default `This is my theater system.`). `CORPUS`
follows the same path rule as above; pass `--absolute` for a full path.

## Turtle geometry

`etudes.turtlegfx.soup` holds the calculations and drawing routines:

```python
from etudes.turtlegfx import soup
from etudes.turtlegfx.drawable import DrawableTurtle

soup.calculate_regular_polygon_angle(5)          # 108.0
soup.calculate_polygon_sides_from_angle(108.0)   # 5
soup.calculate_heading_to_point(0.0, 0, 0, 1, 0) # 90.0
soup.calculate_headings([0, 1, 1], [0, 1, 2])    # about [45.0, 315.0]

turtle = DrawableTurtle()
soup.draw_square(turtle, 40)
```

`calculate_heading_to_point` takes integer coordinates (fractions are
truncated) and returns a clockwise turn in `[0, 360)`, or 0 if the target is
the current point. `calculate_headings` raises `ValueError` when the two
coordinate lists differ in length. `draw_regular_polygon(turtle, sides,
side_length)` moves forward and turns by the interior angle once per side.

`etudes.turtlegfx.drawable.DrawableTurtle` implements the `Turtle` interface
(`forward`, `turn`, `color`). It records each call as an `Action` and each move
as a coloured `LineSegment`, exposed through the read-only `actions`, `lines`,
`position`, `heading` and `pen_color` properties. `forward` records a segment
but does not move `position`. `PenColor`, `Point`, `LineSegment`, `ActionType`
and `Action` live in `etudes.turtlegfx.geometry`; the angle helpers
(`double_modulo`, `double_round`, `radian_to_deg`, `deg_to_radian`) live in
`etudes.turtlegfx.anglemath`.

```
etudes-turtle [--side N]
```

draws a square (side 40 by default) with a fresh turtle and prints each
recorded action. Nothing is drawn on screen.

## Minesweeper

`etudes.minesweeper.board.BoardImplementation(y_size, x_size, bomb_count,
seed=None)` builds a board whose bombs are placed from the seed, so the same
seed gives the same board; with no seed the current time is used. A size that
is not positive or a negative bomb count raises `ValueError`; more bombs than
tiles raises `TooManyBombsError`, a subclass of `ValueError`.

```python
from etudes.minesweeper.board import BoardImplementation

board = BoardImplementation(10, 10, 10, 0)
board.flag(0, 5)
board.dig(0, 9)     # True unless a bomb was dug
print(board.print())
```

In the printed board `-` is untouched, `F` is flagged, a blank is a dug tile
with no bombs around it, and a digit counts the neighbouring bombs. Digging an
empty tile with no neighbouring bombs opens the area around it. Digging out of
bounds, or digging a flagged or already dug tile, changes nothing and returns
`True`. Digging a bomb returns `False`, and the neighbours' counts drop by one.
`deflag` removes a flag. `print_debug()` returns the raw `front`, `back` and
`boundaries` layers as strings, for debugging. Boards support `copy.copy` and
`copy.deepcopy`.

### Server and client

`etudes.minesweeper.server.MinesweeperServer(port, sink=None,
poll_interval=1.0)` listens over TLS; `start()` accepts clients on a background
thread, one thread per client, and passes every chunk a client sends to `sink`
(standard output by default). `stop()` waits for the client threads and closes
the socket. It can also be used as a context manager, and its `port` property
gives the bound port once started (port 0 picks a free one).

`etudes.minesweeper.client.MinesweeperClient(port, server_ip, stdin=None,
poll_interval=1.0)` connects over TLS; `connect()` forwards input until the
line `disconnect` is sent, input ends, sending fails or the server closes the
connection. `disconnect()` asks a running `connect()` to end.

Both sides read `cert.pem` (and the server `key.pem`) from the working
directory; the client trusts that certificate directly. Setup failures raise
`etudes.minesweeper.net.NetError`.

```
etudes-minesweeper-server [--port PORT]
etudes-minesweeper-client [--port PORT] [--host HOST]
```

The port defaults to 9023 and the host to `localhost`. The server runs until a
line is read from its standard input.

### What it does not do

The server does not run a game: it does not hold a board, interpret commands
or reply to clients. It only prints what clients send. Playing means using
`BoardImplementation` directly in Python. No certificate or key is generated
for you, and no poet corpus is included.