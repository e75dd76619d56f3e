# gridgraph

Small building blocks for grids, matrices and graphs. The package needs only the
standard library.

- `gridgraph.matrix.Matrix` is a rectangular matrix of any values, stored row by row.
  It can rotate, flip and transpose itself. It can copy and set slices, list the
  neighbours of a cell and step from a cell in a direction.
- `gridgraph.grid.Grid` is a width × height set of vertices. Adjacent vertices are joined
  by edges, and diagonal edges can be turned on. The grid switches between a sparse
  and a dense form by itself.
- `gridgraph.kuhn_munkres` has `kuhn_munkres` and `kuhn_munkres_min`. They find the
  assignment of rows to columns with the maximum or the minimum total weight (the
  Hungarian algorithm).
- `gridgraph.topological_sort` has `topological_sort` and `topological_sort_into_groups`.
- `gridgraph.connected_components` has `separate_components`, `components`,
  `connected_components` and `component_index`.
- `gridgraph.kruskal` has `kruskal` and `kruskal_indices`, which give a minimum spanning tree.
- `gridgraph.geometry` has `MatrixFormatError` and `FormatErrorKind`, and the direction
  constants `N`, `S`, `E`, `W`, `NE`, `NW`, `SE`, `SW`, `DIRECTIONS_4` and `DIRECTIONS_8`.
  It also has `move_in_direction`.
- `gridgraph.utils` has `absdiff` and `uint_sqrt`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Matrices

```python
from gridgraph.matrix import Matrix
from gridgraph.geometry import NW

m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
m.rows, m.columns          # (2, 3)
m[1, 1]                    # 5
m.get((5, 5), "none")      # "none"
t = m.transposed()         # 3 rows, 2 columns
r = m.rotated_cw(1)
list(m)                    # [[1, 2, 3], [4, 5, 6]]

board = Matrix.new_square(8, ".")
list(board.in_direction((1, 1), (2, 1)))   # [(3, 2), (5, 3), (7, 4)]
list(board.in_direction((3, 2), NW))       # [(2, 1), (1, 0)]
board.move_in_direction((1, 1), (2, 1))    # (3, 2)
list(board.neighbours((0, 0), False))      # [(0, 1), (1, 0)]
```

`from_vec`, `square_from_vec`, `from_rows`, `extend` and `slice` raise `MatrixFormatError`
when the data has the wrong shape. The error's `kind` attribute is a `FormatErrorKind`.
Reading or writing a cell outside the matrix with `m[row, col]` raises `IndexError`.
`rotate_cw` and `rotate_ccw` work in place, and they raise `ValueError` on a matrix that
is not square. `rotated_cw` and `rotated_ccw` return a rotated copy of any shape.

## Grids

```python
from gridgraph.grid import Grid

g = Grid(3, 4)
g.add_borders()
print(g)
# ###
# #.#
# #.#
# ###
print(g.render(alternate=True))   # the same grid drawn with ▓ and ░

(1, 0) in g                 # True
len(g)                      # 10
g.neighbours((0, 1))        # [(0, 0), (0, 2)]
list(g.edges())
g.enable_diagonal_mode()
g.distance((0, 0), (2, 3))  # 3
```

A grid can also be built with `Grid.from_vertices(...)` from some vertices, or with
`Grid.from_matrix(...)` from the true cells of a `Matrix`.

## Assignment

```python
from gridgraph.kuhn_munkres import kuhn_munkres
from gridgraph.matrix import Matrix

weights = Matrix.from_rows([
    [100, 110, 90],
    [95, 130, 75],
    [95, 140, 65],
])
total, assignments = kuhn_munkres(weights)   # (325, [2, 0, 1])
```

The weights may also be given as a list of equal-length rows. A `ValueError` is raised
if there are more rows than columns.

## Topological sorting

```python
from gridgraph.topological_sort import topological_sort, CycleError

def successors(n):
    if n <= 7:
        return [n + 1, n + 2]
    if n == 8:
        return [9]
    return []

topological_sort([5, 1], successors)   # [1, 2, 3, 4, 5, 6, 7, 8, 9]
```

If the graph has a cycle, `topological_sort` raises `CycleError`, and its `node`
attribute is a node on the cycle. `topological_sort_into_groups` raises `GroupingError`
instead. That error's `groups` holds the groups built so far, and its `remaining` holds
the nodes that were left over.

## Components and spanning trees

```python
from gridgraph.connected_components import components
from gridgraph.kruskal import kruskal

components([[1, 2], [3], [2, 4], [5, 3]])   # [{1, 2, 4}, {3, 5}]
list(kruskal([("a", "b", 1), ("b", "c", 2), ("a", "c", 3)]))
# [('a', 'b', 1), ('b', 'c', 2)]
```

## What the package does not do

The package has no path-finding searches: no breadth-first, depth-first, Dijkstra,
A* or k-shortest-path search. It also has no flood fill over a `Matrix` or a `Grid`, no
maximum-flow computation and no cycle detection beyond what the topological sorts report.
There is no command-line tool.