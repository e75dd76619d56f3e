"""Rectangular grid whose vertices can be added or removed.

Edges link adjacent vertices horizontally and vertically, and also
diagonally when diagonal mode is enabled.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from itertools import product

from gridgraph.matrix import Matrix

Vertex = tuple[int, int]


class _IndexSet:
    """Insertion-ordered set whose removal moves the last element into the gap."""

    def __init__(self, items: Iterable[Vertex] = ()) -> None:
        self._items: list[Vertex] = []
        self._positions: dict[Vertex, int] = {}
        for item in items:
            self.add(item)

    def add(self, item: Vertex) -> bool:
        if item in self._positions:
            return False
        self._positions[item] = len(self._items)
        self._items.append(item)
        return True

    def discard(self, item: Vertex) -> bool:
        position = self._positions.pop(item, None)
        if position is None:
            return False
        last = self._items.pop()
        if position < len(self._items):
            self._items[position] = last
            self._positions[last] = position
        return True

    def retain(self, keep: Callable[[Vertex], bool]) -> None:
        kept = [item for item in self._items if keep(item)]
        self._items = kept
        self._positions = {item: i for i, item in enumerate(kept)}

    def clear(self) -> None:
        self._items.clear()
        self._positions.clear()

    def __contains__(self, item: object) -> bool:
        return item in self._positions

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._items)


class Grid:
    """Rectangular grid in which vertices can be added or removed.

    Depending on its density, the grid stores either its vertices or its
    absent positions; the representation switches automatically.
    Vertices are ``(x, y)`` tuples with ``0 <= x < width`` and
    ``0 <= y < height``.
    """

    def __init__(self, width: int, height: int) -> None:
        """Create an empty grid with diagonal mode disabled."""
        self.width = width
        self.height = height
        self._diagonal_mode = False
        # When dense, the grid is full by default and the set holds the
        # absent positions; otherwise it holds the vertices.
        self._dense = False
        self._exclusions = _IndexSet()

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vertex]) -> Grid:
        """Build the smallest grid holding all the given vertices."""
        items = _IndexSet()
        for x, y in vertices:
            if x < 0 or y < 0:
                raise ValueError(f"vertex {(x, y)} has a negative coordinate")
            items.add((x, y))
        width = max((x + 1 for x, _ in items), default=0)
        height = max((y + 1 for _, y in items), default=0)
        grid = cls(width, height)
        grid._exclusions = items
        grid._rebalance()
        return grid

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> Grid:
        """Build a grid whose vertices are the true cells of a matrix."""
        grid = cls(matrix.columns, matrix.rows)
        for (r, c), value in zip(matrix.indices(), matrix.values()):
            if value:
                grid.add_vertex((c, r))
        return grid

    def is_inside(self, vertex: Vertex) -> bool:
        """Return ``True`` if the position lies within the grid bounds."""
        x, y = vertex
        return 0 <= x < self.width and 0 <= y < self.height

    def enable_diagonal_mode(self) -> None:
        """Create diagonal edges between adjacent vertices."""
        self._diagonal_mode = True

    def disable_diagonal_mode(self) -> None:
        """Create only horizontal and vertical edges."""
        self._diagonal_mode = False

    def resize(self, width: int, height: int) -> bool:
        """Resize the grid; return ``True`` if any vertex was discarded."""
        truncated = False
        if width < self.width:
            truncated |= any(
                self.has_vertex(v)
                for v in product(range(width, self.width), range(self.height))
            )
        if height < self.height:
            truncated |= any(
                self.has_vertex(v)
                for v in product(range(self.width), range(height, self.height))
            )
        self._exclusions.retain(lambda v: v[0] < width and v[1] < height)
        if self._dense:
            for vertex in product(range(self.width, width), range(height)):
                self._exclusions.add(vertex)
            for vertex in product(
                range(min(self.width, width)), range(self.height, height)
            ):
                self._exclusions.add(vertex)
        self.width = width
        self.height = height
        self._rebalance()
        return truncated

    def size(self) -> int:
        """Return the number of positions in the grid."""
        return self.width * self.height

    def vertices_len(self) -> int:
        """Return the number of vertices."""
        if self._dense:
            return self.size() - len(self._exclusions)
        return len(self._exclusions)

    def __len__(self) -> int:
        return self.vertices_len()

    def add_vertex(self, vertex: Vertex) -> bool:
        """Add a vertex; return ``True`` if it was not already present."""
        if not self.is_inside(vertex):
            return False
        vertex = tuple(vertex)
        if self._dense:
            added = self._exclusions.discard(vertex)
        else:
            added = self._exclusions.add(vertex)
        self._rebalance()
        return added

    def remove_vertex(self, vertex: Vertex) -> bool:
        """Remove a vertex; return ``True`` if it was present."""
        if not self.is_inside(vertex):
            return False
        vertex = tuple(vertex)
        if self._dense:
            removed = self._exclusions.add(vertex)
        else:
            removed = self._exclusions.discard(vertex)
        self._rebalance()
        return removed

    def _borders(self) -> Iterator[Vertex]:
        width, height = self.width, self.height
        for x in range(width):
            yield (x, 0)
            yield (x, height - 1)
        for y in range(1, height - 1):
            yield (0, y)
            yield (width - 1, y)

    def add_borders(self) -> int:
        """Add the border vertices; return how many were added."""
        if self.width == 0 or self.height == 0:
            return 0
        change = self._exclusions.discard if self._dense else self._exclusions.add
        count = sum(1 for v in self._borders() if change(v))
        self._rebalance()
        return count

    def remove_borders(self) -> int:
        """Remove the border vertices; return how many were removed."""
        if self.width == 0 or self.height == 0:
            return 0
        change = self._exclusions.add if self._dense else self._exclusions.discard
        count = sum(1 for v in self._borders() if change(v))
        self._rebalance()
        return count

    def _rebalance(self) -> None:
        if len(self._exclusions) > self.width * self.height // 2:
            current = self._exclusions
            self._exclusions = _IndexSet(
                v
                for v in product(range(self.width), range(self.height))
                if v not in current
            )
            self._dense = not self._dense

    def clear(self) -> bool:
        """Remove all vertices; return ``True`` if there was at least one."""
        had_vertices = not self.is_empty()
        self._dense = False
        self._exclusions.clear()
        return had_vertices

    def fill(self) -> bool:
        """Add every position as a vertex; return ``True`` if any was added."""
        was_not_full = not self.is_full()
        self.clear()
        self.invert()
        return was_not_full

    def is_empty(self) -> bool:
        """Return ``True`` if the grid holds no vertex."""
        if self._dense:
            return len(self._exclusions) == self.size()
        return len(self._exclusions) == 0

    def is_full(self) -> bool:
        """Return ``True`` if every position is a vertex."""
        if self._dense:
            return len(self._exclusions) == 0
        return len(self._exclusions) == self.size()

    def invert(self) -> None:
        """Remove every existing vertex and add every absent one."""
        self._dense = not self._dense

    def has_vertex(self, vertex: Vertex) -> bool:
        """Return ``True`` if the vertex is present."""
        return self.is_inside(vertex) and (
            (tuple(vertex) in self._exclusions) != self._dense
        )

    def __contains__(self, vertex: object) -> bool:
        if not isinstance(vertex, tuple) or len(vertex) != 2:
            return False
        return self.has_vertex(vertex)

    def has_edge(self, v1: Vertex, v2: Vertex) -> bool:
        """Return ``True`` if both vertices are present and adjacent."""
        if not self.has_vertex(v1) or not self.has_vertex(v2):
            return False
        dx = abs(v1[0] - v2[0])
        dy = abs(v1[1] - v2[1])
        return dx + dy == 1 or (dx == 1 and dy == 1 and self._diagonal_mode)

    def edges(self) -> Iterator[tuple[Vertex, Vertex]]:
        """Yield every edge once, as a pair of vertices."""
        for y in range(self.height):
            for x in range(self.width):
                candidates = [(x + 1, y), (x, y + 1), (x + 1, y + 1)]
                if x > 0:
                    candidates.append((x - 1, y + 1))
                for other in candidates:
                    if self.has_edge((x, y), other):
                        yield ((x, y), other)

    def neighbours(self, vertex: Vertex) -> list[Vertex]:
        """Return the present vertices adjacent to ``vertex``.

        An empty list is returned if ``vertex`` is absent.
        """
        if not self.has_vertex(vertex):
            return []
        x, y = vertex
        diagonal = self._diagonal_mode
        candidates: list[Vertex] = []
        if x > 0:
            candidates.append((x - 1, y))
            if diagonal:
                if y > 0:
                    candidates.append((x - 1, y - 1))
                if y + 1 < self.height:
                    candidates.append((x - 1, y + 1))
        if x + 1 < self.width:
            candidates.append((x + 1, y))
            if diagonal:
                if y > 0:
                    candidates.append((x + 1, y - 1))
                if y + 1 < self.height:
                    candidates.append((x + 1, y + 1))
        if y > 0:
            candidates.append((x, y - 1))
        if y + 1 < self.height:
            candidates.append((x, y + 1))
        return [v for v in candidates if self.has_vertex(v)]

    def distance(self, a: Vertex, b: Vertex) -> int:
        """Return the Chebyshev distance in diagonal mode, else the Manhattan one."""
        dx = abs(a[0] - b[0])
        dy = abs(a[1] - b[1])
        return max(dx, dy) if self._diagonal_mode else dx + dy

    def __iter__(self) -> Iterator[Vertex]:
        if self._dense:
            for y in range(self.height):
                for x in range(self.width):
                    if self.has_vertex((x, y)):
                        yield (x, y)
        else:
            yield from list(self._exclusions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.vertices_len() == other.vertices_len() and all(
            a == b for a, b in zip(self, other)
        )

    __hash__ = None  # type: ignore[assignment]

    def render(self, alternate: bool = False) -> str:
        """Draw the grid with ``#``/``.``, or ``▓``/``░`` when ``alternate``."""
        present, absent = ("▓", "░") if alternate else ("#", ".")
        return "\n".join(
            "".join(
                present if self.has_vertex((x, y)) else absent
                for x in range(self.width)
            )
            for y in range(self.height)
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, vertices={list(self)!r})"