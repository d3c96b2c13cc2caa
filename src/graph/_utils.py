from typing import Iterator

from src.data.basicTypes import EdgeIndexType


def _checkVertex(self, vertex: int) -> None:
    if not 1 <= vertex <= self.num_vertices:
        raise ValueError(f'Vertex {vertex} is outside of [1, {self.num_vertices}]')


def addEdge(self, node_from: int, node_to: int) -> None:
    # Parallel edges and self-loops are kept as-is
    self._checkVertex(node_from)
    self._checkVertex(node_to)
    self.adj[node_from].append(node_to)


def sortAdjacency(self) -> None:
    # Must run once before traversal, neighbor order decides the tree edges
    for vertex in self.adj:
        self.adj[vertex].sort()
    self.is_sorted = True


def neighbors(self, vertex: int) -> list[int]:
    self._checkVertex(vertex)
    return self.adj[vertex]


def vertices(self) -> range:
    return range(1, self.num_vertices + 1)


def iterEdges(self) -> Iterator[EdgeIndexType]:
    for node_from in self.vertices():
        for node_to in self.adj[node_from]:
            yield (node_from, node_to)
