import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union

from src.data.basicTypes import EdgeIndexType, StackFrame


log = logging.getLogger('edgegraph.log')


@dataclass
class DFSState:
    # Everything the traversal mutates, passed around explicitly
    time: int = 0
    visited: set[int] = field(default_factory=set)
    discovery: dict[int, int] = field(default_factory=dict)
    finish: dict[int, int] = field(default_factory=dict)
    parent: dict[int, Union[int, None]] = field(default_factory=dict)
    tree_edges: list[EdgeIndexType] = field(default_factory=list)

    def tick(self) -> int:
        self.time += 1
        return self.time

    def discover(self, vertex: int, parent: Union[int, None]) -> None:
        self.parent[vertex] = parent
        if parent is not None:
            self.tree_edges.append((parent, vertex))
        self.discovery[vertex] = self.tick()
        self.visited.add(vertex)


@dataclass(frozen=True)
class DFSForest:
    discovery: Mapping[int, int]
    finish: Mapping[int, int]
    parent: Mapping[int, Union[int, None]]
    tree_edges: tuple[EdgeIndexType, ...]

    @property
    def roots(self) -> list[int]:
        return sorted(v for v, p in self.parent.items() if p is None)

    @property
    def max_time(self) -> int:
        return max(self.finish.values(), default=0)

    def interval(self, vertex: int) -> tuple[int, int]:
        return (self.discovery[vertex], self.finish[vertex])


def dfsVisit(G, root: int, state: DFSState) -> None:
    # Frames hold (vertex, next neighbor index); no recursion
    stack = [StackFrame(root)]
    state.discover(root, None)

    while stack:
        frame = stack[-1]
        current = frame.vertex
        adjacent = G.neighbors(current)

        if frame.neighbor_idx < len(adjacent):
            neighbor = adjacent[frame.neighbor_idx]
            frame.neighbor_idx += 1

            if neighbor not in state.visited:
                state.discover(neighbor, current)
                stack.append(StackFrame(neighbor))
            # Already visited neighbors are non-tree edges, classified later
        else:
            state.finish[current] = state.tick()
            stack.pop()


def dfsForest(G) -> DFSForest:
    if not G.is_sorted:
        log.debug('Adjacency lists not sorted yet, sorting before traversal')
        G.sortAdjacency()

    state = DFSState()
    for u in G.vertices():
        if u not in state.visited:
            log.debug(f'Starting new DFS tree at vertex {u} (time={state.time})')
            dfsVisit(G, u, state)

    return DFSForest(
        # Read-only copies, the state is not shared with the result
        discovery=MappingProxyType(dict(state.discovery)),
        finish=MappingProxyType(dict(state.finish)),
        parent=MappingProxyType(dict(state.parent)),
        tree_edges=tuple(state.tree_edges),
    )
