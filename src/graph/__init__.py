class Graph:


    def __init__(self, num_vertices: int, num_edges: int = 0) -> None:
        if num_vertices < 0:
            raise ValueError(f'Vertex count must not be negative, got {num_vertices}')
        self.num_vertices = num_vertices
        self.num_edges = num_edges # Informational only, taken from the file header
        self.adj = {vertex: [] for vertex in range(1, num_vertices + 1)}
        self.is_sorted = False


    def __repr__(self) -> str:
        return f'Graph(num_vertices={self.num_vertices}, num_edges={self.num_edges})'


    def __len__(self) -> int:
        return self.num_vertices


    # Adjacency list utilities
    from ._utils import (
        _checkVertex,
        addEdge,
        sortAdjacency,
        neighbors,
        vertices,
        iterEdges,
    )

    # DOT document output
    from ._output import (
        toDigraph,
        writeDot,
    )
