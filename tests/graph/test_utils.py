import pytest

from src.graph import Graph


def makeGraph(num_vertices, edges):
    G = Graph(num_vertices, len(edges))
    for u, v in edges:
        G.addEdge(u, v)
    return G


def test_adjacencyCoversEveryVertex():
    G = Graph(4)
    assert list(G.adj.keys()) == [1, 2, 3, 4]
    assert all(neighbors == [] for neighbors in G.adj.values())
    assert len(G) == 4


def test_sortAdjacencyKeepsParallelEdges():
    G = makeGraph(3, [(1, 3), (1, 2), (1, 3), (2, 2)])
    G.sortAdjacency()

    assert G.neighbors(1) == [2, 3, 3]
    assert G.neighbors(2) == [2]
    assert G.neighbors(3) == []
    assert G.is_sorted


def test_iterEdgesVertexOrder():
    G = makeGraph(3, [(3, 1), (1, 3), (1, 2)])
    G.sortAdjacency()
    assert list(G.iterEdges()) == [(1, 2), (1, 3), (3, 1)]


@pytest.mark.parametrize(
    "edge",
    [
        (0, 1),
        (1, 4),
        (-1, 2),
        (5, 5),
    ],
)
def test_addEdgeOutOfRange(edge):
    G = Graph(3)
    with pytest.raises(ValueError):
        G.addEdge(*edge)


def test_negativeVertexCount():
    with pytest.raises(ValueError):
        Graph(-1)


def test_emptyGraph():
    G = Graph(0)
    G.sortAdjacency()
    assert list(G.vertices()) == []
    assert list(G.iterEdges()) == []


@pytest.mark.parametrize("vertex", [0, 4, -1])
def test_neighborsOutOfRange(vertex):
    G = makeGraph(3, [(1, 2)])
    with pytest.raises(ValueError):
        G.neighbors(vertex)
