from typing import Iterable

from src.data.basicTypes import ClassifiedEdge, EdgeKind
from src.graph._dfs import DFSForest


def classifyEdge(u: int, v: int, forest: DFSForest) -> EdgeKind:
    '''
    Classifies the directed edge u -> v using the forest's timestamps.

    Checks run in order Tree, Back, Forward, Cross. Tree membership comes
    from the parent map only, so a parallel copy of a tree edge is
    reported as Tree as well.
    '''
    d, f = forest.discovery, forest.finish

    if forest.parent.get(v) == u:
        return EdgeKind.TREE
    if d[v] < d[u] and f[v] > f[u]:
        # v's interval strictly contains u's, so v is an ancestor
        return EdgeKind.BACK
    if d[u] < d[v] and f[u] > f[v]:
        return EdgeKind.FORWARD
    return EdgeKind.CROSS


def classifyEdges(edges: Iterable[tuple[int, int]], forest: DFSForest) -> list[ClassifiedEdge]:
    return [ClassifiedEdge(u, v, classifyEdge(u, v, forest)) for u, v in edges]


def classifyOutgoing(G, vertex: int, forest: DFSForest) -> list[ClassifiedEdge]:
    return classifyEdges(((vertex, v) for v in G.neighbors(vertex)), forest)


def classifyAll(G, forest: DFSForest) -> list[ClassifiedEdge]:
    return classifyEdges(G.iterEdges(), forest)
