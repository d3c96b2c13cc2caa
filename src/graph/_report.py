from typing import Any

from rich.table import Table
from termcolor import COLORS

from src.data.basicTypes import EdgeKind, edgeLabel
from src.graph._dfs import DFSForest
from src.graph._output import edgeColor


# Used when the configured edge color has no terminal equivalent (termcolor has no orange)
KIND_COLORS = {
    EdgeKind.TREE: 'red',
    EdgeKind.BACK: 'blue',
    EdgeKind.FORWARD: 'green',
    EdgeKind.CROSS: 'yellow',
}


def consoleColor(kind: EdgeKind, graph_config: dict[str, Any]) -> str:
    color = edgeColor(kind, graph_config)
    if color in COLORS:
        return color
    return KIND_COLORS[kind]


def treeEdgeLines(forest: DFSForest) -> list[str]:
    return [edgeLabel(edge) for edge in forest.tree_edges]


def timestampTable(G, forest: DFSForest) -> Table:
    table = Table(title='DFS timestamps')
    table.add_column('Vertex', justify='right')
    table.add_column('Discovery', justify='right')
    table.add_column('Finish', justify='right')
    table.add_column('Parent', justify='right')

    for vertex in G.vertices():
        parent = forest.parent[vertex]
        table.add_row(
            str(vertex),
            str(forest.discovery[vertex]),
            str(forest.finish[vertex]),
            '-' if parent is None else str(parent),
        )
    return table
