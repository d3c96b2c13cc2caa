from pathlib import Path
from typing import Any, Union

import graphviz

from src.data.basicTypes import DEFAULT_EDGE_COLORS, EdgeKind
from src.graph._classify import classifyAll
from src.graph._dfs import DFSForest


def edgeColor(kind: EdgeKind, graph_config: dict[str, Any]) -> str:
    colors = graph_config.get('EDGE_COLORS') or {}
    return colors.get(kind.configKey, DEFAULT_EDGE_COLORS[kind.configKey])


def toDigraph(self, forest: DFSForest, graph_config: Union[dict[str, Any], None] = None) -> graphviz.Digraph:
    # Builds the DOT document: every vertex, every adjacency entry colored by its edge kind
    if graph_config is None:
        graph_config = {}

    font = graph_config.get('GENERAL_FONT', 'Helvetica')
    g = graphviz.Digraph(
        name='G',
        engine='dot',
        strict=False, # Parallel edges must stay visible
        graph_attr={
            'rankdir': graph_config.get('ORIENTATION', 'TB'),
        },
        node_attr={
            'shape': graph_config.get('NODE_SHAPE', 'circle'),
            'style': 'filled',
            'color': graph_config.get('NODE_COLOR', 'lightblue'),
            'fontname': font,
        },
        edge_attr={
            'fontname': font,
        },
    )

    for vertex in self.vertices():
        g.node(str(vertex))

    for edge in classifyAll(self, forest):
        g.edge(
            str(edge.src),
            str(edge.dst),
            color=edgeColor(edge.kind, graph_config),
        )

    return g


def writeDot(
        self,
        forest: DFSForest,
        dot_path: Union[str, Path],
        graph_config: Union[dict[str, Any], None] = None,
    ) -> Path:
    dot_path = Path(dot_path)
    dot_path.parent.mkdir(parents=True, exist_ok=True)
    g = self.toDigraph(forest, graph_config)
    g.save(filename=str(dot_path))
    return dot_path
