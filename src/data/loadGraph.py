import re
from pathlib import Path
from typing import Union

from src.data.exceptions import InputError, QueryError
from src.graph import Graph


INTEGER_RE = re.compile(r'[+-]?\d+')


def _parseInt(token: str) -> Union[int, None]:
    if INTEGER_RE.fullmatch(token):
        return int(token)
    return None


def parseQueryVertex(raw: str) -> int:
    vertex = _parseInt(raw.strip())
    if vertex is None:
        raise QueryError(f'Invalid vertex number: "{raw.strip()}"')
    return vertex


def graphFromLines(lines: list[str]) -> Graph:
    '''
    Builds a Graph from the lines of a graph file.

    Line 1 holds "<N> <M>", the next M lines hold one "<u> <v>" edge each.
    Extra tokens on a line and lines after the last edge are ignored.
    Nothing is built until every edge line has been validated.
    '''
    if len(lines) < 1:
        raise InputError('Empty file.')

    header = lines[0].split()
    if len(header) < 2:
        raise InputError('Invalid format, expected "<vertex count> <edge count>".', line=1)

    num_vertices = _parseInt(header[0])
    if num_vertices is None or num_vertices < 0:
        raise InputError(f'Invalid vertex count: "{header[0]}".', line=1)
    num_edges = _parseInt(header[1])
    if num_edges is None or num_edges < 0:
        raise InputError(f'Invalid edge count: "{header[1]}".', line=1)

    if len(lines) < num_edges + 1:
        raise InputError(f'Not enough edges in file: expected {num_edges}, found {len(lines) - 1}.')

    edges = []
    for i in range(1, num_edges + 1):
        parts = lines[i].split()
        if len(parts) < 2:
            raise InputError(f'Invalid format on edge {i}.', line=i + 1)

        node_from = _parseInt(parts[0])
        if node_from is None:
            raise InputError(f'Invalid source on edge {i}: "{parts[0]}".', line=i + 1)
        node_to = _parseInt(parts[1])
        if node_to is None:
            raise InputError(f'Invalid destination on edge {i}: "{parts[1]}".', line=i + 1)

        for vertex in (node_from, node_to):
            if not 1 <= vertex <= num_vertices:
                raise InputError(f'Vertex {vertex} on edge {i} is outside of [1, {num_vertices}].', line=i + 1)

        edges.append((node_from, node_to))

    G = Graph(num_vertices, num_edges)
    for node_from, node_to in edges:
        G.addEdge(node_from, node_to)
    return G


def graphFromText(text: str) -> Graph:
    return graphFromLines(text.splitlines())


def graphFromFile(graph_path: Union[str, Path]) -> Graph:
    graph_path = Path(graph_path)
    if not graph_path.is_file():
        raise InputError(f'File not found: {graph_path}')

    try:
        with open(graph_path, 'r') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f'Could not read {graph_path}: {e}') from e

    return graphFromText(text)
