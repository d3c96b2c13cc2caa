from pathlib import Path

import pytest

from src.data.exceptions import InputError, QueryError
from src.data.loadGraph import graphFromFile, graphFromText, parseQueryVertex


TEST_GRAPHS = Path(__file__).parent.parent / 'testGraphs'


def test_loadChain():
    G = graphFromFile(TEST_GRAPHS / 'chain.txt')
    assert G.num_vertices == 3
    assert G.num_edges == 2
    assert list(G.iterEdges()) == [(1, 2), (2, 3)]


def test_tabsAndExtraTokens():
    G = graphFromText('3\t2 ignored\n1\t2 9\n 2   3 \ntrailing line\n')
    assert list(G.iterEdges()) == [(1, 2), (2, 3)]


@pytest.mark.parametrize(
    "text",
    [
        '0 0',
        '0 0\n',
        '3 0\n',
    ],
)
def test_emptyEdgeSets(text):
    G = graphFromText(text)
    assert list(G.iterEdges()) == []


@pytest.mark.parametrize(
    "text,line",
    [
        ('', None),
        ('3', 1),
        ('\n1 2', 1),
        ('a 2\n1 2\n2 3', 1),
        ('3 b\n1 2', 1),
        ('3.5 1\n1 2', 1),
        ('-1 0', 1),
        ('3 -2', 1),
        ('3 3\n1 2\n2 3', None),
        ('3 2\n1 2\n2', 3),
        ('3 2\n1 2\n\n2 3', 3),
        ('3 1\nx 2', 2),
        ('3 1\n1 y', 2),
        ('3 1\n1 4', 2),
        ('3 1\n0 1', 2),
    ],
)
def test_malformedInput(text, line):
    with pytest.raises(InputError) as exc_info:
        graphFromText(text)
    assert exc_info.value.line == line


def test_malformedFiles():
    with pytest.raises(InputError):
        graphFromFile(TEST_GRAPHS / 'bad_header.txt')
    with pytest.raises(InputError):
        graphFromFile(TEST_GRAPHS / 'missing_edges.txt')


def test_missingFile(tmp_path):
    with pytest.raises(InputError, match='File not found'):
        graphFromFile(tmp_path / 'nope.txt')


def test_lineNumberInMessage():
    with pytest.raises(InputError, match='Line 2'):
        graphFromText('3 1\n1 z')


@pytest.mark.parametrize(
    "raw,expected",
    [
        ('1', 1),
        (' 12 \n', 12),
        ('+3', 3),
        ('-4', -4),
    ],
)
def test_parseQueryVertex(raw, expected):
    assert parseQueryVertex(raw) == expected


@pytest.mark.parametrize("raw", ['', 'abc', '1.5', '1 2', '0x10'])
def test_parseQueryVertex_invalid(raw):
    with pytest.raises(QueryError):
        parseQueryVertex(raw)
