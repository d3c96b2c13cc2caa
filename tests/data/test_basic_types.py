import pytest

from src.data.basicTypes import ClassifiedEdge, DEFAULT_EDGE_COLORS, EdgeKind, StackFrame, edgeLabel


@pytest.mark.parametrize(
    "kind,expected_key",
    [
        (EdgeKind.TREE, 'tree'),
        (EdgeKind.BACK, 'back'),
        (EdgeKind.FORWARD, 'forward'),
        (EdgeKind.CROSS, 'cross'),
    ],
)
def test_EdgeKind_configKey(kind, expected_key):
    assert kind.configKey == expected_key
    assert expected_key in DEFAULT_EDGE_COLORS


def test_ClassifiedEdge_str():
    assert str(ClassifiedEdge(1, 2, EdgeKind.TREE)) == '1 -> 2 : Tree'
    assert str(ClassifiedEdge(4, 2, EdgeKind.BACK)) == '4 -> 2 : Back'


def test_edgeLabel():
    assert edgeLabel((3, 6)) == '3 -> 6'


def test_StackFrame_startsAtFirstNeighbor():
    frame = StackFrame(7)
    assert frame.vertex == 7
    assert frame.neighbor_idx == 0
