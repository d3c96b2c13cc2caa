from dataclasses import dataclass
from enum import Enum


class EdgeKind(Enum):
    TREE = 'Tree'
    BACK = 'Back'
    FORWARD = 'Forward'
    CROSS = 'Cross'

    @property
    def configKey(self) -> str:
        # Key used in the EDGE_COLORS config table
        return self.value.lower()


@dataclass
class StackFrame:
    vertex: int
    neighbor_idx: int = 0


@dataclass(frozen=True)
class ClassifiedEdge:
    src: int
    dst: int
    kind: EdgeKind

    def __str__(self) -> str:
        return f'{self.src} -> {self.dst} : {self.kind.value}'


EdgeIndexType = tuple[int, int] # (vertex from, vertex to)


DEFAULT_EDGE_COLORS = {
    EdgeKind.TREE.configKey: 'red',
    EdgeKind.BACK.configKey: 'blue',
    EdgeKind.FORWARD.configKey: 'green',
    EdgeKind.CROSS.configKey: 'orange',
}


def edgeLabel(edge: EdgeIndexType) -> str:
    return f'{edge[0]} -> {edge[1]}'
