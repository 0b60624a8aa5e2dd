import operator
import networkx as nx
from typing import Sequence


class MissingEdgeError(KeyError):
    """Raised when a weight is requested for a vertex pair the graph lacks."""


def _as_weight(value) -> int:
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"edge weight {value} not an integer")
        value = int(value)
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"negative edge weight {value}")
    return value


class CompleteGraph:
    """
    Immutable, undirected, complete graph over vertices 0..n-1.

    Weights live in a flat n*n table, so a lookup is a single index operation.
    """
    __slots__ = ("_n", "_weights")

    def __init__(self, n: int, weights: Sequence[int]):
        if len(weights) != n * n:
            raise ValueError(f"expected {n * n} weights, got {len(weights)}")
        weights = [_as_weight(w) for w in weights]
        for i in range(n):
            if weights[i * n + i] != 0:
                raise ValueError(f"non-zero diagonal weight for vertex {i}")
            for j in range(i + 1, n):
                if weights[i * n + j] != weights[j * n + i]:
                    raise ValueError(f"edge weights not symmetric for ({i}, {j})")
        self._n = n
        self._weights = tuple(weights)

    @property
    def n(self) -> int:
        return self._n

    @classmethod
    def from_matrix(cls, matrix) -> "CompleteGraph":
        """
        Build a graph from a square, symmetric adjacency matrix.
        The diagonal is ignored.
        """
        rows = [list(row) for row in matrix]
        n = len(rows)
        if any(len(row) != n for row in rows):
            raise ValueError("The adjacency matrix must be square.")

        weights = [0] * (n * n)
        for i in range(n):
            for j in range(i + 1, n):
                w = _as_weight(rows[i][j])
                if w != _as_weight(rows[j][i]):
                    raise ValueError(f"edge weights not symmetric for ({i}, {j})")
                weights[i * n + j] = w
                weights[j * n + i] = w
        return cls(n, weights)

    @classmethod
    def from_networkx(cls, G: nx.Graph, weight: str = "weight") -> "CompleteGraph":
        """
        Build a graph from a networkx Graph or DiGraph.

        Nodes must be labelled 0..n-1. For a DiGraph an edge in either direction
        is enough, but if both directions exist their weights must agree.
        """
        nodes = sorted(G.nodes())
        n = len(nodes)
        if nodes != list(range(n)):
            raise ValueError("nodes not indexed from 0 to n-1")

        weights = [0] * (n * n)
        for i in range(n):
            for j in range(i + 1, n):
                forward = G.get_edge_data(i, j)
                backward = G.get_edge_data(j, i)
                if forward is None and backward is None:
                    raise MissingEdgeError(f"graph must be complete, edge ({i}, {j}) missing")
                if forward is not None and backward is not None \
                        and forward[weight] != backward[weight]:
                    raise ValueError(f"edge weights not symmetric for ({i}, {j})")
                w = _as_weight((forward if forward is not None else backward)[weight])
                weights[i * n + j] = w
                weights[j * n + i] = w
        return cls(n, weights)

    def weight(self, u: int, v: int) -> int:
        if u == v or not (0 <= u < self._n and 0 <= v < self._n):
            raise MissingEdgeError(f"no edge between {u} and {v}")
        return self._weights[u * self._n + v]

    def vertices(self) -> range:
        return range(self._n)

    def __len__(self):
        return self._n

    def __repr__(self):
        return f"CompleteGraph(n={self._n})"
