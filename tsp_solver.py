from abc import ABC, abstractmethod
from typing import NamedTuple, Tuple, Union

import networkx as nx

from complete_graph import CompleteGraph
from utils import DEFAULT_START_VERTEX


class InvalidConfigurationError(ValueError):
    """Raised when a solver is set up with parameters the graph cannot satisfy."""


class TspPath(NamedTuple):
    """A closed tour (start ... start) and its total cost."""
    path: Tuple[int, ...]
    cost: int


class TspSolver(ABC):
    """
    Base class for exact TSP solvers over a complete undirected graph.

    The graph may be a CompleteGraph or a networkx graph with nodes 0..n-1.
    """

    def __init__(self, graph: Union[CompleteGraph, nx.Graph], starting_vertex: int = DEFAULT_START_VERTEX):
        if isinstance(graph, nx.Graph):
            graph = CompleteGraph.from_networkx(graph)
        self.graph = graph
        self.n_of_vertices = graph.n
        if not 0 <= starting_vertex < self.n_of_vertices:
            raise InvalidConfigurationError(
                f"starting vertex {starting_vertex} does not exist in a graph "
                f"with {self.n_of_vertices} vertices"
            )
        self.starting_vertex = starting_vertex

    def trivial_path(self) -> TspPath:
        """Tour of a single-vertex graph."""
        return TspPath((self.starting_vertex, self.starting_vertex), 0)

    @abstractmethod
    def find_best_path(self) -> TspPath:
        """Return the minimum-cost Hamiltonian cycle from the starting vertex."""
