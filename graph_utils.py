import logging
import random
from typing import Optional, Sequence, Tuple, Union

import networkx as nx

from complete_graph import CompleteGraph
from utils import DEFAULT_START_VERTEX, MAXIMUM_EDGE_WEIGHT, MINIMUM_EDGE_WEIGHT

logger = logging.getLogger(__name__)


def adjacency_matrix_to_graph(matrix) -> nx.Graph:
    """
    Create an undirected weighted graph from an adjacency matrix.
    Only the upper half of the matrix is read.
    """
    G = nx.Graph()
    n = len(matrix)
    G.add_nodes_from(range(n))
    for i in range(n):
        for j in range(i + 1, len(matrix[i])):
            G.add_edge(i, j, weight=matrix[i][j])
    return G


def random_complete_graph(n: int, seed: Optional[int] = None,
                          min_weight: int = MINIMUM_EDGE_WEIGHT,
                          max_weight: int = MAXIMUM_EDGE_WEIGHT) -> nx.Graph:
    """
    Generate a complete graph on vertices 0..n-1 with random integer weights
    in [min_weight, max_weight]. The same seed always gives the same graph.
    """
    rng = random.Random(seed)
    G = nx.Graph()
    G.add_nodes_from(range(n))
    for i in range(n):
        for j in range(i + 1, n):
            G.add_edge(i, j, weight=rng.randint(min_weight, max_weight))
    return G


def is_complete(G: nx.Graph) -> bool:
    """
    Check whether every pair of distinct nodes is joined by an edge
    (in either direction for a DiGraph).
    """
    nodes = sorted(G.nodes())
    for i, u in enumerate(nodes):
        for v in nodes[i + 1:]:
            if not G.has_edge(u, v) and not G.has_edge(v, u):
                return False
    return True


def tour_cost(graph: CompleteGraph, tour: Sequence[int]) -> int:
    """Sum of the weights of consecutive edges along the tour."""
    return sum(graph.weight(tour[i - 1], tour[i]) for i in range(1, len(tour)))


def analyze_tour(graph: Union[CompleteGraph, nx.Graph], tour: Sequence[int],
                 start: int = DEFAULT_START_VERTEX) -> Tuple[bool, float]:
    """
    Analyze a tour for a given graph.

    Parameters:
        graph: The complete graph, as a CompleteGraph or a networkx graph.
        tour (list): The tour, starting and ending at `start`.
        start (int): The designated start vertex.

    Returns:
        is_legitimate (bool): Whether the tour is a Hamiltonian cycle from start.
        cost (float): Total cost of the tour, positive infinity if not legitimate.

    Notes:
        A tour is legitimate if the following conditions hold:
        - It has n + 1 entries, all of them vertices of the graph.
        - It begins and ends at the start vertex.
        - Every other vertex appears exactly once.
    """
    if isinstance(graph, nx.Graph):
        graph = CompleteGraph.from_networkx(graph)
    n = graph.n

    if len(tour) != n + 1:
        logger.info("tour has %d entries, expected %d", len(tour), n + 1)
        return False, float('infinity')
    if not (tour[0] == start and tour[-1] == start):
        logger.info("tour is not a cycle from %d", start)
        return False, float('infinity')
    if any(not 0 <= v < n for v in tour):
        logger.info("tour contains vertices outside the graph")
        return False, float('infinity')
    if sorted(tour[:-1]) != list(range(n)):
        logger.info("tour does not visit every vertex exactly once")
        return False, float('infinity')
    if n == 1:
        return True, 0
    return True, tour_cost(graph, tour)
