import logging
from typing import List, Tuple

import networkx as nx

from power_set import ordered_power_set, subset_members
from tsp_solver import InvalidConfigurationError, TspPath, TspSolver
from utils import DEFAULT_START_VERTEX, MAXIMUM_HELD_KARP_VERTICES

logger = logging.getLogger(__name__)

# parent markers stored in the memo table
_FROM_START = -1
_UNSET = -2


class _MemoTable:
    """
    Held-Karp states for one solve.

    A state (target, visited) is the cheapest way to leave the start vertex,
    pass through exactly the vertices in `visited` (a bitmask over the
    non-start vertices) and end at `target`. Entries are flat, indexed by
    visited * width + target.
    """
    __slots__ = ("width", "parents", "costs")

    def __init__(self, width: int):
        self.width = width
        self.parents = [_UNSET] * (width << width)
        self.costs = [0] * (width << width)

    def put(self, target: int, visited: int, parent: int, cost: int) -> None:
        slot = visited * self.width + target
        if self.parents[slot] != _UNSET:
            raise RuntimeError(f"state (target={target}, visited={visited:#b}) already resolved")
        self.parents[slot] = parent
        self.costs[slot] = cost

    def _resolved_slot(self, target: int, visited: int) -> int:
        slot = visited * self.width + target
        if self.parents[slot] == _UNSET:
            raise RuntimeError(f"state (target={target}, visited={visited:#b}) not resolved yet")
        return slot

    def cost(self, target: int, visited: int) -> int:
        return self.costs[self._resolved_slot(target, visited)]

    def parent(self, target: int, visited: int) -> int:
        return self.parents[self._resolved_slot(target, visited)]


class HeldKarpTsp(TspSolver):
    """
    Held-Karp bottom-up dynamic programming, O(n^2 * 2^n) time and O(n * 2^n) memory.

    Visited sets are bitmasks over the non-start vertices taken in ascending
    order, so two sets with the same members always address the same state.
    """

    def __init__(self, graph, starting_vertex: int = DEFAULT_START_VERTEX):
        super().__init__(graph, starting_vertex)
        if self.n_of_vertices > MAXIMUM_HELD_KARP_VERTICES:
            raise InvalidConfigurationError(
                f"{self.n_of_vertices} vertices exceed the Held-Karp limit of "
                f"{MAXIMUM_HELD_KARP_VERTICES}"
            )

    def find_best_path(self) -> TspPath:
        if self.n_of_vertices == 1:
            return self.trivial_path()

        start = self.starting_vertex
        others = [v for v in self.graph.vertices() if v != start]
        width = len(others)
        memo = _MemoTable(width)
        logger.debug("Held-Karp over %d vertices from %d: %d states",
                     self.n_of_vertices, start, width << width)

        for visited in ordered_power_set(width):
            members = subset_members(visited)
            for target in range(width):
                if visited & (1 << target):
                    continue
                if not visited:
                    # no intermediate vertices: direct edge from start
                    memo.put(target, visited, _FROM_START,
                             self.graph.weight(start, others[target]))
                else:
                    parent, cost = self._minimum_cost(memo, others, others[target], visited, members)
                    memo.put(target, visited, parent, cost)

        # closing the cycle: back to start having visited every other vertex
        full_mask = (1 << width) - 1
        last, best_cost = self._minimum_cost(memo, others, start, full_mask, subset_members(full_mask))
        path = self._reconstruct_path(memo, others, last, full_mask)
        logger.debug("Held-Karp best tour: cost = %d, path = %s", best_cost, path)
        return TspPath(path, best_cost)

    def _minimum_cost(self, memo: _MemoTable, others: List[int], target_vertex: int,
                      visited: int, members: List[int]) -> Tuple[int, int]:
        """Cheapest parent (index into others) through which target_vertex is reached via visited."""
        best_parent = None
        best_cost = None
        for parent in members:
            cost = self.graph.weight(others[parent], target_vertex) \
                + memo.cost(parent, visited & ~(1 << parent))
            if best_cost is None or cost < best_cost:
                best_cost = cost
                best_parent = parent
        return best_parent, best_cost

    def _reconstruct_path(self, memo: _MemoTable, others: List[int], last: int,
                          visited: int) -> Tuple[int, ...]:
        """
        Follow parent links from the final state back to the start.

        Vertices are emitted in walk order, so the tour reads
        start, last, parent(last), ..., start. The graph is undirected, so this
        is the optimal cycle traversed backwards, with the same cost.
        """
        start = self.starting_vertex
        path = [start]
        target = last
        while target != _FROM_START:
            path.append(others[target])
            visited &= ~(1 << target)
            target = memo.parent(target, visited)
        path.append(start)
        return tuple(path)


def held_karp_tour(G: nx.Graph, start: int = DEFAULT_START_VERTEX) -> List[int]:
    """
    Solve TSP on a complete graph with Held-Karp DP.

    Input requirement:
      - G is COMPLETE, undirected (or a DiGraph with symmetric weights)
      - nodes are 0..n-1 with non-negative integer weights

    Returns:
      - tour: [start, ..., start] visiting every node exactly once
    """
    return list(HeldKarpTsp(G, start).find_best_path().path)
