import logging
from typing import List, Optional, Set

from tsp_solver import TspPath, TspSolver

logger = logging.getLogger(__name__)


class _BestTour:
    __slots__ = ("cost", "path")

    def __init__(self):
        self.cost: Optional[int] = None
        self.path: Optional[List[int]] = None


class NaiveTsp(TspSolver):
    """
    Exhaustive depth-first search over all tours, O(n!).
    Only meant as a reference for validating faster solvers on small graphs.
    """

    def find_best_path(self) -> TspPath:
        if self.n_of_vertices == 1:
            return self.trivial_path()

        start = self.starting_vertex
        best = _BestTour()
        self._extend([start], {start}, 0, best)
        return TspPath(tuple(best.path), best.cost)

    def _extend(self, current_path: List[int], visited: Set[int], path_cost: int, best: _BestTour) -> None:
        root = current_path[-1]
        if len(current_path) == self.n_of_vertices:
            # all vertices visited, back to the starting vertex
            final_cost = path_cost + self.graph.weight(root, self.starting_vertex)
            if best.cost is None or final_cost < best.cost:
                best.cost = final_cost
                best.path = current_path + [self.starting_vertex]
                logger.debug("Better solution: cost = %d, path = %s", best.cost, best.path)
            return

        for next_to_visit in self.graph.vertices():
            if next_to_visit in visited:
                continue
            current_path.append(next_to_visit)
            visited.add(next_to_visit)
            self._extend(current_path, visited,
                         path_cost + self.graph.weight(root, next_to_visit), best)
            visited.remove(next_to_visit)
            current_path.pop()
