import math

from graph_utils import adjacency_matrix_to_graph, analyze_tour, is_complete, tour_cost
from tests.conftest import TRIANGLE


def test_tour_cost(triangle):
    assert tour_cost(triangle, [0, 1, 2, 0]) == 10
    assert tour_cost(triangle, [0, 2, 1, 0]) == 10


def test_analyze_tour_accepts_networkx_graph():
    G = adjacency_matrix_to_graph(TRIANGLE)
    assert is_complete(G)
    assert analyze_tour(G, [0, 2, 1, 0]) == (True, 10)


def test_analyze_tour_rejects_invalid_tours(four_vertices):
    for tour in ([0, 1, 2, 0], [1, 0, 2, 3, 1], [0, 1, 1, 2, 0], [0, 1, 2, 5, 0]):
        is_legitimate, cost = analyze_tour(four_vertices, tour)
        assert not is_legitimate
        assert math.isinf(cost)


def test_analyze_tour_other_start(four_vertices):
    assert analyze_tour(four_vertices, [3, 1, 0, 2, 3], start=3) == (True, 12)
    assert analyze_tour(four_vertices, [3, 1, 0, 2, 3])[0] is False
