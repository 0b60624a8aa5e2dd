import pytest

from complete_graph import CompleteGraph
from naive_tsp import NaiveTsp
from tsp_solver import InvalidConfigurationError, TspPath


def test_find_best_path_trivial_graph(triangle):
    assert NaiveTsp(triangle, 0).find_best_path() == TspPath((0, 1, 2, 0), 10)


def test_find_best_path_from_vertex_0(four_vertices):
    assert NaiveTsp(four_vertices, 0).find_best_path() == TspPath((0, 1, 3, 2, 0), 12)


def test_find_best_path_from_last_vertex(four_vertices):
    assert NaiveTsp(four_vertices, 3).find_best_path() == TspPath((3, 1, 0, 2, 3), 12)


def test_starting_point_must_exist(four_vertices):
    with pytest.raises(InvalidConfigurationError):
        NaiveTsp(four_vertices, 4)


def test_single_vertex():
    assert NaiveTsp(CompleteGraph(1, [0]), 0).find_best_path() == TspPath((0, 0), 0)


def test_repeated_calls_are_identical(four_vertices):
    tsp = NaiveTsp(four_vertices, 2)
    assert tsp.find_best_path() == tsp.find_best_path()


def test_find_best_path_from_last_vertex_large(eleven_vertices):
    path = NaiveTsp(eleven_vertices, 3).find_best_path()
    assert path == TspPath((3, 6, 7, 10, 2, 4, 8, 5, 0, 1, 9, 3), 27)
