import pytest

from complete_graph import CompleteGraph


TRIANGLE = [
    [0, 1, 4],
    [1, 0, 5],
    [4, 5, 0],
]

# Complete graphs from a java.util.Random(42) generator drawing each upper
# triangle weight as nextInt(10) + 1, row by row
FOUR_VERTICES = [
    [0, 1, 4, 9],
    [1, 0, 5, 1],
    [4, 5, 0, 6],
    [9, 1, 6, 0],
]

ELEVEN_VERTICES = [
    [0, 1, 4, 9, 5, 1, 6, 6, 9, 10, 4],
    [1, 0, 3, 3, 7, 3, 7, 3, 7, 1, 4],
    [4, 3, 0, 10, 1, 4, 7, 4, 4, 2, 1],
    [9, 3, 10, 0, 9, 8, 7, 1, 7, 1, 6],
    [5, 7, 1, 9, 0, 8, 8, 3, 4, 4, 5],
    [1, 3, 4, 8, 8, 0, 10, 6, 4, 8, 6],
    [6, 7, 7, 7, 8, 10, 0, 5, 8, 6, 8],
    [6, 3, 4, 1, 3, 6, 5, 0, 4, 4, 1],
    [9, 7, 4, 7, 4, 4, 8, 4, 0, 9, 7],
    [10, 1, 2, 1, 4, 8, 6, 4, 9, 0, 1],
    [4, 4, 1, 6, 5, 6, 8, 1, 7, 1, 0],
]


@pytest.fixture
def triangle():
    return CompleteGraph.from_matrix(TRIANGLE)


@pytest.fixture
def four_vertices():
    return CompleteGraph.from_matrix(FOUR_VERTICES)


@pytest.fixture
def eleven_vertices():
    return CompleteGraph.from_matrix(ELEVEN_VERTICES)
