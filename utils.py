DEFAULT_START_VERTEX = 0

# Weight range used by the random complete graph generator
MINIMUM_EDGE_WEIGHT = 1
MAXIMUM_EDGE_WEIGHT = 10

# The memo table holds (n - 1) * 2 ** (n - 1) states
MAXIMUM_HELD_KARP_VERTICES = 20
