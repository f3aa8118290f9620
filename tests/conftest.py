import matplotlib
matplotlib.use("Agg")

import pytest

from skynet.graph import Graph


@pytest.fixture
def small_graph():
    # 0 - 1 - 2 - 3, plus 1 - 4
    return Graph.from_edges([(0, 1), (1, 2), (2, 3), (1, 4)])
