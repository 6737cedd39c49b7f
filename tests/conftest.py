from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption("--benchmark", action="store_true", default=False, help="run benchmark tests")


def pytest_configure(config):
    config.addinivalue_line("markers", "benchmark: mark benchmark tests")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--benchmark"):
        return
    benchmark_skip_marker = pytest.mark.skip(reason="use --benchmark marker to run")
    for item in items:
        filename = Path(str(item.fspath)).name
        if "benchmark" in item.keywords or filename.startswith('test_benchmark'):
            item.add_marker(benchmark_skip_marker)


class RecordingNeighbors:
    """Neighbor function over an adjacency dict that records every call"""

    def __init__(self, edges: dict):
        self.edges = edges
        self.calls = []

    def __call__(self, node):
        self.calls.append(node)
        return list(self.edges.get(node, {}).items())


@pytest.fixture
def diamond():
    # A->B (1), A->C (4), B->C (1), B->D (5), C->D (1)
    return RecordingNeighbors({
        "A": {"B": 1.0, "C": 4.0},
        "B": {"C": 1.0, "D": 5.0},
        "C": {"D": 1.0},
    })


def grid_neighbors(node):
    """Unbounded 4-connected grid with unit edges"""
    x, y = node
    return [((x + 1, y), 1), ((x - 1, y), 1), ((x, y + 1), 1), ((x, y - 1), 1)]


@pytest.fixture
def grid():
    return grid_neighbors


@pytest.fixture
def recording():
    return RecordingNeighbors
