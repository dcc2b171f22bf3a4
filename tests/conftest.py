"""
Root conftest.py for the visualizer tests.

Shared input arrays, a frame-collecting helper and a Flask test client.
"""

import sys
from pathlib import Path

import pytest

# Ensure the project root is in the path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


SORT_SLUGS = [
    "bubble-sort",
    "selection-sort",
    "insertion-sort",
    "merge-sort",
    "quick-sort",
]

SAMPLE_INPUTS = {
    "empty":      [],
    "single":     [42],
    "pair":       [2, 1],
    "classic":    [64, 34, 25, 12, 22, 11, 90],
    "sorted":     [1, 2, 3, 4, 5, 6],
    "reversed":   [9, 7, 5, 3, 1],
    "duplicates": [3, 1, 3, 2, 1, 3],
    "floats":     [2.5, -1.0, 0.5, 2.5, 10],
    "negatives":  [0, -5, 7, -5, 3],
}


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "slow: mark test as slow running",
    )


# ============================================================================
# Shared Fixtures
# ============================================================================


@pytest.fixture(params=SORT_SLUGS)
def sort_slug(request):
    """Every sorting driver, one at a time."""
    return request.param


@pytest.fixture(params=sorted(SAMPLE_INPUTS))
def sample_input(request):
    """Every sample input, one at a time (as a fresh list)."""
    return list(SAMPLE_INPUTS[request.param])


@pytest.fixture
def run_frames():
    """Return a helper that runs a driver by slug and materializes its frames."""
    from algorithms import load_driver

    def _run(slug, data, seed=None):
        return list(load_driver(slug)(data, seed=seed))

    return _run


@pytest.fixture
def client():
    """Flask test client with a clean run store."""
    import main

    main.app.config["TESTING"] = True
    main.RUNS.clear()
    with main.app.test_client() as c:
        yield c
    main.RUNS.clear()
