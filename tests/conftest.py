"""Root-level pytest fixtures for the signgrid test suite.

Configuration fixtures follow the Pydantic-based architecture: tests
build configs through resolve_config instead of raw dicts.
"""

import io

import numpy as np
import pytest

from signgrid.schemas import ParamConfig, UserConfig, resolve_config


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for configs with UserConfig-compatible overrides.

    Examples
    --------
    >>> def test_small_grid(make_config):
    ...     config = make_config(ROWS=2, COLS=3, SEED=1)
    ...     assert config.generator.rows == 2
    """
    def _make(**user_overrides):
        if user_overrides:
            return resolve_config(param_config, UserConfig(**user_overrides), None)
        return resolve_config(param_config, None, None)

    return _make


# =============================================================================
# Grid Fixtures
# =============================================================================

@pytest.fixture
def rng():
    """Seeded numpy generator for reproducible grids."""
    return np.random.default_rng(12345)


@pytest.fixture
def tie_grid():
    """Minimum 1 appears twice, in different rows."""
    return [[5, 1], [1, 3]]


@pytest.fixture
def ragged_grid():
    """Rows of unequal length."""
    return [[3, 3, 3, -1], [5, -5, 5]]


@pytest.fixture
def mixed_grid():
    """Heterogeneous cells: NaN, None, strings and bools mixed with numbers."""
    return [
        [float("nan"), "x", 4, None],
        [True, -2, 0],
        [],
        [-2.0, 7],
    ]


# =============================================================================
# Stream Fixtures
# =============================================================================

class FakeTTY(io.StringIO):
    """StringIO that claims to be a terminal."""

    def isatty(self):
        return True


@pytest.fixture
def text_stream():
    """In-memory, non-interactive output stream."""
    return io.StringIO()


@pytest.fixture
def tty_stream():
    """In-memory stream that reports itself as interactive."""
    return FakeTTY()
