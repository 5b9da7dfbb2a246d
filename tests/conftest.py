"""
Shared pytest fixtures for qubic tests.

Board fixtures are function-scoped factories so every test builds its own
immutable value.
"""

from pathlib import Path
import sys
from typing import Callable, Iterable

import pytest

# Ensure the repository root is on sys.path so `import qubic` works when
# running pytest without an editable install.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from qubic.models import EngineConfig
from qubic.rules.board import Board


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def board_factory() -> Callable[..., Board]:
    """Factory for boards given as lists of X and O cell indices."""

    def _create_board(
        x_cells: Iterable[int] = (),
        o_cells: Iterable[int] = (),
    ) -> Board:
        return Board.from_cells(x_cells=x_cells, o_cells=o_cells)

    return _create_board


@pytest.fixture
def engine_config_factory() -> Callable[..., EngineConfig]:
    """Factory for EngineConfig with customizable defaults."""

    def _create_config(max_depth: int = 1, hard_mode: bool = False) -> EngineConfig:
        return EngineConfig(max_depth=max_depth, hard_mode=hard_mode)

    return _create_config


# =============================================================================
# POSITION FIXTURES
# =============================================================================


@pytest.fixture
def x_to_complete_row(board_factory) -> Board:
    """X holds cells 1, 2, 3 of the first x-axis line; cell 0 wins."""
    return board_factory(x_cells=[1, 2, 3], o_cells=[21, 26, 58])


@pytest.fixture
def o_threatens_row(board_factory) -> Board:
    """O holds cells 0, 1, 2; X to move must take cell 3."""
    return board_factory(x_cells=[20, 40, 60], o_cells=[0, 1, 2])
