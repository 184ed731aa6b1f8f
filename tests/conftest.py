from __future__ import annotations

import pytest

from nncstore.adapters.grid import CartesianGrid


@pytest.fixture
def grid() -> CartesianGrid:
    return CartesianGrid(10, 10, 3)


@pytest.fixture
def masked_grid() -> CartesianGrid:
    # (3, 3, 1) and (8, 8, 3) in deck coordinates are inactive
    return CartesianGrid.with_inactive(10, 10, 3, [(2, 2, 0), (7, 7, 2)])
