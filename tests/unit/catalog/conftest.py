from __future__ import annotations

import pytest

from inventory_db.kernel.time import FrozenClock

from dao_support import START


@pytest.fixture()
def clock() -> FrozenClock:
    return FrozenClock(START)
