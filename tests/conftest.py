from datetime import date
from decimal import Decimal

import pytest

from cupcake_order.config import Settings
from cupcake_order.flow import FlowController
from cupcake_order.services.factory import ServiceFactory
from cupcake_order.store import OrderStore

# A Monday, so the offered pickup dates read "Mon Jan 1" .. "Thu Jan 4".
MONDAY = date(2024, 1, 1)
OPTIONS = ("Mon Jan 1", "Tue Jan 2", "Wed Jan 3", "Thu Jan 4")


class FakeClock:
    """Callable returning a settable "today"."""

    def __init__(self, today: date = MONDAY):
        self.today = today

    def __call__(self) -> date:
        return self.today


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        unit_price=Decimal("2.00"),
        same_day_surcharge=Decimal("3.00"),
        currency_symbol="$",
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(test_settings, clock):
    return OrderStore(settings=test_settings, clock=clock)


@pytest.fixture
def flow(store):
    return FlowController(store)


@pytest.fixture(autouse=True)
def fresh_services():
    ServiceFactory.reset()
    yield
    ServiceFactory.reset()
