"""
Tests for the order state store.
"""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from conftest import OPTIONS, FakeClock
from cupcake_order.domain.models import OrderState
from cupcake_order.store import OrderStore


class TestInitialState:
    """Tests for the state a new store starts with."""

    def test_defaults(self, store):
        state = store.state
        assert state.quantity == 0
        assert state.flavor == ""
        assert state.pickup_date == ""
        assert state.price == "$0.00"

    def test_pickup_options_start_today(self, store):
        assert store.state.pickup_options == OPTIONS

    def test_uses_configured_currency(self, test_settings, clock):
        settings = test_settings.model_copy(update={"currency_symbol": "£"})
        assert OrderStore(settings=settings, clock=clock).state.price == "£0.00"


class TestSetQuantity:
    """Tests for quantity selection."""

    @pytest.mark.parametrize("quantity,price", [(1, "$2.00"), (6, "$12.00"), (12, "$24.00")])
    def test_price_without_date(self, store, quantity, price):
        store.set_quantity(quantity)
        assert store.state.quantity == quantity
        assert store.state.price == price

    def test_accepts_values_outside_offered_set(self, store):
        store.set_quantity(7)
        assert store.state.quantity == 7
        assert store.state.price == "$14.00"

    def test_keeps_surcharge_of_current_date(self, store):
        store.set_date(OPTIONS[0])
        store.set_quantity(12)
        assert store.state.price == "$27.00"

    def test_does_not_touch_flavor(self, store):
        store.set_flavor("Coffee")
        store.set_quantity(6)
        assert store.state.flavor == "Coffee"


class TestSetFlavor:
    """Tests for flavor selection."""

    def test_updates_flavor_only(self, store):
        store.set_quantity(6)
        before = store.state
        store.set_flavor("Red Velvet")
        assert store.state.flavor == "Red Velvet"
        assert store.state.price == before.price
        assert store.state.quantity == before.quantity

    def test_unknown_flavor_is_stored_as_given(self, store):
        store.set_flavor("Pistachio")
        assert store.state.flavor == "Pistachio"


class TestSetDate:
    """Tests for pickup date selection and the same day surcharge."""

    def test_first_option_adds_surcharge(self, store):
        store.set_quantity(6)
        store.set_date(OPTIONS[0])
        assert store.state.pickup_date == OPTIONS[0]
        assert store.state.price == "$15.00"

    @pytest.mark.parametrize("pickup", OPTIONS[1:])
    def test_later_options_have_no_surcharge(self, store, pickup):
        store.set_quantity(6)
        store.set_date(pickup)
        assert store.state.price == "$12.00"

    def test_unknown_date_is_stored_without_surcharge(self, store):
        store.set_quantity(1)
        store.set_date("Someday")
        assert store.state.pickup_date == "Someday"
        assert store.state.price == "$2.00"

    def test_order_of_selection_does_not_change_price(self, test_settings):
        a = OrderStore(settings=test_settings, clock=FakeClock())
        a.set_quantity(6)
        a.set_date(OPTIONS[0])
        b = OrderStore(settings=test_settings, clock=FakeClock())
        b.set_date(OPTIONS[0])
        b.set_quantity(6)
        assert a.state.price == b.state.price == "$15.00"


class TestResetOrder:
    """Tests for resetting the order."""

    def test_restores_defaults(self, store):
        store.set_quantity(12)
        store.set_flavor("Vanilla")
        store.set_date(OPTIONS[2])
        store.reset_order()
        state = store.state
        assert (state.quantity, state.flavor, state.pickup_date, state.price) == (0, "", "", "$0.00")

    def test_regenerates_options_from_call_time(self, store, clock):
        clock.today = date(2024, 1, 3)
        store.reset_order()
        assert store.state.pickup_options == ("Wed Jan 3", "Thu Jan 4", "Fri Jan 5", "Sat Jan 6")

    def test_surcharge_follows_current_options(self, store, clock):
        clock.today = date(2024, 1, 2)
        store.reset_order()
        store.set_quantity(6)
        store.set_date("Tue Jan 2")
        assert store.state.price == "$15.00"
        store.set_date("Mon Jan 1")
        assert store.state.price == "$12.00"


class TestSnapshots:
    """Tests for snapshot immutability and publishing."""

    def test_snapshot_is_frozen(self, store):
        with pytest.raises(ValidationError):
            store.state.quantity = 6

    def test_old_snapshot_is_unchanged(self, store):
        before = store.state
        store.set_quantity(6)
        assert before.quantity == 0
        assert store.state is not before

    def test_pickup_options_must_have_four_entries(self):
        with pytest.raises(ValidationError):
            OrderState(pickup_options=("Mon Jan 1",))

    def test_listeners_receive_each_snapshot(self, store):
        seen = []
        store.subscribe(seen.append)
        store.set_quantity(6)
        store.set_flavor("Coffee")
        store.reset_order()
        assert [s.quantity for s in seen] == [6, 6, 0]
        assert seen[1].flavor == "Coffee"
        assert seen[-1] is store.state

    def test_listener_sees_committed_state(self, store):
        observed = []
        store.subscribe(lambda state: observed.append(store.state is state))
        store.set_date(OPTIONS[1])
        assert observed == [True]

    def test_unsubscribe(self, store):
        seen = []
        unsubscribe = store.subscribe(seen.append)
        store.set_quantity(1)
        unsubscribe()
        unsubscribe()
        store.set_quantity(6)
        assert len(seen) == 1


class TestCalculatePrice:
    """Tests for the price helper."""

    def test_same_day(self, store):
        assert store.calculate_price(6, OPTIONS[0]) == "$15.00"

    def test_other_day(self, store):
        assert store.calculate_price(6, OPTIONS[3]) == "$12.00"

    def test_custom_strategy(self, test_settings, clock):
        class HalfPrice:
            def price(self, quantity, same_day):
                return Decimal(quantity)

        store = OrderStore(settings=test_settings, pricing=HalfPrice(), clock=clock)
        store.set_quantity(6)
        assert store.state.price == "$6.00"
