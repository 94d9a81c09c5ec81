"""
Order state store, the single source of truth for the in-progress order.

The store owns the current ``OrderState`` snapshot and is its only writer.
Every mutation builds a new snapshot, commits it, and then notifies the
subscribed listeners synchronously, in registration order. The price is
recomputed whenever quantity or pickup date changes.
"""

import logging
from datetime import date
from typing import Callable

from cupcake_order.config import Settings, settings as default_settings
from cupcake_order.domain.models import OrderState
from cupcake_order.domain.pickup import pickup_options
from cupcake_order.domain.pricing import PricingStrategy, SameDayPricingStrategy, format_price

logger = logging.getLogger(__name__)

StateListener = Callable[[OrderState], None]


class OrderStore:
    """Holds the order snapshot and exposes the wizard's mutations.

    ``clock`` returns "today"; pickup options are generated from it at
    construction and on every reset.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        pricing: PricingStrategy | None = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self.settings = settings if settings is not None else default_settings
        # Strategy pattern: swap in a different pricing strategy if needed.
        self.pricing: PricingStrategy = pricing or SameDayPricingStrategy(
            self.settings.unit_price, self.settings.same_day_surcharge
        )
        self.clock = clock
        self._listeners: list[StateListener] = []
        self._state = self._initial_state()

    @property
    def state(self) -> OrderState:
        return self._state

    # ── Subscriptions ────────────────────────────────────────────

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` with every newly published snapshot.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, state: OrderState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    # ── Mutations ────────────────────────────────────────────────

    def set_quantity(self, quantity: int) -> None:
        logger.debug("Setting quantity to %d", quantity)
        self._publish(
            self._state.model_copy(
                update={
                    "quantity": quantity,
                    "price": self.calculate_price(quantity, self._state.pickup_date),
                }
            )
        )

    def set_flavor(self, flavor: str) -> None:
        logger.debug("Setting flavor to %r", flavor)
        self._publish(self._state.model_copy(update={"flavor": flavor}))

    def set_date(self, pickup_date: str) -> None:
        logger.debug("Setting pickup date to %r", pickup_date)
        self._publish(
            self._state.model_copy(
                update={
                    "pickup_date": pickup_date,
                    "price": self.calculate_price(self._state.quantity, pickup_date),
                }
            )
        )

    def reset_order(self) -> None:
        logger.info("Resetting order")
        self._publish(self._initial_state())

    # ── Helpers ──────────────────────────────────────────────────

    def calculate_price(self, quantity: int, pickup_date: str) -> str:
        """Formatted price for ``quantity`` cupcakes picked up on ``pickup_date``.

        The same day surcharge applies when ``pickup_date`` is the first of the
        store's current pickup options.
        """
        same_day = pickup_date == self._state.pickup_options[0]
        return format_price(self.pricing.price(quantity, same_day), self.settings.currency_symbol)

    def _initial_state(self) -> OrderState:
        options = pickup_options(self.clock(), self.settings.pickup_days)
        return OrderState(
            pickup_options=options,
            price=format_price(self.pricing.price(0, False), self.settings.currency_symbol),
        )
