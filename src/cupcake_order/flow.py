"""
Navigation flow controller for the ordering wizard.

Steps are visited in a fixed order:

    START -> FLAVOR -> PICKUP -> SUMMARY

The controller keeps a back stack of visited steps. ``advance`` pushes the
next step, ``navigate_up`` pops one step without touching the order, and
``cancel`` resets the order and drops everything above START.
"""

import logging
from typing import Callable

from cupcake_order.domain.models import Step
from cupcake_order.store import OrderStore

logger = logging.getLogger(__name__)

StepListener = Callable[[Step], None]

# Forward transitions; SUMMARY has no next step.
NEXT_STEP: dict[Step, Step] = {
    Step.START: Step.FLAVOR,
    Step.FLAVOR: Step.PICKUP,
    Step.PICKUP: Step.SUMMARY,
}


class FlowError(Exception):
    """Raised when a step transition is not possible from the current step."""


class FlowController:
    """Tracks the active wizard step on behalf of the presentation layer."""

    def __init__(self, store: OrderStore) -> None:
        self.store = store
        self._back_stack: list[Step] = [Step.START]
        self._listeners: list[StepListener] = []

    @property
    def current(self) -> Step:
        return self._back_stack[-1]

    @property
    def can_navigate_back(self) -> bool:
        return len(self._back_stack) > 1

    @property
    def back_stack(self) -> tuple[Step, ...]:
        return tuple(self._back_stack)

    def subscribe(self, listener: StepListener) -> Callable[[], None]:
        """Call ``listener`` with the new current step after every transition."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.current)

    # ── Transitions ──────────────────────────────────────────────

    def advance(self) -> Step:
        next_step = NEXT_STEP.get(self.current)
        if next_step is None:
            raise FlowError(f"No step after {self.current.value}")
        logger.debug("Advancing %s -> %s", self.current.value, next_step.value)
        self._back_stack.append(next_step)
        self._notify()
        return next_step

    def navigate_up(self) -> Step:
        """Return to the previous step, keeping the order as it is."""
        if self.can_navigate_back:
            popped = self._back_stack.pop()
            logger.debug("Navigating up %s -> %s", popped.value, self.current.value)
            self._notify()
        return self.current

    def cancel(self) -> Step:
        logger.info("Cancelling order at step %s", self.current.value)
        self.store.reset_order()
        del self._back_stack[1:]
        self._notify()
        return self.current
