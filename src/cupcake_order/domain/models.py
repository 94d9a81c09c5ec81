"""
Domain models for the cupcake ordering wizard.

``OrderState`` is an immutable Pydantic v2 snapshot: the store never mutates a
published instance, it replaces it with ``model_copy(update=...)``. Readers
holding an old snapshot therefore never observe a half-applied change.

Enums inherit from (str, Enum) so they serialize as plain strings in JSON
(e.g. "FLAVOR" instead of {"value": "FLAVOR"}).
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from cupcake_order.config import PICKUP_DAYS

# ── Catalogues offered by the presentation layer ─────────────────────

# (button label, cupcake count)
QUANTITY_OPTIONS: tuple[tuple[str, int], ...] = (
    ("One Cupcake", 1),
    ("Six Cupcakes", 6),
    ("Twelve Cupcakes", 12),
)

FLAVORS: tuple[str, ...] = (
    "Vanilla",
    "Chocolate",
    "Red Velvet",
    "Salted Caramel",
    "Coffee",
)


class Step(str, Enum):
    """The four wizard steps, in the order they are visited."""

    START = "START"
    FLAVOR = "FLAVOR"
    PICKUP = "PICKUP"
    SUMMARY = "SUMMARY"

    @property
    def screen_title(self) -> str:
        return _STEP_TITLES[self]


_STEP_TITLES: dict[Step, str] = {
    Step.START: "Cupcake",
    Step.FLAVOR: "Choose Flavor",
    Step.PICKUP: "Choose Pickup Date",
    Step.SUMMARY: "Order Summary",
}


class OrderState(BaseModel):
    """Snapshot of the in-progress order.

    ``flavor`` and ``pickup_date`` are stored as given; they are not checked
    against ``FLAVORS`` or ``pickup_options``.
    """

    model_config = ConfigDict(frozen=True)

    quantity: int = 0           # 0 means no quantity picked yet
    flavor: str = ""
    pickup_date: str = ""
    price: str = "$0.00"        # Derived from quantity and pickup_date
    pickup_options: tuple[str, ...] = Field(
        ..., min_length=PICKUP_DAYS, max_length=PICKUP_DAYS
    )


class ShareRequest(BaseModel):
    """Payload handed to the share service when the order is sent."""

    subject: str = Field(..., min_length=1)
    summary: str = Field(..., min_length=1)
