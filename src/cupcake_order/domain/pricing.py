"""
Pricing strategies (Strategy pattern).

The order store holds a reference to a ``PricingStrategy`` (a Protocol) and
calls ``price()`` whenever quantity or pickup date changes. To add another
scheme (e.g. a dozen discount), implement the protocol and pass it to the
store.

All arithmetic is done in ``Decimal`` so prices never pick up float noise.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol

_CENTS = Decimal("0.01")


class PricingStrategy(Protocol):
    """Interface for computing the price of an order.

    Any class with a ``price(quantity, same_day) -> Decimal`` method satisfies
    this protocol (structural subtyping, no inheritance required).
    """

    def price(self, quantity: int, same_day: bool) -> Decimal: ...


class SameDayPricingStrategy:
    """Default pricing: flat price per cupcake + surcharge for same day pickup.

    Examples (unit price $2.00, surcharge $3.00):
        - 6 cupcakes, picked up tomorrow:  $12.00
        - 6 cupcakes, picked up today:     $15.00
        - nothing picked yet, today:       $3.00
    """

    def __init__(self, unit_price: Decimal, same_day_surcharge: Decimal) -> None:
        self.unit_price = Decimal(unit_price)
        self.same_day_surcharge = Decimal(same_day_surcharge)

    def price(self, quantity: int, same_day: bool) -> Decimal:
        total = quantity * self.unit_price
        if same_day:
            total += self.same_day_surcharge
        return total


def format_price(amount: Decimal, currency_symbol: str = "$") -> str:
    """Render ``amount`` as currency text, e.g. ``$1,234.50`` or ``-$2.00``."""
    rounded = Decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{currency_symbol}{abs(rounded):,.2f}"
