"""
CLI front-end: walks the ordering wizard from the command line.

This module plays the part of the presentation layer: it feeds the user's
choices into the order store, advances the flow controller step by step,
builds the summary text and hands it to the share service.

Usage:
    # Six vanilla cupcakes, picked up tomorrow:
    cupcake-order --quantity 6 --flavor Vanilla --pickup 1

    # Same day pickup, without handing the summary to the share service:
    cupcake-order --quantity 12 --flavor Coffee --pickup 0 --no-send

    # Cancel once the pickup step is reached:
    cupcake-order --quantity 1 --flavor Chocolate --pickup 2 --cancel-at pickup
"""

import argparse
import logging
from datetime import date

from pydantic import ValidationError

from cupcake_order.config import PICKUP_DAYS, settings
from cupcake_order.domain.models import FLAVORS, QUANTITY_OPTIONS, OrderState, ShareRequest, Step
from cupcake_order.flow import FlowController, FlowError
from cupcake_order.services.factory import ServiceFactory
from cupcake_order.store import OrderStore

logger = logging.getLogger(__name__)

ORDER_SUBJECT = "New Cupcake Order"


def build_summary(state: OrderState) -> str:
    """Plain text order summary, as shown on the summary screen."""
    noun = "cupcake" if state.quantity == 1 else "cupcakes"
    return "\n".join(
        [
            f"Quantity: {state.quantity} {noun}",
            f"Flavor: {state.flavor}",
            f"Pickup date: {state.pickup_date}",
            f"Total: {state.price}",
        ]
    )


def run_wizard(args: argparse.Namespace, store: OrderStore) -> OrderState:
    """Drive store and flow through the wizard; returns the final snapshot."""
    flow = FlowController(store)
    flow.subscribe(lambda step: logger.info("Now on step: %s", step.screen_title))
    cancel_at = Step(args.cancel_at.upper()) if args.cancel_at else None

    store.set_quantity(args.quantity)
    flow.advance()

    while flow.current is not Step.SUMMARY:
        if flow.current is cancel_at:
            flow.cancel()
            return store.state
        if flow.current is Step.FLAVOR:
            store.set_flavor(args.flavor)
        elif flow.current is Step.PICKUP:
            store.set_date(store.state.pickup_options[args.pickup])
        logger.info("Subtotal: %s", store.state.price)
        flow.advance()

    if cancel_at is Step.SUMMARY:
        flow.cancel()
        return store.state

    if args.send:
        request = ShareRequest(subject=ORDER_SUBJECT, summary=build_summary(store.state))
        ServiceFactory.get_share_service().share(request)
    return store.state


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Order cupcakes for pickup")
    parser.add_argument(
        "--quantity",
        type=int,
        required=True,
        choices=[count for _, count in QUANTITY_OPTIONS],
        help="Number of cupcakes",
    )
    parser.add_argument("--flavor", required=True, choices=FLAVORS, help="Cupcake flavor")
    parser.add_argument(
        "--pickup",
        type=int,
        default=0,
        choices=range(PICKUP_DAYS),
        help="Pickup date index, 0 is today",
    )
    parser.add_argument(
        "--cancel-at",
        choices=["flavor", "pickup", "summary"],
        default=None,
        help="Cancel the order when this step is reached",
    )
    parser.add_argument("--today", type=date.fromisoformat, default=None, help="Override today's date (YYYY-MM-DD)")
    parser.add_argument("--no-send", dest="send", action="store_false", help="Do not share the order summary")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level, format=settings.log_format)

    today = args.today
    store = OrderStore(clock=(lambda: today) if today else date.today)
    try:
        state = run_wizard(args, store)
    except (FlowError, ValidationError):
        logger.exception("Order could not be completed")
        raise SystemExit(1)
    # Pretty-print the final snapshot using Pydantic's built-in serializer.
    print(state.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
