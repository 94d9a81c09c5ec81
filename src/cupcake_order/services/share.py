"""
Share service facade.

Hands the finished order's subject and summary to an outgoing channel (e.g.
a chooser for email or messaging apps). In production this would start the
platform's share intent; here it logs the hand-off and keeps the request in
an in-memory outbox.
"""

import logging

from cupcake_order.domain.models import ShareRequest

logger = logging.getLogger(__name__)


class ShareService:
    """Simulates sharing an order summary.

    Always succeeds. Delivery failures belong to the receiving app, not to
    the order core.
    """

    def __init__(self) -> None:
        self.outbox: list[ShareRequest] = []

    def share(self, request: ShareRequest) -> ShareRequest:
        logger.info("Sharing order %r (%d characters)", request.subject, len(request.summary))
        self.outbox.append(request)
        return request
