"""Stock restocking — applies incoming units and retries the pending backlog."""

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError

from depot.exceptions import EmptyRestock
from depot.fulfillment.engine import FulfillmentEngine
from depot.fulfillment.order import Shipment
from depot.shared.item import Item
from depot.store.port import DepotStore

logger = structlog.get_logger(__name__)


class RestockHandler:
    def __init__(self, store: DepotStore, engine: FulfillmentEngine):
        self.store = store
        self.engine = engine

    def apply(self, items: list[Item]) -> list[Shipment]:
        """Add stock for every catalogued product, then retry the backlog once.

        Unknown products are skipped with a warning. Failures while retrying
        the backlog are logged and never reach the caller. Returns the
        shipments dispatched by the retry.
        """
        if not items:
            raise EmptyRestock()

        for item in items:
            if self.store.get_product(item.product_id) is None:
                logger.warning("Restock skipped unknown product", product_id=item.product_id)
                continue
            self.store.add_stock(item.product_id, item.quantity)
            logger.info("Restocked product", product_id=item.product_id, quantity=item.quantity)

        pending = self.store.get_pending_order()
        self.store.clear_pending_order()
        if pending is None:
            return []

        try:
            return self.engine.process_order(pending)
        except (ValidationError, ObjectNotFoundError) as exc:
            logger.warning(
                "Pending order retry failed",
                order_id=pending.order_id,
                reason=exc.messages,
            )
            return []
