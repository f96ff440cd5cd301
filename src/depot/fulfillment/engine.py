"""Fulfillment engine — splits orders into weight-bounded shipments.

One pass over an order walks its lines in the given sequence and packs the
shippable units greedily into the open shipment, dispatching it whenever the
next unit would push it over the maximum shipment weight. Units that cannot
be shipped (not enough stock, or a rejected shipment) form the pending
remainder, which replaces the store's backlog at the end of the pass.

Shipments already dispatched stay dispatched if the pass aborts on an
unknown product; only the open, undispatched shipment is discarded.
"""

import structlog

from depot.catalogue.catalog import Catalog
from depot.catalogue.product import Product
from depot.constants import MAX_SHIPMENT_WEIGHT_IN_GRAMS
from depot.exceptions import (
    EmptyOrder,
    InsufficientStock,
    ProductNotFound,
    ShipmentRejected,
    WeightExceeded,
)
from depot.fulfillment.order import Order, Shipment
from depot.shared.item import Item
from depot.store.port import DepotStore
from depot.utils.logging import log_context

logger = structlog.get_logger(__name__)


class FulfillmentEngine:
    def __init__(self, store: DepotStore, max_shipment_weight_g: int | None = None):
        self.store = store
        self.catalog = Catalog(store)
        self.max_shipment_weight_g = (
            MAX_SHIPMENT_WEIGHT_IN_GRAMS if max_shipment_weight_g is None else max_shipment_weight_g
        )

    # -------------------------------------------------------------------
    # Order processing
    # -------------------------------------------------------------------
    def process_order(self, order: Order) -> list[Shipment]:
        """Ship what stock allows and backlog the rest.

        Returns the shipments dispatched during this pass. Raises
        ``EmptyOrder`` before touching any state, and ``ProductNotFound``
        when a line names a product outside the catalogue.
        """
        if not order.items:
            raise EmptyOrder(order.order_id)

        with log_context(order_id=order.order_id):
            packing = _PackingPass(self, order.order_id)
            for requested in order.items:
                try:
                    product = self.catalog.find(requested.product_id)
                except ProductNotFound:
                    logger.error(
                        "Order aborted on unknown product",
                        product_id=requested.product_id,
                        shipments_dispatched=len(packing.shipped),
                    )
                    raise
                packing.pack(product, requested.quantity)
            packing.flush()

            if packing.pending:
                remainder = Order(order_id=order.order_id, items=packing.pending)
                self.store.replace_pending_order(remainder)
                logger.info("Order remainder backlogged", pending=[item.to_dict() for item in remainder.items])
            else:
                self.store.clear_pending_order()
                logger.info("Order fully shipped", shipment_count=len(packing.shipped))

        return packing.shipped

    # -------------------------------------------------------------------
    # Shipment execution
    # -------------------------------------------------------------------
    def ship_package(self, shipment: Shipment) -> Shipment:
        """Validate a shipment against catalogue, weight cap and stock, then deduct.

        Validation runs line by line and stops at the first failure; stock
        is only deducted once every line has passed. Returns the dispatched
        shipment carrying its total weight.
        """
        total_weight = 0
        wanted: dict[int, int] = {}

        for item in shipment.items:
            product = self.store.get_product(item.product_id)
            if product is None:
                logger.error("Unknown product during shipment", order_id=shipment.order_id, product_id=item.product_id)
                raise ProductNotFound(item.product_id)

            total_weight += product.mass_g * item.quantity
            if total_weight > self.max_shipment_weight_g:
                logger.error(
                    "Shipment exceeds weight limit",
                    order_id=shipment.order_id,
                    total_weight_g=total_weight,
                    max_weight_g=self.max_shipment_weight_g,
                )
                raise WeightExceeded(total_weight, self.max_shipment_weight_g)

            # Lines for the same product draw on the same stock
            wanted[item.product_id] = wanted.get(item.product_id, 0) + item.quantity
            stock = self.store.get_stock(item.product_id)
            if stock < wanted[item.product_id]:
                logger.error(
                    "Insufficient stock for shipment",
                    order_id=shipment.order_id,
                    product_id=item.product_id,
                    wanted=wanted[item.product_id],
                    available=stock,
                )
                raise InsufficientStock(item.product_id, wanted[item.product_id], stock)

        for item in shipment.items:
            self.store.deduct_stock(item.product_id, item.quantity)

        dispatched = Shipment(order_id=shipment.order_id, items=shipment.items, total_weight_g=total_weight)
        logger.info("Shipped order", **dispatched.to_dict())
        return dispatched


class _PackingPass:
    """Greedy packing state for a single pass over one order."""

    def __init__(self, engine: FulfillmentEngine, order_id: int):
        self.engine = engine
        self.order_id = order_id
        self.parcel: list[Item] = []
        self.parcel_weight = 0
        self.held: dict[int, int] = {}  # units per product in the open parcel
        self.pending: list[Item] = []
        self.shipped: list[Shipment] = []

    def pack(self, product: Product, quantity: int) -> None:
        pid = product.product_id
        cap = self.engine.max_shipment_weight_g

        available = self.engine.store.get_stock(pid) - self.held.get(pid, 0)
        shippable = max(0, min(quantity, available))

        remaining = shippable
        while remaining > 0:
            fits = (cap - self.parcel_weight) // product.mass_g
            if fits <= 0:
                self.flush()
                # A unit heavier than the cap still gets a parcel of its own;
                # it is rejected on dispatch and ends up pending.
                fits = max(cap // product.mass_g, 1)

            take = min(fits, remaining)
            self.parcel.extend(Item(product_id=pid, quantity=1) for _ in range(take))
            self.parcel_weight += take * product.mass_g
            self.held[pid] = self.held.get(pid, 0) + take
            remaining -= take

        if quantity > shippable:
            self.pending.append(Item(product_id=pid, quantity=quantity - shippable))

    def flush(self) -> None:
        if not self.parcel:
            return

        candidate = Shipment(order_id=self.order_id, items=self.parcel)
        try:
            self.shipped.append(self.engine.ship_package(candidate))
        except (ProductNotFound, ShipmentRejected) as exc:
            logger.warning(
                "Shipment rejected, units requeued",
                unit_count=len(self.parcel),
                reason=exc.messages,
            )
            self.pending.extend(self.parcel)

        self.parcel = []
        self.parcel_weight = 0
        self.held = {}
