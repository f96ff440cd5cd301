"""In-memory store adapter — catalogue, stock ledger and backlog as depot aggregates.

Each concern is an aggregate reached through ``current_domain.repository_for``
and persisted by the domain's default memory provider, so every call needs an
active domain context. State is process-local and reset with the provider.
"""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from depot.catalogue.catalog_entry import CatalogEntry
from depot.catalogue.product import Product
from depot.exceptions import InsufficientStock
from depot.fulfillment.order import Order
from depot.fulfillment.pending_order import BACKLOG_SLOT, PendingOrder
from depot.stock.stock_level import StockLevel
from depot.store.port import DepotStore

logger = structlog.get_logger(__name__)


def _load(aggregate_cls, identifier):
    try:
        return current_domain.repository_for(aggregate_cls).get(identifier)
    except ObjectNotFoundError:
        return None


class MemoryStore(DepotStore):
    """Repository-backed store. Not safe for concurrent callers."""

    # -------------------------------------------------------------------
    # Catalogue
    # -------------------------------------------------------------------
    def init_catalog(self, products: list[Product]) -> None:
        catalog_repo = current_domain.repository_for(CatalogEntry)
        stock_repo = current_domain.repository_for(StockLevel)

        for product in products:
            entry = _load(CatalogEntry, product.product_id)
            if entry is None:
                entry = CatalogEntry.register(product)
            else:
                entry.revise(product)
            catalog_repo.add(entry)

            level = _load(StockLevel, product.product_id)
            if level is None:
                level = StockLevel.open(product.product_id)
            else:
                level.on_hand = 0
            stock_repo.add(level)

    def get_product(self, product_id: int) -> Product | None:
        entry = _load(CatalogEntry, product_id)
        return entry.to_product() if entry is not None else None

    def list_products(self) -> list[Product]:
        repo = current_domain.repository_for(CatalogEntry)
        entries = repo._dao.query.order_by("product_id").limit(None).all().items
        return [entry.to_product() for entry in entries]

    # -------------------------------------------------------------------
    # Stock ledger
    # -------------------------------------------------------------------
    def add_stock(self, product_id: int, quantity: int) -> None:
        level = _load(StockLevel, product_id) or StockLevel.open(product_id)
        level.receive(quantity)
        current_domain.repository_for(StockLevel).add(level)

    def deduct_stock(self, product_id: int, quantity: int) -> None:
        level = _load(StockLevel, product_id)
        if level is None:
            level = StockLevel.open(product_id)

        try:
            level.deduct(quantity)
        except InsufficientStock:
            # Callers validate stock right before deducting; reaching this
            # branch means that validation was bypassed.
            logger.warning(
                "Stock deduction ignored, would go negative",
                product_id=product_id,
                requested=quantity,
                available=level.on_hand,
            )
            return

        current_domain.repository_for(StockLevel).add(level)

    def get_stock(self, product_id: int) -> int:
        level = _load(StockLevel, product_id)
        return level.on_hand if level is not None else 0

    # -------------------------------------------------------------------
    # Pending backlog
    # -------------------------------------------------------------------
    def get_pending_order(self) -> Order | None:
        backlog = _load(PendingOrder, BACKLOG_SLOT)
        return backlog.to_order() if backlog is not None else None

    def replace_pending_order(self, order: Order) -> None:
        repo = current_domain.repository_for(PendingOrder)
        replacement = PendingOrder.hold(order)

        backlog = _load(PendingOrder, BACKLOG_SLOT)
        if backlog is None:
            repo.add(replacement)
            return

        backlog.order_id = replacement.order_id
        backlog.lines = replacement.lines
        repo.add(backlog)

    def clear_pending_order(self) -> None:
        backlog = _load(PendingOrder, BACKLOG_SLOT)
        if backlog is not None:
            current_domain.repository_for(PendingOrder)._dao.delete(backlog)
