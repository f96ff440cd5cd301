"""Inventory service — application entry point wiring catalogue, engine and restock.

Every operation runs synchronously against one store. The service owns no
state of its own; pass a store explicitly or fall back to the process-wide
one from ``depot.store.get_store()``.
"""

from depot.catalogue.catalog import Catalog
from depot.catalogue.product import Product
from depot.fulfillment.engine import FulfillmentEngine
from depot.fulfillment.order import Order, Shipment
from depot.shared.item import Item
from depot.stock.restock import RestockHandler
from depot.store import get_store
from depot.store.port import DepotStore


class InventoryService:
    def __init__(self, store: DepotStore | None = None, max_shipment_weight_g: int | None = None):
        self.store = store if store is not None else get_store()
        self.catalog = Catalog(self.store)
        self.engine = FulfillmentEngine(self.store, max_shipment_weight_g)
        self.restock = RestockHandler(self.store, self.engine)

    def init_catalog(self, products: list[Product]) -> None:
        self.catalog.initialize(products)

    def find_product(self, product_id: int) -> Product:
        return self.catalog.find(product_id)

    def process_order(self, order: Order) -> list[Shipment]:
        return self.engine.process_order(order)

    def process_restock(self, items: list[Item]) -> list[Shipment]:
        return self.restock.apply(items)

    def ship_package(self, shipment: Shipment) -> Shipment:
        return self.engine.ship_package(shipment)

    def pending_order(self) -> Order | None:
        """The unshipped remainder of the latest order pass, if any."""
        return self.store.get_pending_order()

    def stock_level(self, product_id: int) -> int:
        return self.store.get_stock(product_id)

    def product_list(self) -> list[str]:
        """One display line per catalogued product."""
        return [
            f"Product ID: {product.product_id}, Name: {product.name}, Mass: {product.mass_g}g"
            for product in self.catalog.products()
        ]
