"""Catalogue access — initialization and product lookup over a depot store."""

import structlog

from depot.catalogue.product import Product
from depot.exceptions import EmptyCatalog, ProductNotFound
from depot.store.port import DepotStore

logger = structlog.get_logger(__name__)


class Catalog:
    def __init__(self, store: DepotStore):
        self.store = store

    def initialize(self, products: list[Product]) -> None:
        """Load the product list and seed every product's stock to zero."""
        if not products:
            raise EmptyCatalog()

        self.store.init_catalog(list(products))
        logger.info("Catalog initialized", product_count=len(products))

    def lookup(self, product_id: int) -> Product | None:
        return self.store.get_product(product_id)

    def find(self, product_id: int) -> Product:
        product = self.store.get_product(product_id)
        if product is None:
            raise ProductNotFound(product_id)
        return product

    def products(self) -> list[Product]:
        return self.store.list_products()
