"""Depot store port — abstract interface for catalogue, stock and backlog storage.

The fulfillment engine and restock handler program against this port and
receive an instance explicitly; adapters are swapped via configuration.
"""

from abc import ABC, abstractmethod

from depot.catalogue.product import Product
from depot.fulfillment.order import Order


class DepotStore(ABC):
    """Abstract interface for depot storage adapters."""

    # -------------------------------------------------------------------
    # Catalogue
    # -------------------------------------------------------------------
    @abstractmethod
    def init_catalog(self, products: list[Product]) -> None:
        """Store every product by id and seed its stock to zero.

        Last write wins when an id is repeated or the catalogue is
        initialized again.
        """
        ...

    @abstractmethod
    def get_product(self, product_id: int) -> Product | None:
        """Return the product, or None when the id is not catalogued."""
        ...

    @abstractmethod
    def list_products(self) -> list[Product]:
        """Return all catalogued products ordered by id."""
        ...

    # -------------------------------------------------------------------
    # Stock ledger
    # -------------------------------------------------------------------
    @abstractmethod
    def add_stock(self, product_id: int, quantity: int) -> None:
        """Increase stock. Unknown ids are recorded as-is."""
        ...

    @abstractmethod
    def deduct_stock(self, product_id: int, quantity: int) -> None:
        """Decrease stock; a no-op when stock is below ``quantity``."""
        ...

    @abstractmethod
    def get_stock(self, product_id: int) -> int:
        """Return the unit count, 0 for unknown ids."""
        ...

    # -------------------------------------------------------------------
    # Pending backlog
    # -------------------------------------------------------------------
    @abstractmethod
    def get_pending_order(self) -> Order | None:
        """Return the single outstanding pending order, if any."""
        ...

    @abstractmethod
    def replace_pending_order(self, order: Order) -> None:
        """Overwrite the backlog with ``order``."""
        ...

    @abstractmethod
    def clear_pending_order(self) -> None:
        """Drop the backlog."""
        ...
