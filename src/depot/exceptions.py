"""Failures raised by catalogue, restock and fulfillment operations.

All of them build on Protean's exception hierarchy and carry a ``messages``
dict keyed by the offending field, like the ``ValidationError`` raised from
domain objects.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


class EmptyCatalog(ValidationError):
    """Catalogue initialization was attempted with no products."""

    def __init__(self):
        super().__init__({"products": ["Catalog initialization failed: product list is empty"]})


class EmptyOrder(ValidationError):
    """An order was submitted without any requested items."""

    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__({"items": [f"Order {order_id} is empty"]})


class EmptyRestock(ValidationError):
    """A restock was submitted without any items."""

    def __init__(self):
        super().__init__({"items": ["No restock items provided"]})


class ProductNotFound(ObjectNotFoundError):
    """The product identifier is not part of the catalogue."""

    def __init__(self, product_id):
        self.product_id = product_id
        # ObjectNotFoundError keeps only args; mirror ValidationError.messages
        self.messages = {"product_id": [f"Product with ID {product_id} not found"]}
        super().__init__(self.messages)


class ShipmentRejected(ValidationError):
    """A shipment failed validation and nothing was deducted."""


class InsufficientStock(ShipmentRejected):
    def __init__(self, product_id, wanted, available):
        self.product_id = product_id
        self.wanted = wanted
        self.available = available
        super().__init__(
            {
                "quantity": [
                    f"Not enough stock for product {product_id} (wanted {wanted}, have {available})"
                ]
            }
        )


class WeightExceeded(ShipmentRejected):
    def __init__(self, total_weight_g, max_weight_g):
        self.total_weight_g = total_weight_g
        self.max_weight_g = max_weight_g
        super().__init__(
            {"weight": [f"Shipment weight exceeds limit ({total_weight_g}g > {max_weight_g}g)"]}
        )
