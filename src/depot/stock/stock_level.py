"""StockLevel aggregate — on-hand unit count for one product.

Levels are created on catalogue initialization (at zero) or on the first
restock of an uncatalogued id, and never go negative.
"""

from protean.exceptions import ValidationError
from protean.fields import Integer

from depot.domain import depot
from depot.exceptions import InsufficientStock


@depot.aggregate
class StockLevel:
    product_id = Integer(identifier=True)
    on_hand = Integer(default=0, min_value=0)

    @classmethod
    def open(cls, product_id: int) -> "StockLevel":
        return cls(product_id=product_id, on_hand=0)

    def receive(self, quantity: int) -> None:
        if quantity < 0:
            raise ValidationError({"quantity": ["Quantity cannot be negative"]})
        self.on_hand += quantity

    def deduct(self, quantity: int) -> None:
        if self.on_hand < quantity:
            raise InsufficientStock(self.product_id, quantity, self.on_hand)
        self.on_hand -= quantity
