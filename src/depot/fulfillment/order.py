"""Order and Shipment records exchanged with the fulfillment engine."""

from dataclasses import dataclass, field

from depot.shared.item import Item


@dataclass(frozen=True)
class Order:
    """A customer order, or the pending remainder of one."""

    order_id: int
    items: tuple[Item, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    def to_dict(self) -> dict:
        return {
            "order_id": self.order_id,
            "requested": [item.to_dict() for item in self.items],
        }


@dataclass(frozen=True)
class Shipment:
    """A single physical package for an order.

    ``total_weight_g`` is filled in once the shipment has been validated and
    dispatched; a candidate shipment built by the engine carries 0.
    """

    order_id: int
    items: tuple[Item, ...] = field(default_factory=tuple)
    total_weight_g: int = 0

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    def quantities(self) -> dict[int, int]:
        """Units per product id across all lines of the shipment."""
        totals: dict[int, int] = {}
        for item in self.items:
            totals[item.product_id] = totals.get(item.product_id, 0) + item.quantity
        return totals

    def to_dict(self) -> dict:
        return {
            "order_id": self.order_id,
            "shipped": [item.to_dict() for item in self.items],
            "total_weight_g": self.total_weight_g,
        }
