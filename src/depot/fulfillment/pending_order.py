"""PendingOrder aggregate — the single-slot backlog of unshipped demand.

Only one backlog exists at a time, so every record lives under the same
slot identifier. Requested lines are kept as a JSON array of
``{"product_id", "quantity"}`` objects.
"""

import json

from protean.fields import Integer, String, Text

from depot.domain import depot
from depot.fulfillment.order import Order
from depot.shared.item import Item

BACKLOG_SLOT = "current"


@depot.aggregate
class PendingOrder:
    slot = String(identifier=True, max_length=20)
    order_id = Integer(required=True)
    lines = Text()  # JSON array of requested items

    @classmethod
    def hold(cls, order: Order) -> "PendingOrder":
        backlog = cls(slot=BACKLOG_SLOT, order_id=order.order_id)
        backlog.lines = json.dumps([item.to_dict() for item in order.items])
        return backlog

    def to_order(self) -> Order:
        items = [
            Item(product_id=line["product_id"], quantity=line["quantity"])
            for line in json.loads(self.lines or "[]")
        ]
        return Order(order_id=self.order_id, items=items)
