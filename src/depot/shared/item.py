"""Item value object — a product identifier paired with a unit count.

Used for order lines, restock lines, shipment lines and pending remainders.
"""

from protean.fields import Integer

from depot.domain import depot


@depot.value_object
class Item:
    product_id = Integer(required=True)
    quantity = Integer(required=True, min_value=0)
