"""BDD tests for rejected shipments and restocks."""

from depot.fulfillment.order import Shipment
from depot.shared.item import Item
from pytest_bdd import parsers, scenarios, when

scenarios("features/shipment_failures.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(
    parsers.cfparse(
        "a shipment for order {order_id:d} with {qty:d} units of product {product_id:d} is dispatched directly"
    )
)
def _(world, order_id, qty, product_id):
    shipment = Shipment(order_id=order_id, items=[Item(product_id=product_id, quantity=qty)])
    world.attempt(lambda: world.service.ship_package(shipment))


@when("an empty restock is applied")
def _(world):
    world.attempt(lambda: world.service.process_restock([]))
