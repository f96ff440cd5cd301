"""Shared BDD fixtures and step definitions for the depot domain."""

import pytest
from depot.catalogue.product import Product
from depot.exceptions import EmptyRestock, ProductNotFound
from depot.fulfillment.order import Order
from depot.service import InventoryService
from depot.shared.item import Item
from pytest_bdd import given, parsers, then

_ERROR_CLASSES = {
    "ProductNotFound": ProductNotFound,
    "EmptyRestock": EmptyRestock,
}


class DepotWorld:
    """Mutable scenario state shared between steps."""

    def __init__(self, store):
        self.store = store
        self.products: list[Product] = []
        self.cap = 1800
        self.shipments = []
        self.error = None
        self._service = None

    @property
    def service(self) -> InventoryService:
        if self._service is None:
            self._service = InventoryService(store=self.store, max_shipment_weight_g=self.cap)
            self._service.init_catalog(self.products)
        return self._service

    def attempt(self, action):
        try:
            result = action()
        except (ProductNotFound, EmptyRestock) as exc:
            self.error = exc
            return None
        return result


@pytest.fixture()
def world(store):
    return DepotWorld(store)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse("the catalogue has product {product_id:d} weighing {mass:d}g"))
def _(world, product_id, mass):
    world.products.append(Product(product_id=product_id, name=f"Product {product_id}", mass_g=mass))


@given(parsers.cfparse("the shipment cap is {cap:d}g"))
def _(world, cap):
    world.cap = cap


@given(parsers.cfparse("product {product_id:d} has {qty:d} units in stock"))
def _(world, product_id, qty):
    world.service.store.add_stock(product_id, qty)


@given(parsers.cfparse("order {order_id:d} is already pending with {qty:d} units of product {product_id:d}"))
def _(world, order_id, qty, product_id):
    world.service.store.replace_pending_order(
        Order(order_id=order_id, items=[Item(product_id=product_id, quantity=qty)])
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.re(r"(?P<count>\d+) shipments? (?:is|are) dispatched"), converters={"count": int})
def _(world, count):
    assert len(world.shipments) == count


@then(parsers.cfparse("shipment {index:d} carries {qty:d} units of product {product_id:d}"))
def _(world, index, qty, product_id):
    assert world.shipments[index - 1].quantities().get(product_id, 0) == qty


@then(parsers.cfparse("product {product_id:d} has {qty:d} units in stock"))
def _(world, product_id, qty):
    assert world.service.stock_level(product_id) == qty


@then("there is no pending order")
def _(world):
    assert world.service.pending_order() is None


@then(parsers.cfparse("order {order_id:d} is pending with {qty:d} units of product {product_id:d}"))
def _(world, order_id, qty, product_id):
    pending = world.service.pending_order()
    assert pending is not None
    assert pending.order_id == order_id
    assert sum(item.quantity for item in pending.items if item.product_id == product_id) == qty


@then(parsers.cfparse("the action fails with {error_name}"))
def _(world, error_name):
    assert isinstance(world.error, _ERROR_CLASSES[error_name])
