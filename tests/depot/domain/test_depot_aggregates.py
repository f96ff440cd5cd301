"""Tests for the aggregates behind the depot store."""

import json

import pytest
from depot.catalogue.catalog_entry import CatalogEntry
from depot.catalogue.product import Product
from depot.exceptions import InsufficientStock
from depot.fulfillment.order import Order
from depot.fulfillment.pending_order import BACKLOG_SLOT, PendingOrder
from depot.shared.item import Item
from depot.stock.stock_level import StockLevel
from depot.store.memory_adapter import MemoryStore
from protean import current_domain
from protean.exceptions import ValidationError


class TestCatalogEntry:
    def test_register_copies_product(self):
        entry = CatalogEntry.register(Product(product_id=6, name="PLT AB+", mass_g=120))
        assert entry.product_id == 6
        assert entry.name == "PLT AB+"
        assert entry.mass_g == 120

    def test_revise_overwrites_listing(self):
        entry = CatalogEntry.register(Product(product_id=6, name="Old", mass_g=120))
        entry.revise(Product(product_id=6, name="New", mass_g=80))
        assert (entry.name, entry.mass_g) == ("New", 80)

    def test_to_product(self):
        entry = CatalogEntry(product_id=7, name="PLT O+", mass_g=80)
        assert entry.to_product() == Product(product_id=7, name="PLT O+", mass_g=80)

    def test_zero_mass_rejected(self):
        with pytest.raises(ValidationError):
            CatalogEntry(product_id=7, name="PLT O+", mass_g=0)


class TestStockLevel:
    def test_open_starts_empty(self):
        assert StockLevel.open(3).on_hand == 0

    def test_receive_accumulates(self):
        level = StockLevel.open(3)
        level.receive(2)
        level.receive(5)
        assert level.on_hand == 7

    def test_deduct(self):
        level = StockLevel(product_id=3, on_hand=4)
        level.deduct(4)
        assert level.on_hand == 0

    def test_deduct_beyond_on_hand_rejected(self):
        level = StockLevel(product_id=3, on_hand=1)
        with pytest.raises(InsufficientStock) as exc:
            level.deduct(2)
        assert exc.value.available == 1
        assert level.on_hand == 1

    def test_negative_receipt_rejected(self):
        with pytest.raises(ValidationError):
            StockLevel.open(3).receive(-1)


class TestPendingOrder:
    def test_hold_serializes_lines(self):
        backlog = PendingOrder.hold(Order(order_id=4, items=[Item(product_id=10, quantity=2)]))
        assert backlog.slot == BACKLOG_SLOT
        assert json.loads(backlog.lines) == [{"product_id": 10, "quantity": 2}]

    def test_to_order_restores_items_in_sequence(self):
        order = Order(
            order_id=4,
            items=[Item(product_id=10, quantity=2), Item(product_id=0, quantity=1)],
        )
        assert PendingOrder.hold(order).to_order() == order


class TestRepositoryPersistence:
    def test_state_is_shared_across_store_instances(self):
        MemoryStore().add_stock(1, 3)
        assert MemoryStore().get_stock(1) == 3

    def test_stock_is_persisted_as_aggregate(self, store):
        store.add_stock(2, 5)
        level = current_domain.repository_for(StockLevel).get(2)
        assert level.on_hand == 5

    def test_backlog_occupies_a_single_slot(self, store):
        store.replace_pending_order(Order(order_id=1, items=[Item(product_id=1, quantity=1)]))
        store.replace_pending_order(Order(order_id=2, items=[Item(product_id=2, quantity=1)]))

        backlog = current_domain.repository_for(PendingOrder).get(BACKLOG_SLOT)
        assert backlog.order_id == 2

    def test_clear_removes_backlog_record(self, store):
        store.replace_pending_order(Order(order_id=1, items=[Item(product_id=1, quantity=1)]))
        store.clear_pending_order()
        store.clear_pending_order()
        assert store.get_pending_order() is None
