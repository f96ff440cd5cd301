"""Depot — blood-product inventory and shipment fulfillment."""
