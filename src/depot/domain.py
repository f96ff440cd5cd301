"""Depot bounded context — blood-product inventory and shipment fulfillment.

Tracks stock for a fixed catalogue of weighted products, splits incoming
orders into shipments that respect the maximum shipment weight, and keeps
the unshippable remainder as a pending order that is retried on restock.
"""

from protean.domain import Domain

from depot.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
depot = Domain(name="depot")
