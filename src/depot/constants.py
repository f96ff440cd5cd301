"""Process-wide settings for the depot domain, overridable via environment."""

import os

# Heaviest package a single shipment may carry.
MAX_SHIPMENT_WEIGHT_IN_GRAMS = int(os.environ.get("DEPOT_MAX_SHIPMENT_WEIGHT_G", "1800"))
