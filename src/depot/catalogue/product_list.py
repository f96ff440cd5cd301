"""Seed catalogue of blood products and a loader for catalogue files.

Catalogue files are JSON lists shaped like
``[{"product_id": 0, "product_name": "RBC A+ Adult", "mass_g": 700}, ...]``.
"""

import json
from pathlib import Path

from depot.catalogue.product import Product

_SEED = [
    (0, "RBC A+ Adult", 700),
    (1, "RBC B+ Adult", 700),
    (2, "RBC AB+ Adult", 750),
    (3, "RBC O- Adult", 680),
    (4, "RBC A+ Child", 350),
    (5, "RBC AB+ Child", 200),
    (6, "PLT AB+", 120),
    (7, "PLT O+", 80),
    (8, "CRYO A+", 40),
    (9, "CRYO AB+", 80),
    (10, "FFP A+", 300),
    (11, "FFP B+", 300),
    (12, "FFP AB+", 300),
]


def product_list() -> list[Product]:
    """Return the built-in blood product catalogue."""
    return [Product(product_id=pid, name=name, mass_g=mass) for pid, name, mass in _SEED]


def load_products(path) -> list[Product]:
    """Read a catalogue file into Product value objects."""
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return [
        Product(
            product_id=entry["product_id"],
            name=entry["product_name"],
            mass_g=entry["mass_g"],
        )
        for entry in raw
    ]
