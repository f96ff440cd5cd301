"""Depot command-line driver.

Runs the catalogue and fulfillment flow in-process against a fresh memory
store.

Usage:
    depot [--catalog products.json] [--max-weight 1800] products
    depot simulate [--restock 0:2 10:4] [--order-id 123] [--item 0:1 --item 10:2]
"""

import argparse
import json
import sys

from protean.exceptions import ObjectNotFoundError, ValidationError

from depot.catalogue.product_list import load_products, product_list
from depot.domain import depot
from depot.fulfillment.order import Order
from depot.service import InventoryService
from depot.shared.item import Item
from depot.store.memory_adapter import MemoryStore


def parse_item(value: str) -> tuple[int, int]:
    """Parse a ``PRODUCT_ID:QUANTITY`` pair."""
    try:
        product_id, quantity = value.split(":", 1)
        return int(product_id), int(quantity)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected PRODUCT_ID:QUANTITY, got {value!r}") from None


def _build_service(args) -> InventoryService | None:
    """Load the catalogue into a fresh service; None when loading fails."""
    try:
        products = load_products(args.catalog) if args.catalog else product_list()
        service = InventoryService(store=MemoryStore(), max_shipment_weight_g=args.max_weight)
        service.init_catalog(products)
    except (OSError, KeyError, TypeError, ValueError, ValidationError) as exc:
        print(f"Failed to load catalogue: {exc}", file=sys.stderr)
        return None
    return service


def list_products(args) -> int:
    service = _build_service(args)
    if service is None:
        return 1

    for line in service.product_list():
        print(line)
    return 0


def simulate(args) -> int:
    service = _build_service(args)
    if service is None:
        return 1

    try:
        restock = [Item(product_id=pid, quantity=qty) for pid, qty in args.restock]
        order = Order(
            order_id=args.order_id,
            items=[Item(product_id=pid, quantity=qty) for pid, qty in args.item],
        )
        service.process_restock(restock)
        shipments = service.process_order(order)
    except (ValidationError, ObjectNotFoundError) as exc:
        print(f"Failed to process order: {exc.messages}", file=sys.stderr)
        return 1

    for shipment in shipments:
        print(json.dumps(shipment.to_dict()))

    pending = service.pending_order()
    if pending is not None:
        print(json.dumps({"pending": pending.to_dict()}))
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Depot inventory and fulfillment")
    parser.add_argument("--catalog", help="JSON catalogue file (default: built-in blood products)")
    parser.add_argument(
        "--max-weight",
        type=int,
        default=None,
        help="Maximum shipment weight in grams (default: DEPOT_MAX_SHIPMENT_WEIGHT_G or 1800)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("products", help="Print the product catalogue")

    simulate_parser = subparsers.add_parser("simulate", help="Restock, then process one order")
    simulate_parser.add_argument(
        "--restock",
        type=parse_item,
        nargs="*",
        default=[(0, 2), (10, 4)],
        metavar="ID:QTY",
    )
    simulate_parser.add_argument("--order-id", type=int, default=123)
    simulate_parser.add_argument(
        "--item",
        type=parse_item,
        action="append",
        metavar="ID:QTY",
        help="Order line; repeat for several lines",
    )

    args = parser.parse_args(argv)
    if args.command == "simulate" and not args.item:
        args.item = [(0, 1), (10, 2)]

    depot.init()
    with depot.domain_context():
        if args.command == "products":
            return list_products(args)
        if args.command == "simulate":
            return simulate(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
