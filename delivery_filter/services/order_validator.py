"""
Order validation.

Drops every order whose id occurs more than once in the batch (all copies),
then every order failing a field check. Problems are reported as warnings,
never raised.
"""
from collections import Counter
import logging
from typing import List, Optional, Sequence

from delivery_filter.models.order import ZERO_TIME, Order
from delivery_filter.utils.log_setup import get_logger

log = get_logger(__name__)

MISSING_ID = "(not specified)"


def find_duplicate_ids(orders: Sequence[Order]) -> List[Optional[str]]:
    """Ids shared by more than one order, in order of first appearance."""
    counts = Counter(order.order_id for order in orders)
    return [order_id for order_id, count in counts.items() if count > 1]


def check_order(order: Order) -> List[str]:
    """All field problems of a single order; empty when the order is valid."""
    errors = []
    if not order.order_id:
        errors.append("invalid order id")
    if order.weight <= 0:
        errors.append("invalid weight (must be greater than 0)")
    if not order.district:
        errors.append("invalid district name")
    if order.delivery_time == ZERO_TIME:
        errors.append("invalid delivery time")
    return errors


def validate_orders(orders: Sequence[Order],
                    logger: Optional[logging.Logger] = None) -> List[Order]:
    logger = logger or log

    duplicate_ids = find_duplicate_ids(orders)
    for duplicate_id in duplicate_ids:
        logger.warning(f"Duplicate order id detected: {duplicate_id}")
    duplicates = set(duplicate_ids)

    valid_orders = []
    rejected = []
    for order in orders:
        if order.order_id in duplicates:
            continue
        order_errors = check_order(order)
        if order_errors:
            rejected.append(f"Order ID {order.order_id or MISSING_ID}: {', '.join(order_errors)}")
        else:
            valid_orders.append(order)

    for message in rejected:
        logger.warning(message)

    return valid_orders
