from datetime import datetime
from typing import List, Sequence

from delivery_filter.models.order import Order
from delivery_filter.utils.time_windows import window_end


def filter_orders(orders: Sequence[Order], district: str, window_start: datetime) -> List[Order]:
    """
    Orders of one district due within the delivery window, earliest first.
    Both window bounds are inclusive; equal times keep their input order.
    """
    last = window_end(window_start)
    selected = [
        order for order in orders
        if order.district == district and window_start <= order.delivery_time <= last
    ]
    return sorted(selected, key=lambda order: order.delivery_time)
