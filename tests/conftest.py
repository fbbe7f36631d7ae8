from datetime import datetime

import pytest

from delivery_filter.models.order import Order
from delivery_filter.utils.log_setup import shutdown_logging


@pytest.fixture
def window_start():
    return datetime(2024, 10, 30, 9, 0, 0)


@pytest.fixture
def district_orders():
    return [
        Order(order_id="Order_1", weight=5.0, district="District_1", delivery_time=datetime(2024, 10, 30, 9, 0)),
        Order(order_id="Order_2", weight=5.0, district="District_1", delivery_time=datetime(2024, 10, 30, 9, 15)),
        Order(order_id="Order_3", weight=5.0, district="District_1", delivery_time=datetime(2024, 10, 30, 10, 0)),
    ]


@pytest.fixture(autouse=True)
def close_delivery_log():
    yield
    shutdown_logging()
