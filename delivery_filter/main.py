"""
Filter delivery orders by city district and a 30-minute delivery window.

Reads orders from the file named in the settings, drops duplicate and invalid
orders, keeps those of one district due within the window, and writes them
sorted by delivery time.

Usage:
    delivery-filter _cityDistrict=District_1 "_firstDeliveryDateTime=2024-10-30 09:00:00"
"""
from __future__ import annotations

import argparse
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

from delivery_filter.config import CONFIG_PATH, load_settings
from delivery_filter.errors import DeliveryFilterError, InvalidArgumentError
from delivery_filter.services.order_filter import filter_orders
from delivery_filter.services.order_reader import load_orders
from delivery_filter.services.order_validator import validate_orders
from delivery_filter.services.order_writer import save_orders
from delivery_filter.utils.arguments import (
    CITY_DISTRICT,
    DELIVERY_LOG,
    DELIVERY_ORDER,
    FIRST_DELIVERY_DATE_TIME,
    get_argument_value,
)
from delivery_filter.utils.log_setup import configure_logging, get_logger, shutdown_logging
from delivery_filter.utils.time_windows import parse_timestamp

logger = get_logger(__name__)


class RunStatus(Enum):
    COMPLETED = "completed"
    NO_VALID_ORDERS = "no_valid_orders"
    INVALID_START_TIME = "invalid_start_time"


@dataclass(frozen=True)
class RunResult:
    status: RunStatus
    orders_written: int = 0
    output_path: Optional[str] = None


def run_application(tokens: Sequence[str], config_path: str | Path = CONFIG_PATH) -> RunResult:
    settings = load_settings(config_path)

    log_path = get_argument_value(tokens, DELIVERY_LOG, settings.default_delivery_log_path)
    configure_logging(log_path)

    if tokens:
        logger.info(f"Run started {datetime.now()}, arguments: " + ",\n".join(tokens))
    else:
        logger.info(f"Run started {datetime.now()}, no arguments passed")

    district = get_argument_value(tokens, CITY_DISTRICT, settings.default_city_district)
    window_start = parse_timestamp(
        get_argument_value(tokens, FIRST_DELIVERY_DATE_TIME, settings.default_first_delivery_date_time)
    )
    if window_start is None:
        logger.warning("Invalid first delivery time format")
        return RunResult(RunStatus.INVALID_START_TIME)

    orders = validate_orders(load_orders(settings.orders_file_path), logger)
    if not orders:
        logger.warning(f"No valid orders found in file: {settings.orders_file_path}")
        return RunResult(RunStatus.NO_VALID_ORDERS)

    selected = filter_orders(orders, district, window_start)
    output_path = get_argument_value(tokens, DELIVERY_ORDER, settings.default_delivery_order_path)
    save_orders(selected, output_path)

    logger.info(
        f"Found {len(selected)} valid orders for district {district} "
        f"from file: {settings.orders_file_path}."
    )
    return RunResult(RunStatus.COMPLETED, len(selected), output_path)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Filter delivery orders by district and delivery window")
    parser.add_argument(
        'tokens',
        nargs='*',
        metavar='_key=value',
        help='Overrides: _cityDistrict, _firstDeliveryDateTime, _deliveryLog, _deliveryOrder',
    )
    parser.add_argument(
        '--config',
        type=Path,
        default=Path(CONFIG_PATH),
        help='Settings file, created with defaults when missing',
    )
    args = parser.parse_args(argv)

    try:
        run_application(args.tokens, args.config)
        return 0
    except InvalidArgumentError as e:
        logger.warning(f"Command-line argument error. {e.comment}: {e}", exc_info=True)
    except DeliveryFilterError as e:
        logger.warning(f"{e.comment}: {e.__cause__ or e}", exc_info=True)
    except Exception as e:
        logger.warning(f"Execution error: {e}", exc_info=True)
    finally:
        shutdown_logging()
    return 1


if __name__ == '__main__':
    raise SystemExit(main())
