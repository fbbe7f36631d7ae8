from pathlib import Path
from typing import List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from delivery_filter.errors import FormatError, NotFoundError
from delivery_filter.models.order import Order

_orders_adapter = TypeAdapter(Optional[List[Order]])


def load_orders(path: Union[str, Path]) -> List[Order]:
    """
    Read orders from a JSON array file exactly as stored.
    No validation is applied here, see validate_orders.
    """
    path = Path(path)
    if not path.is_file():
        raise NotFoundError(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            orders = _orders_adapter.validate_json(f.read())
    except (ValidationError, UnicodeDecodeError) as e:
        raise FormatError("Order deserialization failed", path) from e

    return orders or []
