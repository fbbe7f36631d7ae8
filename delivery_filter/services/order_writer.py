from pathlib import Path
from typing import List, Sequence, Union

from pydantic import TypeAdapter

from delivery_filter.errors import WriteError
from delivery_filter.models.order import Order

_orders_adapter = TypeAdapter(List[Order])


def save_orders(orders: Sequence[Order], path: Union[str, Path]) -> None:
    """Write orders as an indented JSON array, replacing the file."""
    payload = _orders_adapter.dump_json(list(orders), indent=2, by_alias=True)
    try:
        with open(path, "wb") as f:
            f.write(payload)
    except OSError as e:
        raise WriteError(path, e) from e
