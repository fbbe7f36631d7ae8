from typing import Dict, Optional, Sequence

from delivery_filter.errors import InvalidArgumentError

CITY_DISTRICT = "_cityDistrict"
FIRST_DELIVERY_DATE_TIME = "_firstDeliveryDateTime"
DELIVERY_LOG = "_deliveryLog"
DELIVERY_ORDER = "_deliveryOrder"


def parse_arguments(tokens: Sequence[str]) -> Dict[str, str]:
    """
    Split "<key>=<value>" tokens into a dict.
    The value is everything after the first "=" kept as given, and the first
    occurrence of a key wins.
    """
    values: Dict[str, str] = {}
    for token in tokens:
        key, sep, value = token.partition("=")
        if not sep or not key:
            raise InvalidArgumentError(token)
        values.setdefault(key, value)
    return values


def get_argument_value(tokens: Sequence[str], name: str, default: Optional[str]) -> Optional[str]:
    value = parse_arguments(tokens).get(name)
    return value if value else default
