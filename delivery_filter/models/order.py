from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

# Unset delivery time; a missing "deliveryTime" key loads as this value
ZERO_TIME = datetime.min


class Order(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        strict=True,
    )

    order_id: Optional[str] = None
    weight: float = 0.0
    district: Optional[str] = None
    delivery_time: datetime = ZERO_TIME

    @field_validator("delivery_time")
    @classmethod
    def to_local_naive(cls, value: datetime) -> datetime:
        # Reference timestamps are naive local time, so aware values are converted
        if value.tzinfo is not None:
            try:
                return value.astimezone().replace(tzinfo=None)
            except OverflowError as e:
                raise ValueError(f"delivery time out of range: {value.isoformat()}") from e
        return value
