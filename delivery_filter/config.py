import json
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from pydantic import Field, ValidationError
from pydantic.alias_generators import to_pascal, to_snake
from pydantic_settings import BaseSettings, SettingsConfigDict

from delivery_filter.errors import FormatError, WriteError
from delivery_filter.utils.log_setup import get_logger
from delivery_filter.utils.time_windows import format_timestamp

logger = get_logger(__name__)

CONFIG_PATH = "config.json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DELIVERY_", extra="ignore", frozen=True)

    default_city_district: str = "DefaultDistrict"
    default_first_delivery_date_time: str = Field(
        default_factory=lambda: format_timestamp(datetime.now())
    )
    default_delivery_log_path: str = "deliveryLog.log"
    default_delivery_order_path: str = "filteredOrders.json"
    orders_file_path: str = "orders.json"


def load_settings(path: Union[str, Path] = CONFIG_PATH) -> Settings:
    """
    Load settings from a JSON file, creating the file with defaults when it is missing.
    The file uses PascalCase keys (DefaultCityDistrict, OrdersFilePath, ...); snake_case
    field names are accepted too. Keys absent from the file fall back to DELIVERY_*
    environment variables.
    """
    path = Path(path)
    if not path.is_file():
        return save_settings(path)

    try:
        data = json.loads(path.read_text(encoding="utf-8").strip() or "null")
    except json.JSONDecodeError as e:
        raise FormatError("Settings deserialization failed", path) from e

    if data is None:
        logger.warning("Loaded settings are empty, created new ones")
        return save_settings(path)
    if not isinstance(data, dict):
        raise FormatError("Settings deserialization failed", path)

    try:
        return Settings(**{to_snake(key): value for key, value in data.items()})
    except ValidationError as e:
        raise FormatError("Settings deserialization failed", path) from e


def save_settings(path: Union[str, Path], settings: Optional[Settings] = None) -> Settings:
    if settings is None:
        settings = Settings()
    try:
        content = {to_pascal(key): value for key, value in settings.model_dump().items()}
        Path(path).write_text(json.dumps(content, indent=2), encoding="utf-8")
    except OSError as e:
        raise WriteError(path, e, comment="Saving settings failed") from e
    return settings
