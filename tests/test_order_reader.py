"""
Tests for loading orders from JSON files.
"""
import json
import time
from datetime import datetime

import pytest

from delivery_filter.errors import ErrorKind, FormatError, NotFoundError
from delivery_filter.models.order import ZERO_TIME
from delivery_filter.services.order_reader import load_orders


class TestLoadOrders:

    def test_missing_file_raises_not_found(self, tmp_path):
        with pytest.raises(NotFoundError) as exc_info:
            load_orders(tmp_path / "non_existing_file.json")

        assert exc_info.value.kind is ErrorKind.NOT_FOUND

    def test_directory_is_not_an_order_file(self, tmp_path):
        with pytest.raises(NotFoundError):
            load_orders(tmp_path)

    def test_returns_orders_from_file(self, tmp_path):
        path = tmp_path / "test_orders.json"
        now = datetime.now().replace(microsecond=0)
        path.write_text(json.dumps([
            {"orderId": "Order_1", "weight": 5.0, "district": "District_1", "deliveryTime": now.isoformat()}
        ]), encoding="utf-8")

        result = load_orders(path)

        assert len(result) == 1
        assert result[0].order_id == "Order_1"
        assert result[0].delivery_time == now

    def test_records_are_returned_unvalidated(self, tmp_path):
        path = tmp_path / "orders.json"
        path.write_text(json.dumps([
            {"orderId": "", "weight": -1, "district": ""},
            {"orderId": "Order_1"},
        ]), encoding="utf-8")

        result = load_orders(path)

        assert [o.order_id for o in result] == ["", "Order_1"]
        assert result[0].weight == -1
        assert result[1].delivery_time == ZERO_TIME
        assert result[1].district is None

    def test_space_separated_timestamp(self, tmp_path):
        path = tmp_path / "orders.json"
        path.write_text(
            '[{"orderId": "A", "weight": 1, "district": "D", "deliveryTime": "2024-10-30 09:15:00"}]',
            encoding="utf-8",
        )

        assert load_orders(path)[0].delivery_time == datetime(2024, 10, 30, 9, 15)

    def test_null_document_is_empty(self, tmp_path):
        path = tmp_path / "orders.json"
        path.write_text("null", encoding="utf-8")

        assert load_orders(path) == []

    @pytest.mark.parametrize("content", [
        "",
        "{not json",
        '{"orderId": "Order_1"}',
        '[{"orderId": "Order_1", "weight": "heavy"}]',
        '[{"orderId": "Order_1", "deliveryTime": "yesterday"}]',
        '[{"orderId": "Order_1", "weight": "5"}]',
        '[{"orderId": "Order_1", "weight": 5, "deliveryTime": 0}]',
        '[{"orderId": "Order_1", "deliveryTime": "0001-01-01T00:00:00+14:00"}]',
    ])
    def test_malformed_content_raises_format_error(self, tmp_path, content):
        path = tmp_path / "orders.json"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(FormatError) as exc_info:
            load_orders(path)

        assert exc_info.value.kind is ErrorKind.FORMAT
        assert exc_info.value.comment == "Order deserialization failed"
        assert exc_info.value.__cause__ is not None

    @pytest.mark.skipif(not hasattr(time, "tzset"), reason="needs time.tzset")
    def test_earliest_utc_time_west_of_utc_raises_format_error(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TZ", "America/New_York")
        time.tzset()
        path = tmp_path / "orders.json"
        path.write_text(
            '[{"orderId": "A", "weight": 1, "district": "D", "deliveryTime": "0001-01-01T00:00:00Z"}]',
            encoding="utf-8",
        )
        try:
            with pytest.raises(FormatError):
                load_orders(path)
        finally:
            monkeypatch.undo()
            time.tzset()
