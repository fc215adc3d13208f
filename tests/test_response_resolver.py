"""
Unit tests for the response resolver.
Run: pytest tests/test_response_resolver.py -v
"""

import logging

import pytest
from pydantic import BaseModel

from restclient.core.domain.models import GenericBody, TypedBody
from restclient.core.errors import DecodeError
from restclient.core.services.response_resolver import resolve


class Item(BaseModel):
    name: str
    price: float


class ApiError(BaseModel):
    msg: str


class TestSlotSelection:
    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_success_range_fills_result(self, status):
        result, error = resolve(b'{"name": "widget", "price": 2}', status, Item, ApiError)
        assert isinstance(result, TypedBody)
        assert result.value == Item(name="widget", price=2)
        assert error is None

    @pytest.mark.parametrize("status", [199, 300, 404, 500])
    def test_other_statuses_fill_error(self, status):
        result, error = resolve(b'{"msg": "not found"}', status, Item, ApiError)
        assert result is None
        assert isinstance(error, TypedBody)
        assert error.value == ApiError(msg="not found")

    def test_empty_body_short_circuits(self):
        assert resolve(b"", 200, Item, ApiError) == (None, None)
        assert resolve(b"", 500, Item, ApiError) == (None, None)

    def test_empty_body_does_not_log(self, caplog):
        with caplog.at_level(logging.WARNING):
            resolve(b"", 200, Item, ApiError)
        assert caplog.records == []


class TestShapes:
    def test_no_shape_decodes_generic(self):
        result, _ = resolve(b'{"msg": "not found"}', 404, None, None)
        _, error = resolve(b'{"msg": "not found"}', 404, None, None)
        assert result is None
        assert isinstance(error, GenericBody)
        assert error.value == {"msg": "not found"}

    def test_container_shape(self):
        result, _ = resolve(b'[{"name": "a", "price": 1}, {"name": "b", "price": 2}]', 200, list[Item], None)
        assert isinstance(result, TypedBody)
        assert [item.name for item in result.value] == ["a", "b"]

    def test_scalar_shape(self):
        result, _ = resolve(b"42", 200, int, None)
        assert result == TypedBody(value=42)


class TestFallback:
    def test_mismatch_falls_back_to_generic(self, caplog):
        with caplog.at_level(logging.WARNING):
            result, error = resolve(b'{"unexpected": true}', 200, Item, None, label="items-list")
        assert isinstance(result, GenericBody)
        assert result.value == {"unexpected": True}
        assert error is None

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        message = warnings[0].getMessage()
        assert '{"unexpected": true}' in message
        assert "status 200" in message
        assert "items-list" in message

    def test_unsupported_shape_falls_back(self, caplog):
        class NotAModel:
            pass

        with caplog.at_level(logging.WARNING):
            result, error = resolve(b'{"a": 1}', 200, NotAModel, None, label="odd-shape")
        assert result == GenericBody(value={"a": 1})
        assert error is None
        assert len(caplog.records) == 1
        assert "odd-shape" in caplog.records[0].getMessage()

    def test_failure_log_uses_lazy_arguments(self, caplog):
        with caplog.at_level(logging.WARNING):
            resolve(b'{"unexpected": true}', 200, Item, None, label="items-list")
        record = caplog.records[0]
        assert "%s" in record.msg
        assert "items-list" in record.args
        assert 200 in record.args

    def test_invalid_json_raises_decode_error(self, caplog):
        with caplog.at_level(logging.WARNING):
            with pytest.raises(DecodeError) as excinfo:
                resolve(b"<html>502 Bad Gateway</html>", 502, Item, ApiError)
        assert excinfo.value.status == 502
        assert excinfo.value.raw_text == "<html>502 Bad Gateway</html>"
        levels = [r.levelno for r in caplog.records]
        assert logging.WARNING in levels
        assert logging.ERROR in levels

    def test_invalid_json_without_shape_raises(self):
        with pytest.raises(DecodeError):
            resolve(b"not json", 200, None, None)
