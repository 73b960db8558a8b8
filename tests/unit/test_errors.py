"""Tests for sf_common.errors and sf_common.response."""

from src.sf_common.errors import (
    AppError,
    ClockMovedBackwardsError,
    ConfigurationError,
    InternalError,
    InvalidBatchSizeError,
    InvalidSnowflakeError,
)
from src.sf_common.response import error_response, success_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500

    def test_is_exception(self) -> None:
        err = AppError(code=1001, message="test")
        assert isinstance(err, Exception)
        assert str(err) == "test"


class TestSpecificErrors:
    def test_configuration(self) -> None:
        err = ConfigurationError("Worker id out of range")
        assert err.code == 1001
        assert err.http_status == 500
        assert err.message == "Worker id out of range"

    def test_clock_moved_backwards(self) -> None:
        err = ClockMovedBackwardsError(15)
        assert err.code == 2001
        assert err.http_status == 503
        assert err.offset_ms == 15
        assert "15 milliseconds" in err.message

    def test_invalid_snowflake(self) -> None:
        err = InvalidSnowflakeError(-4)
        assert err.code == 3001
        assert err.http_status == 422
        assert "-4" in err.message

    def test_invalid_batch_size(self) -> None:
        err = InvalidBatchSizeError(5000, 1000)
        assert err.code == 3002
        assert "1000" in err.message
        assert "5000" in err.message

    def test_invalid_batch_size_without_limit(self) -> None:
        err = InvalidBatchSizeError(0)
        assert err.code == 3002
        assert err.message == "Batch size must be at least 1, got 0"

    def test_internal(self) -> None:
        assert InternalError().code == 9002


class TestApiResponse:
    def test_success(self) -> None:
        resp = success_response({"id": "123"})
        assert resp.code == 0
        assert resp.message == "success"
        assert resp.data == {"id": "123"}
        assert resp.request_id.startswith("req_")

    def test_request_id_passthrough(self) -> None:
        resp = success_response(None, "req_abc")
        assert resp.request_id == "req_abc"

    def test_error(self) -> None:
        resp = error_response(2001, "Clock moved backwards")
        assert resp.code == 2001
        assert resp.data is None

    def test_serialization(self) -> None:
        d = success_response({"n": 1}).model_dump()
        assert set(d) == {"code", "message", "data", "timestamp", "request_id"}
