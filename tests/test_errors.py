import pytest

from manticore_tools.errors import HTTPError, ManticoreError, ToolError


def test_http_error_str_is_message():
    err = HTTPError(404, "no such table")
    assert str(err) == "no such table"
    assert err.message == "no such table"


def test_http_error_keeps_status_code():
    err = HTTPError(503, "unavailable")
    assert err.status_code == 503


def test_http_error_is_caught_as_manticore_error():
    err = HTTPError(500, "boom")
    assert isinstance(err, ManticoreError)
    assert err.status_code == 500
    assert str(err) == "boom"
    with pytest.raises(ManticoreError) as exc_info:
        raise err
    assert exc_info.value is err


def test_tool_error_is_manticore_error_and_chains_cause():
    cause = HTTPError(400, "bad query")
    with pytest.raises(ManticoreError) as exc_info:
        raise ToolError("show tables failed: bad query") from cause
    assert isinstance(exc_info.value, ToolError)
    assert exc_info.value.__cause__ is cause
    assert str(exc_info.value) == "show tables failed: bad query"


def test_http_error_is_not_tool_error():
    err = HTTPError(418, "teapot")
    assert not isinstance(err, ToolError)
    assert isinstance(err, ManticoreError)
    assert str(err) == "teapot"
    assert err.status_code == 418