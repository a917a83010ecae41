import pytest
from onesky.core.exceptions import (
    OneSkyError,
    ConfigError,
    LoggerError,
    LocalIOError,
    APIError,
    EndpointNotFoundError,
    URLParseError,
    TransportError,
    HTTPStatusError,
    DecodeError
)

def test_base_exception():
    """Test OneSkyError base exception"""
    with pytest.raises(OneSkyError) as exc_info:
        raise OneSkyError("Base error message", {"key": "value"})
    assert str(exc_info.value) == "Base error message"
    assert exc_info.value.details == {"key": "value"}
    assert isinstance(exc_info.value, Exception)

def test_base_exception_default_details():
    assert OneSkyError("message").details == {}

@pytest.mark.parametrize("error_class", [ConfigError, LoggerError, APIError])
def test_ambient_errors(error_class):
    with pytest.raises(OneSkyError):
        raise error_class("failure")

@pytest.mark.parametrize("error_class", [URLParseError, TransportError, DecodeError])
def test_api_errors(error_class):
    with pytest.raises(APIError) as exc_info:
        raise error_class("failure")
    assert isinstance(exc_info.value, OneSkyError)

def test_endpoint_not_found_error():
    """Test EndpointNotFoundError"""
    error = EndpointNotFoundError("not_exist_endpoint")
    assert str(error) == "endpoint not_exist_endpoint not found"
    assert error.name == "not_exist_endpoint"
    assert isinstance(error, APIError)

def test_http_status_error():
    """Test HTTPStatusError keeps the status for diagnostics"""
    error = HTTPStatusError(500, "oops")
    assert str(error) == "bad status: 500"
    assert error.status == 500
    assert error.body == "oops"
    assert error.details == {"status": 500}

def test_local_io_error():
    """Test LocalIOError"""
    error = LocalIOError("/tmp/missing.po", "No such file or directory")
    assert error.path == "/tmp/missing.po"
    assert "missing.po" in str(error)
    assert not isinstance(error, APIError)
