from typing import Any, Dict, Optional

class OneSkyError(Exception):
    """Base exception class for all OneSky client exceptions"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

class ConfigError(OneSkyError):
    """Raised when there is a configuration error"""
    pass

class LoggerError(OneSkyError):
    """Raised when there is a logging error"""
    pass

class LocalIOError(OneSkyError):
    """Raised when a local file cannot be opened or read"""
    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot read {path}: {reason}", {"path": path})
        self.path = path

class APIError(OneSkyError):
    """Base exception for API-related errors"""
    pass

class EndpointNotFoundError(APIError):
    """Raised when an operation name is not in the endpoint registry"""
    def __init__(self, name: str):
        super().__init__(f"endpoint {name} not found", {"endpoint": name})
        self.name = name

class URLParseError(APIError):
    """Raised when a composed endpoint URL is not valid"""
    pass

class TransportError(APIError):
    """Raised when the HTTP transport fails before a response is received"""
    pass

class HTTPStatusError(APIError):
    """Raised when the service answers with an unexpected status code"""
    def __init__(self, status: int, body: str = ""):
        super().__init__(f"bad status: {status}", {"status": status})
        self.status = status
        self.body = body

class DecodeError(APIError):
    """Raised when a response body is not valid JSON or has the wrong shape"""
    pass
