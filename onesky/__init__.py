"""
Python client for the OneSky localization platform API.
"""

from .api import (
    AsyncOneSkyClient,
    OneSkyClient,
    FileRecord,
    ImportTask,
    Language,
    TranslationStatus,
    UploadResult
)
from .core.config import Config, Credentials
from .core.exceptions import (
    OneSkyError,
    APIError,
    EndpointNotFoundError,
    URLParseError,
    TransportError,
    HTTPStatusError,
    DecodeError,
    LocalIOError
)

__version__ = "1.0.0"

__all__ = [
    'AsyncOneSkyClient',
    'OneSkyClient',
    'FileRecord',
    'ImportTask',
    'Language',
    'TranslationStatus',
    'UploadResult',
    'Config',
    'Credentials',
    'OneSkyError',
    'APIError',
    'EndpointNotFoundError',
    'URLParseError',
    'TransportError',
    'HTTPStatusError',
    'DecodeError',
    'LocalIOError'
]
