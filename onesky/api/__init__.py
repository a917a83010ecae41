# onesky/api/__init__.py
# Created: 2026-10-19 10:01:09

"""
Signed requests against the OneSky platform API and their typed results.
"""

from .api_client import (
    APIClient,
    APIResponse,
    ClientConfig,
    RequestMethod
)

from .client import (
    AsyncOneSkyClient,
    OneSkyClient
)

from .endpoints import (
    API_ADDRESS,
    API_VERSION,
    ENDPOINTS,
    Endpoint,
    build_url,
    resolve
)

from .models import (
    FileRecord,
    ImportTask,
    Language,
    LastImport,
    ResponseMeta,
    TaskFile,
    TranslationStatus,
    UploadResult
)

from .response_handler import (
    Envelope,
    ResponseHandler
)

from .signer import sign

__all__ = [
    'APIClient',
    'APIResponse',
    'ClientConfig',
    'RequestMethod',
    'AsyncOneSkyClient',
    'OneSkyClient',
    'API_ADDRESS',
    'API_VERSION',
    'ENDPOINTS',
    'Endpoint',
    'build_url',
    'resolve',
    'FileRecord',
    'ImportTask',
    'Language',
    'LastImport',
    'ResponseMeta',
    'TaskFile',
    'TranslationStatus',
    'UploadResult',
    'Envelope',
    'ResponseHandler',
    'sign'
]
