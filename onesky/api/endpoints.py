# onesky/api/endpoints.py
# Created: 2026-10-19 10:20:05

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional
import logging

import yarl

from ..core.config import Credentials
from ..core.exceptions import EndpointNotFoundError, URLParseError
from .api_client import RequestMethod
from .signer import sign

logger = logging.getLogger(__name__)

API_ADDRESS = "https://platform.api.onesky.io"
API_VERSION = "1"

RESERVED_PARAMS = ("api_key", "timestamp", "dev_hash")

@dataclass(frozen=True)
class Endpoint:
    """Resource path template and HTTP method of one operation"""
    path: str
    method: RequestMethod

    def format_path(self, project_id: int, *path_args: Any) -> str:
        # path segments are resource IDs, never free text
        for arg in (project_id,) + path_args:
            if isinstance(arg, bool) or not isinstance(arg, int) or arg < 0:
                raise URLParseError(
                    f"path argument {arg!r} of {self.path!r} is not a resource ID",
                    {"path": self.path}
                )
        try:
            return self.path.format(project_id, *path_args)
        except (IndexError, KeyError, ValueError) as e:
            raise URLParseError(
                f"cannot format {self.path!r} with {(project_id,) + path_args!r}",
                {"path": self.path}
            ) from e

ENDPOINTS: Mapping[str, Endpoint] = MappingProxyType({
    "getFile": Endpoint("projects/{}/translations", RequestMethod.GET),
    "postFile": Endpoint("projects/{}/files", RequestMethod.POST),
    "deleteFile": Endpoint("projects/{}/files", RequestMethod.DELETE),
    "listFiles": Endpoint("projects/{}/files", RequestMethod.GET),
    "importTasks": Endpoint("projects/{}/import-tasks", RequestMethod.GET),
    "importTask": Endpoint("projects/{}/import-tasks/{}", RequestMethod.GET),
    "getTranslationsStatus": Endpoint("projects/{}/translations/status", RequestMethod.GET),
    "getLanguages": Endpoint("projects/{}/languages", RequestMethod.GET),
})

def resolve(name: str) -> Endpoint:
    """Look up the endpoint registered for an operation name"""
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise EndpointNotFoundError(name) from None

def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)

def build_url(
    endpoint: Endpoint,
    credentials: Credentials,
    *path_args: Any,
    params: Optional[Mapping[str, Any]] = None,
    address: str = API_ADDRESS,
    version: str = API_VERSION,
    clock: Optional[Callable[[], float]] = None
) -> yarl.URL:
    """
    Build the signed URL of an endpoint.

    The path template is formatted with the project ID followed by
    ``path_args``. Caller parameters are copied and the authentication
    parameters are set on top of them, so reserved keys supplied by the
    caller are overwritten. Query keys are encoded in alphabetical order.
    """
    path = endpoint.format_path(credentials.project_id, *path_args)
    raw = f"{address.rstrip('/')}/{version}/{path}"
    try:
        url = yarl.URL(raw)
    except (TypeError, ValueError) as e:
        raise URLParseError(f"can not parse url address {raw}", {"url": raw}) from e
    if not url.is_absolute() or url.scheme not in ("http", "https"):
        raise URLParseError(f"can not parse url address {raw}", {"url": raw})

    query = {
        key: _query_value(value)
        for key, value in (params or {}).items()
        if value is not None
    }
    shadowed = [key for key in RESERVED_PARAMS if key in query]
    if shadowed:
        logger.debug("Overwriting reserved query parameters %s", shadowed)

    dev_hash, timestamp = sign(credentials.secret, clock() if clock else None)
    query["api_key"] = credentials.api_key
    query["timestamp"] = timestamp
    query["dev_hash"] = dev_hash

    return url.with_query(sorted(query.items()))
