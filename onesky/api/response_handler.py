# onesky/api/response_handler.py
# Created: 2026-10-19 10:44:02

from typing import Any, Dict, Generic, List, Protocol, Type, TypeVar
from dataclasses import dataclass
import json
import logging

from ..core.exceptions import DecodeError, HTTPStatusError
from .api_client import APIResponse
from .models import ResponseMeta

logger = logging.getLogger(__name__)

class Record(Protocol):
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Any:
        ...

T = TypeVar('T')
R = TypeVar('R', bound=Record)

@dataclass
class Envelope(Generic[T]):
    """Decoded response: the ``data`` payload and the informational ``meta``"""
    data: T
    meta: ResponseMeta

class ResponseHandler:
    """
    Validates API responses and turns their envelopes into records.

    The status line decides success; the ``meta`` object in the body is
    only kept for diagnostics.
    """

    def check_status(self, response: APIResponse, expected: int) -> None:
        """Raise HTTPStatusError unless the response has the expected status"""
        if response.status != expected:
            logger.warning("Unexpected status %d (wanted %d)", response.status, expected)
            raise HTTPStatusError(response.status, response.body)

    def unwrap(self, response: APIResponse) -> Envelope[Any]:
        """
        Decode a JSON envelope

        Args:
            response: APIResponse whose body is a JSON object with ``data``

        Returns:
            Envelope holding the raw payload and the parsed meta
        """
        try:
            document = json.loads(response.body)
        except ValueError as e:
            raise DecodeError(f"Invalid JSON in response: {e}") from e

        if not isinstance(document, dict) or "data" not in document:
            raise DecodeError("Response envelope has no 'data' field")

        meta = document.get("meta")
        envelope = Envelope(
            data=document["data"],
            meta=ResponseMeta.from_dict(meta) if isinstance(meta, dict) else ResponseMeta()
        )
        if envelope.meta.record_count is not None:
            logger.debug("Envelope reports %d records", envelope.meta.record_count)
        return envelope

    def parse_object(self, response: APIResponse, record_type: Type[R]) -> R:
        """Decode an envelope whose payload is a single object"""
        data = self.unwrap(response).data
        if not isinstance(data, dict):
            raise DecodeError(f"Expected an object for {record_type.__name__}, got {type(data).__name__}")
        return record_type.from_dict(data)

    def parse_list(self, response: APIResponse, record_type: Type[R]) -> List[R]:
        """Decode an envelope whose payload is an array of objects, keeping order"""
        data = self.unwrap(response).data
        if not isinstance(data, list):
            raise DecodeError(f"Expected a list of {record_type.__name__}, got {type(data).__name__}")
        records = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise DecodeError(f"Item {index} of {record_type.__name__} list is not an object")
            records.append(record_type.from_dict(item))
        return records
