# onesky/api/client.py
# Created: 2026-10-19 11:02:48

from typing import Any, Callable, Dict, List, Mapping, Optional, Union
from pathlib import Path
import asyncio
import logging
import time

import aiohttp

from ..core.config import Config, Credentials
from ..core.exceptions import LocalIOError
from ..core.logger import Logger
from .api_client import APIClient, APIResponse, ClientConfig
from .endpoints import build_url, resolve
from .models import FileRecord, ImportTask, Language, TranslationStatus, UploadResult
from .response_handler import ResponseHandler

logger = logging.getLogger(__name__)

IMPORT_TASKS_DEFAULTS: Mapping[str, Any] = {"page": 1, "per_page": 50, "status": "all"}

class AsyncOneSkyClient:
    """
    Client for the OneSky platform API.

    Every operation resolves its endpoint, signs a fresh URL, performs one
    HTTP request and decodes the response. Failures are raised as
    ``onesky.core.exceptions`` errors; nothing is retried.
    """

    def __init__(
        self,
        credentials: Credentials,
        config: Optional[ClientConfig] = None,
        clock: Callable[[], float] = time.time
    ):
        self.credentials = credentials
        self.config = config or ClientConfig()
        self._clock = clock
        self._transport = APIClient(self.config)
        self._handler = ResponseHandler()

    @classmethod
    def from_config(cls, config: Config) -> "AsyncOneSkyClient":
        """Build a client from credentials and API settings in a Config"""
        Logger(config)
        return cls(Credentials.from_config(config), ClientConfig.from_config(config))

    async def _call(
        self,
        name: str,
        *path_args: Any,
        params: Optional[Mapping[str, Any]] = None,
        data: Any = None,
        expected: int = 200
    ) -> APIResponse:
        endpoint = resolve(name)
        url = build_url(
            endpoint,
            self.credentials,
            *path_args,
            params=params,
            address=self.config.address,
            version=self.config.version,
            clock=self._clock
        )
        extra = {"operation": name, "project": self.credentials.project_id}
        logger.info("Calling %s", name, extra=extra)
        response = await self._transport.request(endpoint.method, url, data=data)
        self._handler.check_status(response, expected)
        return response

    async def download_file(self, file_name: str, locale: str) -> str:
        """Download the translation of a source file as text"""
        response = await self._call(
            "getFile",
            params={"locale": locale, "source_file_name": file_name}
        )
        return response.body

    async def upload_file(
        self,
        file_path: Union[str, Path],
        file_format: str,
        locale: str,
        keep_strings: bool = True
    ) -> UploadResult:
        """
        Upload a source file

        Args:
            file_path: Local file to upload
            file_format: Service file format, e.g. ``GNU_PO``
            locale: Locale of the strings in the file
            keep_strings: Keep strings missing from this upload

        Returns:
            UploadResult describing the file and its import task
        """
        path = Path(file_path)
        try:
            with open(path, 'rb') as f:
                content = f.read()
        except (OSError, ValueError) as e:
            raise LocalIOError(str(path), getattr(e, "strerror", None) or str(e)) from e

        form = aiohttp.FormData()
        form.add_field(
            "file",
            content,
            filename=path.name,
            content_type="application/octet-stream"
        )
        response = await self._call(
            "postFile",
            params={
                "file_format": file_format,
                "locale": locale,
                "is_keeping_all_strings": keep_strings
            },
            data=form,
            expected=201
        )
        return self._handler.parse_object(response, UploadResult)

    async def delete_file(self, file_name: str) -> None:
        """Delete a source file from the project"""
        await self._call("deleteFile", params={"file_name": file_name})

    async def list_files(self, page: int = 1, per_page: int = 50) -> List[FileRecord]:
        """List uploaded files, one page at a time"""
        response = await self._call("listFiles", params={"page": page, "per_page": per_page})
        return self._handler.parse_list(response, FileRecord)

    async def import_tasks(self, params: Optional[Mapping[str, Any]] = None) -> List[ImportTask]:
        """List import tasks; ``params`` override or extend the default query"""
        query: Dict[str, Any] = dict(IMPORT_TASKS_DEFAULTS)
        query.update(params or {})
        response = await self._call("importTasks", params=query)
        return self._handler.parse_list(response, ImportTask)

    async def import_task(self, task_id: int) -> ImportTask:
        """Fetch a single import task"""
        response = await self._call("importTask", task_id)
        return self._handler.parse_object(response, ImportTask)

    async def get_translations_status(self, file_name: str, locale: str) -> TranslationStatus:
        """Translation progress of a file in one locale"""
        response = await self._call(
            "getTranslationsStatus",
            params={"file_name": file_name, "locale": locale}
        )
        return self._handler.parse_object(response, TranslationStatus)

    async def get_languages(self) -> List[Language]:
        """Languages enabled in the project"""
        response = await self._call("getLanguages")
        return self._handler.parse_list(response, Language)

class OneSkyClient:
    """
    Blocking facade over AsyncOneSkyClient.

    Each call runs on its own event loop, so it must not be used from inside
    a running loop; use AsyncOneSkyClient there.
    """

    def __init__(
        self,
        secret: str,
        api_key: str,
        project_id: int,
        config: Optional[ClientConfig] = None
    ):
        self._client = AsyncOneSkyClient(Credentials(secret, api_key, project_id), config)

    @classmethod
    def from_credentials(
        cls,
        credentials: Credentials,
        config: Optional[ClientConfig] = None
    ) -> "OneSkyClient":
        return cls(credentials.secret, credentials.api_key, credentials.project_id, config)

    @classmethod
    def from_config(cls, config: Config) -> "OneSkyClient":
        Logger(config)
        return cls.from_credentials(Credentials.from_config(config), ClientConfig.from_config(config))

    @property
    def credentials(self) -> Credentials:
        return self._client.credentials

    def download_file(self, file_name: str, locale: str) -> str:
        return asyncio.run(self._client.download_file(file_name, locale))

    def upload_file(
        self,
        file_path: Union[str, Path],
        file_format: str,
        locale: str,
        keep_strings: bool = True
    ) -> UploadResult:
        return asyncio.run(self._client.upload_file(file_path, file_format, locale, keep_strings))

    def delete_file(self, file_name: str) -> None:
        asyncio.run(self._client.delete_file(file_name))

    def list_files(self, page: int = 1, per_page: int = 50) -> List[FileRecord]:
        return asyncio.run(self._client.list_files(page, per_page))

    def import_tasks(self, params: Optional[Mapping[str, Any]] = None) -> List[ImportTask]:
        return asyncio.run(self._client.import_tasks(params))

    def import_task(self, task_id: int) -> ImportTask:
        return asyncio.run(self._client.import_task(task_id))

    def get_translations_status(self, file_name: str, locale: str) -> TranslationStatus:
        return asyncio.run(self._client.get_translations_status(file_name, locale))

    def get_languages(self) -> List[Language]:
        return asyncio.run(self._client.get_languages())
