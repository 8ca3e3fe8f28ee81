# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_botapi

import json
import mimetypes
from collections.abc import AsyncIterator
from contextlib import ExitStack, asynccontextmanager
from typing import Any, BinaryIO

import anyio
import httpx
from pydantic import BaseModel

from coreason_botapi.api import BotApiBase, BotApiMethods, Params
from coreason_botapi.config import BotApiConfig
from coreason_botapi.exceptions import HttpError
from coreason_botapi.models.input_file import AttachedFile, LocalFile, MemoryFile
from coreason_botapi.models.response import MethodResponse
from coreason_botapi.utils.logger import logger


def encode_form_fields(params: BaseModel) -> dict[str, str]:
    """Flattens parameters into multipart text fields.

    Strings are sent verbatim, every other value as JSON. Null values,
    including files that were never extracted, are left out.
    """
    fields = params.model_dump(mode="json", exclude_none=True)
    return {
        key: value if isinstance(value, str) else json.dumps(value)
        for key, value in fields.items()
        if value is not None
    }


def _content_type(file_name: str) -> str:
    mime_type, _ = mimetypes.guess_type(file_name)
    return mime_type or "application/octet-stream"


def open_part(stack: ExitStack, file: LocalFile | MemoryFile) -> tuple[str, BinaryIO | bytes, str]:
    """Returns the httpx file tuple for one part.

    Local files are opened here, at send time, and closed with ``stack``.

    Raises:
        FileNotFoundError: If a local file does not exist.
    """
    if isinstance(file, LocalFile):
        handle = stack.enter_context(file.path.open("rb"))
        return file.file_name, handle, _content_type(file.file_name)
    return file.file_name, file.data, _content_type(file.file_name)


def decode_response(method: str, response: httpx.Response) -> dict[str, Any]:
    """Decodes the JSON envelope; the Bot API sends one for failures too."""
    try:
        payload = response.json()
    except ValueError as e:
        logger.error(f"{method} returned a non-JSON body (HTTP {response.status_code})")
        raise HttpError(response.status_code, "response body is not JSON") from e
    if not isinstance(payload, dict):
        raise HttpError(response.status_code, "response body is not a JSON object")
    return payload


class BotApiAsync(BotApiBase):
    """Async-native Bot API client over httpx.

    A client may be injected for connection pooling. Without one, the client
    opens a connection per request, or keeps one for the lifetime of an
    ``async with`` block.
    """

    def __init__(
        self,
        config: BotApiConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """Initializes the BotApiAsync client.

        Args:
            config: Configuration for the client.
            client: Optional httpx.AsyncClient for connection pooling.
        """
        self.config = config or BotApiConfig()
        self._client = client
        self._owns_client = False

    async def __aenter__(self) -> "BotApiAsync":
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.config.request_timeout)
            self._owns_client = True
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Closes the internally owned httpx client, if any."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
            self._owns_client = False

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self.config.request_timeout) as client:
            yield client

    def method_url(self, method: str) -> str:
        """Builds ``{api_url}/bot{token}/{method}``.

        Raises:
            ValueError: If no bot token is configured.
        """
        if self.config.token is None:
            raise ValueError("Bot token is not configured")
        return f"{self.config.api_url.rstrip('/')}/bot{self.config.token.get_secret_value()}/{method}"

    async def _post(self, client: httpx.AsyncClient, method: str, **kwargs: Any) -> httpx.Response:
        try:
            return await client.post(self.method_url(method), **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} request failed: {type(e).__name__}")
            raise HttpError(None, f"{method} request failed: {type(e).__name__}") from e

    async def request(self, method: str, params: BaseModel | None) -> dict[str, Any]:
        body = None if params is None else params.model_dump(mode="json", exclude_none=True)
        async with self._session() as client:
            response = await self._post(client, method, json=body)
        return decode_response(method, response)

    async def request_with_form_data(
        self, method: str, params: BaseModel, files: list[AttachedFile]
    ) -> dict[str, Any]:
        data = encode_form_fields(params)
        with ExitStack() as stack:
            parts = [(name, open_part(stack, file)) for name, file in files]
            logger.info(f"Uploading {len(parts)} file(s) with {method}")
            async with self._session() as client:
                response = await self._post(client, method, data=data, files=parts)
        return decode_response(method, response)


class BotApi(BotApiMethods):
    """Sync Facade for BotApiAsync.

    Runs each call through anyio.run. Each call gets its own event loop, so
    the wrapped client opens a connection per request.
    """

    def __init__(self, config: BotApiConfig | None = None):
        self._async = BotApiAsync(config)

    @property
    def config(self) -> BotApiConfig:
        return self._async.config

    def call(self, method: str, params: Params = None) -> MethodResponse[Any]:
        """Calls a Bot API operation synchronously. See :meth:`BotApiBase.call`."""
        return anyio.run(self._async.call, method, params)
