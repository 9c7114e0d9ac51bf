import asyncio
import base64
import logging
from typing import Protocol, TypeVar, runtime_checkable

import httpx
from pydantic import BaseModel, ValidationError

from bamboohr.core.config import Settings, settings
from bamboohr.core.exceptions import DecodeError, RequestConstructionError, TransportError
from bamboohr.http.request import HTTPRequest

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

MAX_RETRY_WAIT_SECONDS = 10


@runtime_checkable
class RequestExecutorProtocol(Protocol):
    async def execute(self, request: HTTPRequest, response_model: type[ModelT]) -> ModelT: ...


class HTTPXRequestExecutor:
    """Sends requests with httpx and decodes JSON bodies into pydantic models.

    Owns authentication and rate-limit retries. Pass ``client`` to share a
    pooled ``httpx.AsyncClient``; otherwise a short-lived client is opened
    per call.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        timeout: float = 30.0,
        max_retries: int = 3,
        client: httpx.AsyncClient | None = None,
    ):
        self._headers = {"Accept": "application/json"}
        if api_key:
            token = base64.b64encode(f"{api_key}:x".encode("utf-8")).decode("utf-8")
            self._headers["Authorization"] = f"Basic {token}"
        self._timeout = timeout
        self._max_retries = max_retries
        self._client = client

    @classmethod
    def from_settings(
        cls, config: Settings | None = None, client: httpx.AsyncClient | None = None,
    ) -> "HTTPXRequestExecutor":
        config = config or settings
        return cls(
            config.bamboohr_api_key,
            timeout=config.bamboohr_timeout_seconds,
            max_retries=config.bamboohr_max_retries,
            client=client,
        )

    async def execute(self, request: HTTPRequest, response_model: type[ModelT]) -> ModelT:
        resp = await self._send(request)
        return self._decode(resp, response_model)

    async def _send(self, request: HTTPRequest) -> httpx.Response:
        url = request.build_url()
        headers = {**self._headers, **request.headers}

        for attempt in range(self._max_retries + 1):
            try:
                if self._client is not None:
                    resp = await self._client.request(
                        request.method, url, params=request.query_params, headers=headers,
                    )
                else:
                    async with httpx.AsyncClient(timeout=self._timeout) as client:
                        resp = await client.request(
                            request.method, url, params=request.query_params, headers=headers,
                        )
            except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
                raise RequestConstructionError(f"Invalid request URL {url}: {e}") from e
            except httpx.HTTPError as e:
                raise TransportError(
                    f"BambooHR {request.method} {url.path} failed: {type(e).__name__}: {e}"
                ) from e

            if resp.status_code == 429 and attempt < self._max_retries:
                wait = _retry_wait(resp, attempt)
                logger.warning(
                    "BambooHR rate limit hit on %s, retrying in %ds (attempt %d/%d)",
                    url.path, wait, attempt + 1, self._max_retries,
                )
                await asyncio.sleep(wait)
                continue

            if not resp.is_success:
                logger.error(
                    "BambooHR %s %s failed (%s): %s",
                    request.method, url.path, resp.status_code, resp.text,
                )
                raise TransportError(
                    f"BambooHR {request.method} {url.path} failed ({resp.status_code})",
                    status_code=resp.status_code,
                    body=resp.text,
                )
            return resp

        # Unreachable: the final attempt either returns or raises above
        raise TransportError(f"BambooHR {request.method} {url.path} failed after retries")

    def _decode(self, resp: httpx.Response, response_model: type[ModelT]) -> ModelT:
        content_type = resp.headers.get("content-type", "")
        if "json" not in content_type:
            raise DecodeError(
                f"BambooHR API returned unexpected content-type: {content_type} "
                f"(status {resp.status_code}). Check your BAMBOOHR_API_KEY credentials."
            )
        try:
            data = resp.json()
        except ValueError as e:
            raise DecodeError(f"BambooHR API returned malformed JSON: {e}") from e
        try:
            return response_model.model_validate(data)
        except ValidationError as e:
            raise DecodeError(
                f"BambooHR response does not match {response_model.__name__}: {e}"
            ) from e

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HTTPXRequestExecutor":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


def _retry_wait(resp: httpx.Response, attempt: int) -> int:
    retry_after = resp.headers.get("Retry-After")
    if retry_after and retry_after.isdigit():
        return min(int(retry_after), MAX_RETRY_WAIT_SECONDS)
    return min(2 ** attempt, MAX_RETRY_WAIT_SECONDS)  # 1s, 2s, 4s, 8s, 10s
