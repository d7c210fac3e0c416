from __future__ import annotations

import logging

import httpx

from envload.errors import RemoteSourceError

logger = logging.getLogger(__name__)


class RemoteEnvSource:
    """
    A .env document served over HTTP.

    ``read()`` fetches the whole body in one request, so an instance can be
    passed anywhere a readable stream is accepted (``parse``, ``Loader.load``).
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._headers = headers or {}

    @property
    def url(self) -> str:
        return self._url

    def read(self) -> str:
        try:
            with httpx.Client(timeout=self._timeout) as client:
                response = client.get(self._url, headers=self._headers)
        except httpx.HTTPError as exc:
            raise RemoteSourceError(self._url, f"env fetch failed: {exc}") from exc

        if not response.is_success:
            raise RemoteSourceError(
                self._url,
                "env fetch failed",
                status_code=response.status_code,
            )

        logger.info("remote env fetched | url=%s bytes=%d", self._url, len(response.content))
        return response.text
