"""Fetch the remote topic document over HTTP."""

from __future__ import annotations

import logging

import httpx

from iquiz.constants.network_constants import (
    ALLOWED_URL_SCHEMES,
    BODY_PREVIEW_CHARS,
    FETCH_TIMEOUT_SECONDS,
)
from iquiz.core.errors import (
    DecodeError,
    EmptyResponse,
    InvalidURL,
    ServerError,
    TransportError,
    Unreachable,
)
from iquiz.core.models import TopicSet
from iquiz.core.services.reachability import ReachabilityMonitor
from iquiz.core.topic_importer import decode_topic_set

logger = logging.getLogger(__name__)


class RemoteSource:
    """Downloads and decodes the topic feed. Never touches the local cache."""

    def __init__(
        self,
        reachability: ReachabilityMonitor,
        client: httpx.AsyncClient | None = None,
        timeout_seconds: float = FETCH_TIMEOUT_SECONDS,
    ) -> None:
        self._reachability = reachability
        self._client = client
        self._timeout_seconds = timeout_seconds

    async def fetch(self, url: str) -> TopicSet:
        if not self._reachability.is_available():
            raise Unreachable("No network connection available.")

        target = _parse_url(url)
        response = await self._get(target)

        if not response.is_success:
            raise ServerError(response.status_code)

        body = response.content
        if not body.strip():
            raise EmptyResponse(f"{url} returned an empty body.")

        try:
            topic_set = decode_topic_set(body)
        except DecodeError as exc:
            preview = body.decode("utf-8", errors="replace")[:BODY_PREVIEW_CHARS]
            raise DecodeError(str(exc), body_preview=preview) from exc

        logger.info("Fetched %d topic(s) from %s", len(topic_set), url)
        return topic_set

    async def _get(self, target: httpx.URL) -> httpx.Response:
        try:
            if self._client is not None:
                return await self._client.get(
                    target, timeout=self._timeout_seconds, follow_redirects=True
                )
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds, follow_redirects=True
            ) as client:
                return await client.get(target)
        except httpx.HTTPError as exc:
            raise TransportError(f"Request to {target} failed: {exc!r}") from exc


def _parse_url(url: str) -> httpx.URL:
    try:
        target = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidURL(f"Invalid URL: {url!r}") from exc
    if target.scheme not in ALLOWED_URL_SCHEMES or not target.host:
        raise InvalidURL(f"Invalid URL: {url!r}")
    return target
