"""Pachca REST API client over httpx."""

from __future__ import annotations

from typing import Any

import httpx

from welcomebot.config import ApiConfig
from welcomebot.errors import DownstreamError
from welcomebot.models import OutgoingMessage, UserProfile
from welcomebot.transports.base import ChatTransport
from welcomebot.utils.logging import get_logger

log = get_logger(__name__)


class PachcaTransport(ChatTransport):
    """Bearer-authenticated client for the Pachca shared API.

    One instance (and its connection pool) is shared by every request the
    webhook server handles.
    """

    def __init__(
        self,
        config: ApiConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._client = httpx.AsyncClient(
            base_url=config.base_url.rstrip("/"),
            headers={"Authorization": f"Bearer {config.token}"},
            timeout=config.timeout,
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def send_message(self, message: OutgoingMessage) -> None:
        await self._request("POST", "/messages", json=message.to_request())
        log.debug(
            "pachca_message_sent",
            entity_type=message.entity_type.value,
            entity_id=message.entity_id,
        )

    async def get_user(self, user_id: int) -> UserProfile:
        body = await self._request("GET", f"/users/{user_id}")
        data = body.get("data") if isinstance(body, dict) else None
        return UserProfile.from_api(data)

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            resp = await self._client.request(method, path, **kwargs)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise DownstreamError(
                f"{method} {path} returned {e.response.status_code}",
                status_code=e.response.status_code,
                detail=e.response.text,
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise DownstreamError(f"{method} {path} failed: {e}") from e

        if not resp.content:
            return {}
        try:
            return resp.json()
        except ValueError as e:
            raise DownstreamError(
                f"{method} {path} returned invalid JSON",
                status_code=resp.status_code,
                detail=resp.text[:500],
            ) from e
