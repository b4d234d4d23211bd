"""Shared fixtures: an in-memory chat transport."""

from __future__ import annotations

import pytest

from welcomebot.errors import DownstreamError
from welcomebot.models import OutgoingMessage, UserProfile
from welcomebot.transports.base import ChatTransport


class FakeTransport(ChatTransport):
    def __init__(self) -> None:
        self.sent: list[OutgoingMessage] = []
        self.profiles: dict[int, UserProfile] = {}
        self.lookups: list[int] = []
        self.fail_lookup = False
        self.lookup_error: Exception | None = None
        self.fail_send = False
        self.closed = False

    async def send_message(self, message: OutgoingMessage) -> None:
        if self.fail_send:
            raise DownstreamError("POST /messages returned 422", status_code=422, detail="bad entity")
        self.sent.append(message)

    async def get_user(self, user_id: int) -> UserProfile:
        self.lookups.append(user_id)
        if self.lookup_error is not None:
            raise self.lookup_error
        if self.fail_lookup:
            raise DownstreamError("GET /users failed: connection refused")
        if user_id not in self.profiles:
            raise DownstreamError(f"GET /users/{user_id} returned 404", status_code=404)
        return self.profiles[user_id]

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def transport():
    return FakeTransport()
