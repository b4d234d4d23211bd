"""Abstract chat platform API."""

from __future__ import annotations

from abc import ABC, abstractmethod

from welcomebot.models import OutgoingMessage, UserProfile


class ChatTransport(ABC):
    @abstractmethod
    async def send_message(self, message: OutgoingMessage) -> None: ...

    @abstractmethod
    async def get_user(self, user_id: int) -> UserProfile: ...

    async def close(self) -> None:
        return None
