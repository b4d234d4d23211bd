"""Routes membership events to welcome messages."""

from __future__ import annotations

from welcomebot.core.alias import DEFAULT_FALLBACK, resolve_alias
from welcomebot.core.welcome import WELCOME_TEMPLATE, compose_welcome
from welcomebot.errors import MalformedPayloadError
from welcomebot.models import EntityType, InboundEvent, OutgoingMessage
from welcomebot.transports.base import ChatTransport
from welcomebot.utils.logging import get_logger

log = get_logger(__name__)


class Greeter:
    """Sends the welcome text for the membership events it recognizes."""

    def __init__(
        self,
        transport: ChatTransport,
        *,
        fallback_alias: str = DEFAULT_FALLBACK,
        template: str = WELCOME_TEMPLATE,
    ) -> None:
        self._transport = transport
        self._fallback_alias = fallback_alias
        self._template = template

    async def handle(self, event: InboundEvent) -> OutgoingMessage | None:
        """Greet for ``event`` and return the message sent, if any."""
        if event.type == "chat_member" and event.event == "add":
            return await self._greet_chat_member(event)

        if event.type == "company_member" and event.event == "confirm":
            return await self._greet_company_member(event)

        log.debug("event_ignored", event_type=event.type, action=event.event)
        return None

    async def _greet_chat_member(self, event: InboundEvent) -> OutgoingMessage:
        if event.thread_id:
            entity_type, entity_id = EntityType.THREAD, event.thread_id
        elif event.chat_id:
            entity_type, entity_id = EntityType.DISCUSSION, event.chat_id
        else:
            raise MalformedPayloadError("chat_member event without chat_id")

        # Only the first added user is greeted
        user_id = event.first_user_id
        alias = await self._alias(user_id) if user_id else ""

        return await self._send(entity_type, entity_id, alias)

    async def _greet_company_member(self, event: InboundEvent) -> OutgoingMessage | None:
        user_id = event.first_user_id
        if not user_id:
            return None
        alias = await self._alias(user_id)
        return await self._send(EntityType.USER, user_id, alias)

    async def _alias(self, user_id: int) -> str:
        result = await resolve_alias(self._transport, user_id, self._fallback_alias)
        return result.text

    async def _send(self, entity_type: EntityType, entity_id: int, alias: str) -> OutgoingMessage:
        message = OutgoingMessage(
            entity_type=entity_type,
            entity_id=entity_id,
            content=compose_welcome(alias, self._template),
        )
        await self._transport.send_message(message)
        log.info(
            "welcome_sent",
            entity_type=entity_type.value,
            entity_id=entity_id,
        )
        return message
