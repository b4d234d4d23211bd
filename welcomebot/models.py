"""Typed models for inbound events and outbound messages."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from welcomebot.errors import MalformedPayloadError


class EntityType(str, Enum):
    DISCUSSION = "discussion"
    THREAD = "thread"
    USER = "user"


def _as_seconds(timestamp: int | float) -> float:
    try:
        seconds = float(timestamp)
    except OverflowError:
        # Beyond float range, so outside any freshness window
        return math.inf if timestamp > 0 else -math.inf
    if math.isnan(seconds):
        raise MalformedPayloadError("webhook_timestamp is NaN")
    return seconds


@dataclass
class InboundEvent:
    type: str = ""
    event: str = ""
    webhook_timestamp: float | None = None
    chat_id: int | None = None
    thread_id: int | None = None
    user_ids: list[int] = field(default_factory=list)
    payload: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Any) -> InboundEvent:
        if not isinstance(payload, dict):
            raise MalformedPayloadError("payload is not a JSON object")

        user_ids = payload.get("user_ids")
        if user_ids is None:
            user_ids = []
        elif not isinstance(user_ids, list):
            raise MalformedPayloadError("user_ids is not a list")

        timestamp = payload.get("webhook_timestamp")
        if timestamp is not None and (
            isinstance(timestamp, bool) or not isinstance(timestamp, (int, float))
        ):
            raise MalformedPayloadError("webhook_timestamp is not a number")
        if timestamp is not None:
            timestamp = _as_seconds(timestamp)

        return cls(
            type=str(payload.get("type") or ""),
            event=str(payload.get("event") or ""),
            webhook_timestamp=timestamp,
            chat_id=payload.get("chat_id"),
            thread_id=payload.get("thread_id"),
            user_ids=list(user_ids),
            payload=payload,
        )

    @property
    def first_user_id(self) -> int | None:
        return self.user_ids[0] if self.user_ids else None


@dataclass
class OutgoingMessage:
    entity_type: EntityType
    entity_id: int
    content: str

    def to_request(self) -> dict[str, Any]:
        return {
            "message": {
                "entity_type": self.entity_type.value,
                "entity_id": self.entity_id,
                "content": self.content,
            }
        }


@dataclass
class UserProfile:
    id: int | None = None
    nickname: str = ""
    first_name: str = ""
    last_name: str = ""

    @classmethod
    def from_api(cls, data: Any) -> UserProfile:
        if not isinstance(data, dict):
            return cls()
        return cls(
            id=data.get("id"),
            nickname=str(data.get("nickname") or ""),
            first_name=str(data.get("first_name") or ""),
            last_name=str(data.get("last_name") or ""),
        )
