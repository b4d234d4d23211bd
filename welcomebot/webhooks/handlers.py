"""Webhook signature validation, freshness check and payload parsing."""

from __future__ import annotations

import hashlib
import hmac
import json
from typing import Any

from welcomebot.errors import (
    InvalidSignatureError,
    MalformedPayloadError,
    MissingSignatureError,
    StaleRequestError,
)
from welcomebot.models import InboundEvent


# ---------------------------------------------------------------------------
# Signature validation
# ---------------------------------------------------------------------------

def compute_signature(body: bytes, secret: str) -> str:
    return hmac.new(secret.encode(), body, hashlib.sha256).hexdigest()


def validate_signature(body: bytes, signature: str, secret: str) -> bool:
    """Validate a Pachca webhook HMAC-SHA256 signature.

    Returns False if no secret is configured (rejects unauthenticated requests).
    """
    if not secret:
        return False
    if not signature:
        return False
    expected = compute_signature(body, secret).encode()
    provided = signature.strip().lower().encode("utf-8", "surrogateescape")
    return hmac.compare_digest(expected, provided)


def verify_request(body: bytes, signature: str | None, secret: str) -> None:
    if not signature:
        raise MissingSignatureError()
    if not validate_signature(body, signature, secret):
        raise InvalidSignatureError()


# ---------------------------------------------------------------------------
# Freshness
# ---------------------------------------------------------------------------

def is_fresh(timestamp: float | None, now: float, window: int = 60) -> bool:
    """True when the send time is within ``window`` seconds of ``now``.

    Events without a timestamp are always fresh.
    """
    if not timestamp:
        return True
    return abs(now - timestamp) <= window


def check_freshness(event: InboundEvent, now: float, window: int = 60) -> None:
    if not is_fresh(event.webhook_timestamp, now, window):
        raise StaleRequestError(
            f"webhook_timestamp {event.webhook_timestamp} is outside the {window}s window"
        )


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_payload(body: bytes) -> dict[str, Any]:
    try:
        payload = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedPayloadError(f"invalid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise MalformedPayloadError("payload is not a JSON object")
    return payload


def parse_event(body: bytes) -> InboundEvent:
    return InboundEvent.from_payload(parse_payload(body))
