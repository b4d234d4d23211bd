"""User alias resolution with a guaranteed fallback."""

from __future__ import annotations

from dataclasses import dataclass

from welcomebot.errors import DownstreamError
from welcomebot.models import UserProfile
from welcomebot.transports.base import ChatTransport
from welcomebot.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_FALLBACK = "коллега"


@dataclass(frozen=True)
class ResolvedAlias:
    """Alias derived from the user's profile."""

    text: str


@dataclass(frozen=True)
class FallbackAlias:
    """Placeholder used when the profile is unavailable or empty."""

    text: str = DEFAULT_FALLBACK
    reason: str = ""


Alias = ResolvedAlias | FallbackAlias


def alias_from_profile(profile: UserProfile, fallback: str = DEFAULT_FALLBACK) -> Alias:
    """Nickname as a mention, then full name, then the fallback."""
    nickname = profile.nickname.strip()
    if nickname:
        return ResolvedAlias(f"@{nickname}")

    name = " ".join(part for part in (profile.first_name, profile.last_name) if part).strip()
    if name:
        return ResolvedAlias(name)

    return FallbackAlias(fallback, reason="empty_profile")


async def resolve_alias(
    transport: ChatTransport, user_id: int, fallback: str = DEFAULT_FALLBACK
) -> Alias:
    """Look up a user and derive their alias. Never raises on lookup errors."""
    try:
        profile = await transport.get_user(user_id)
    except DownstreamError as e:
        log.debug("alias_lookup_failed", user_id=user_id, error=str(e))
        return FallbackAlias(fallback, reason="lookup_failed")
    except Exception:
        log.exception("alias_lookup_error", user_id=user_id)
        return FallbackAlias(fallback, reason="lookup_failed")
    return alias_from_profile(profile, fallback)
