"""Errors raised while handling an inbound webhook.

Each error carries the HTTP status and short text body the webhook server
answers with. Alias lookup failures are not represented here: they resolve
to a fallback alias (see ``welcomebot.core.alias``).
"""

from __future__ import annotations


class WelcomeBotError(Exception):
    status: int = 500
    reason: str = "Internal error"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.reason)


class AuthenticationError(WelcomeBotError):
    status = 401
    reason = "Invalid signature"


class MissingSignatureError(AuthenticationError):
    status = 400
    reason = "No signature"


class InvalidSignatureError(AuthenticationError):
    pass


class MalformedPayloadError(WelcomeBotError):
    status = 400
    reason = "Malformed payload"


class StaleRequestError(WelcomeBotError):
    status = 408
    reason = "Webhook too old"


class DownstreamError(WelcomeBotError):
    """A call to the chat platform API failed."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        detail: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail
