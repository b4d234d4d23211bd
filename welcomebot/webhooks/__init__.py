"""Inbound webhook validation and HTTP server."""

from welcomebot.webhooks.server import WebhookServer

__all__ = ["WebhookServer"]
