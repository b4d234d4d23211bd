"""Chat platform transports."""

from welcomebot.transports.base import ChatTransport
from welcomebot.transports.pachca import PachcaTransport

__all__ = [
    "ChatTransport",
    "PachcaTransport",
]
