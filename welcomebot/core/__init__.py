"""Greeting logic: alias resolution, message text, event dispatch."""

from welcomebot.core.alias import Alias, FallbackAlias, ResolvedAlias, resolve_alias
from welcomebot.core.greeter import Greeter
from welcomebot.core.welcome import WELCOME_TEMPLATE, compose_welcome, load_template

__all__ = [
    "Alias",
    "FallbackAlias",
    "ResolvedAlias",
    "resolve_alias",
    "Greeter",
    "WELCOME_TEMPLATE",
    "compose_welcome",
    "load_template",
]
