"""Welcome bot entry point: wires the API client, greeter and webhook server."""

from __future__ import annotations

import asyncio
import signal
import sys

import click

from welcomebot import __version__
from welcomebot.config import ConfigError, Settings, load_settings, validate_settings
from welcomebot.core.greeter import Greeter
from welcomebot.core.welcome import load_template
from welcomebot.transports.base import ChatTransport
from welcomebot.transports.pachca import PachcaTransport
from welcomebot.utils.logging import get_logger, setup_logging
from welcomebot.webhooks.server import WebhookServer

log = get_logger(__name__)


class WelcomeBot:
    """Owns the long-lived API client and the webhook server."""

    def __init__(self, settings: Settings, transport: ChatTransport | None = None) -> None:
        self.settings = settings
        self.transport = transport or PachcaTransport(settings.api)
        self.greeter = Greeter(
            self.transport,
            fallback_alias=settings.greeting.fallback_alias,
            template=load_template(settings.greeting.template_file),
        )
        self.server = WebhookServer(settings.webhook, self.greeter)

    async def start(self) -> None:
        log.info("welcomebot_starting", version=__version__)
        await self.server.start()

    async def stop(self) -> None:
        log.info("welcomebot_stopping")
        await self.server.stop()
        await self.transport.close()
        log.info("welcomebot_stopped")


async def run(settings: Settings) -> None:
    bot = WelcomeBot(settings)

    loop = asyncio.get_running_loop()
    stop_event = asyncio.Event()

    def _signal_handler() -> None:
        log.info("shutdown_signal")
        stop_event.set()

    if sys.platform != "win32":
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, _signal_handler)

    await bot.start()

    try:
        if sys.platform == "win32":
            while not stop_event.is_set():
                await asyncio.sleep(1)
        else:
            await stop_event.wait()
    except KeyboardInterrupt:
        pass
    finally:
        await bot.stop()


@click.command()
@click.option("--config", "config_path", default=None, help="Path to config YAML file")
@click.option("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--port", type=int, default=None, help="Port to listen on (overrides PORT)")
@click.version_option(__version__, prog_name="welcomebot")
def cli(config_path: str | None, log_level: str | None, port: int | None) -> None:
    """Greet new Pachca members from outgoing webhooks."""
    try:
        settings = load_settings(config_path)
        validate_settings(settings)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    if log_level:
        settings.log_level = log_level
    if port is not None:
        settings.webhook.port = port
    setup_logging(level=settings.log_level, json_output=settings.log_json)
    asyncio.run(run(settings))


if __name__ == "__main__":
    cli()
