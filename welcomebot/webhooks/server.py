"""Webhook HTTP server using aiohttp."""

from __future__ import annotations

import time
from typing import Callable

from aiohttp import web

from welcomebot.config import WebhookConfig
from welcomebot.core.greeter import Greeter
from welcomebot.errors import AuthenticationError, DownstreamError, WelcomeBotError
from welcomebot.utils.logging import get_logger
from welcomebot.webhooks.handlers import check_freshness, parse_event, verify_request

log = get_logger(__name__)


class WebhookServer:
    """Receives Pachca outgoing webhooks and hands them to the greeter."""

    def __init__(
        self,
        config: WebhookConfig,
        greeter: Greeter,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._config = config
        self._greeter = greeter
        self._clock = clock
        self._runner: web.AppRunner | None = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> None:
        app = self._build_app()
        self._runner = web.AppRunner(app)
        await self._runner.setup()
        site = web.TCPSite(self._runner, self._config.bind, self._config.port)
        await site.start()
        log.info(
            "welcomebot_listening",
            bind=self._config.bind,
            port=self._config.port,
            path=self._path,
        )

    async def stop(self) -> None:
        if self._runner is not None:
            await self._runner.cleanup()
            self._runner = None
        log.info("webhook_server_stopped")

    # ------------------------------------------------------------------
    # App construction
    # ------------------------------------------------------------------

    @property
    def _path(self) -> str:
        path = self._config.path
        return path if path.startswith("/") else f"/{path}"

    def _build_app(self) -> web.Application:
        app = web.Application()
        app.router.add_post(self._path, self._handle_webhook)
        app.router.add_get("/", self._handle_health)
        return app

    # ------------------------------------------------------------------
    # Request handling
    # ------------------------------------------------------------------

    async def _handle_health(self, request: web.Request) -> web.Response:
        return web.Response(status=200, text="OK")

    async def _handle_webhook(self, request: web.Request) -> web.Response:
        # Raw bytes: the signature covers the exact body
        body = await request.read()
        signature = request.headers.get(self._config.signature_header)

        try:
            verify_request(body, signature, self._config.signing_secret)
            event = parse_event(body)
            check_freshness(event, self._clock(), self._config.freshness_window)

            log.info("webhook_received", event_type=event.type, action=event.event)
            await self._greeter.handle(event)

        except AuthenticationError as e:
            log.warning("webhook_rejected", reason=e.reason, remote=request.remote)
            return web.Response(status=e.status, text=e.reason)

        except DownstreamError as e:
            log.error(
                "webhook_error",
                error=str(e),
                status_code=e.status_code,
                detail=e.detail,
            )
            return web.Response(status=e.status, text=e.reason)

        except WelcomeBotError as e:
            log.warning("webhook_rejected", reason=e.reason, error=str(e))
            return web.Response(status=e.status, text=e.reason)

        except Exception:
            log.exception("webhook_error")
            return web.Response(status=500, text="Internal error")

        return web.Response(status=200, text="OK")
