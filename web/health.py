"""
web/health.py
-------------
Liveness endpoint for the hosting platform.
GET / answers with a static string while the bot process is up.
"""

from typing import Optional

from aiohttp import web

from config import PORT
from utils.logger import get_logger

logger = get_logger(__name__)

HEALTH_TEXT = "Bot is running!"


async def handle_root(request: web.Request) -> web.Response:
    return web.Response(text=HEALTH_TEXT)


def create_app() -> web.Application:
    app = web.Application()
    app.router.add_get("/", handle_root)
    return app


class HealthServer:
    """Runs the health app on the bot's event loop."""

    def __init__(self, port: int = PORT, host: str = "0.0.0.0"):
        self.port = port
        self.host = host
        self._runner: Optional[web.AppRunner] = None

    async def start(self) -> None:
        """
        Bind and start serving.

        Raises:
            OSError: If the port is already in use.
        """
        self._runner = web.AppRunner(create_app())
        await self._runner.setup()
        site = web.TCPSite(self._runner, self.host, self.port)
        try:
            await site.start()
        except OSError as e:
            logger.error(f"Health server could not bind {self.host}:{self.port}: {e}")
            await self._runner.cleanup()
            self._runner = None
            raise
        logger.info(f"Health server listening on {self.host}:{self.port}")

    async def stop(self) -> None:
        if self._runner is not None:
            await self._runner.cleanup()
            self._runner = None
            logger.info("Health server stopped.")
