"""
Command-line entry point.

Usage:
    sitebuilder --port=8080
    PORT=8080 sitebuilder
    python -m sitebuilder --no-browser

An invalid port (not an integer in 1..9999) aborts before any socket is bound.
The editor URL is logged (and the browser opened) only after the bind succeeds.
"""

import argparse
import logging
import socket
import sys
import threading
import webbrowser
from collections.abc import Callable
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from sitebuilder.app.main import create_app
from sitebuilder.core.config import load_settings
from sitebuilder.domain.constants import BUILDER_URL_PREFIX
from sitebuilder.domain.errors import ConfigError

logger = logging.getLogger(__name__)

BROWSER_OPEN_DELAY = 1.0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitebuilder",
        description="Block-based website builder: editor + static site generator",
    )
    parser.add_argument("--port", default=None, help="port 1-9999 (env: PORT, default 3000)")
    parser.add_argument("--host", default=None, help="bind address (default from config)")
    parser.add_argument("--config", default=None, help="YAML config file (default: default.yaml)")
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="do not open the editor in the default browser",
    )
    return parser


def open_browser(url: str) -> None:
    """Open url in the default browser; failures are ignored."""
    try:
        webbrowser.open(url)
    except webbrowser.Error as e:
        logger.debug("Could not open browser for %s: %s", url, e)


class EditorServer(uvicorn.Server):
    """uvicorn server that calls on_started once its sockets are bound."""

    def __init__(self, config: uvicorn.Config, on_started: Callable[[], None]):
        super().__init__(config)
        self.on_started = on_started

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        # bind failures exit inside startup; lifespan failures leave started False
        if self.started:
            self.on_started()


def announce(builder_url: str, port: int, browser: bool) -> None:
    """Log the editor URL and schedule the browser."""
    logger.info("Editor: %s", builder_url)
    logger.info("Port: %d (1-9999)", port)

    if browser:
        timer = threading.Timer(BROWSER_OPEN_DELAY, open_browser, args=(builder_url,))
        timer.daemon = True
        timer.start()


def main(argv: list[str] | None = None) -> int:
    """
    Resolve settings, then serve.

    Returns:
        exit code (1 on invalid configuration)
    """
    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    args = build_parser().parse_args(argv)

    config_path = Path(args.config) if args.config else None
    try:
        settings = load_settings(config_path, cli_port=args.port)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.host:
        settings.host = args.host
    if args.no_browser:
        settings.open_browser = False

    app = create_app(settings)

    builder_url = f"http://localhost:{settings.port}{BUILDER_URL_PREFIX}/"
    server = EditorServer(
        uvicorn.Config(app, host=settings.host, port=settings.port),
        on_started=lambda: announce(builder_url, settings.port, settings.open_browser),
    )
    server.run()
    return 0


def run() -> None:
    """Console script entry."""
    sys.exit(main())


if __name__ == "__main__":
    run()
