"""Process entry point: load config, configure logging, serve over the configured transport.

Logs go to stderr; with the stdio transport, stdout carries the protocol.
"""

import asyncio
import logging
import sys

from .client import UsaSpendingClient
from .config import Settings, load_config
from .server import build_server

logger = logging.getLogger(__name__)


async def serve(settings: Settings) -> None:
    """Run the server until the transport closes.

    The fetch client lives exactly as long as the server: its connection pool
    is closed on the way out, whether the transport ends cleanly or not.
    """
    async with UsaSpendingClient(settings) as client:
        mcp = build_server(settings, client=client)
        logger.info("server_start transport=%s", settings.transport)
        if settings.transport == "stdio":
            await mcp.run_async(transport="stdio")
        else:
            await mcp.run_async(
                transport=settings.transport, host=settings.host, port=settings.port
            )
    logger.info("server_stop transport=%s", settings.transport)


def main() -> None:
    """Start the MCP server."""
    try:
        settings = load_config()
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    asyncio.run(serve(settings))


if __name__ == "__main__":
    main()
