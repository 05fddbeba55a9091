"""MCP stdio transport.

Reads one JSON-RPC message per line from stdin and writes one response per
line to stdout. Logs go to stderr.

Usage::

    python -m fluentui_docs.mcp.stdio

Config example (Claude Desktop)::

    {"mcpServers": {"fluentui": {"command": "python", "args": ["-m", "fluentui_docs.mcp.stdio"]}}}
"""

import asyncio
import json
import logging
import sys
from typing import IO, Any

from .. import __version__
from ..config import Settings, settings
from ..errors import DocsIndexError, DocsRootNotFoundError
from ..logging_utils import setup_logging
from ..sources import create_index_manager
from .jsonrpc import PARSE_ERROR, jsonrpc_error
from .transport import ToolDispatcher

logger = logging.getLogger(__name__)


def _write(stream: IO[str], message: Any) -> None:
    stream.write(json.dumps(message, default=str) + "\n")
    stream.flush()


async def serve(
    dispatcher: ToolDispatcher,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
) -> None:
    """Serve JSON-RPC messages until stdin is closed."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    while True:
        line = await asyncio.to_thread(stdin.readline)
        if not line:
            break
        line = line.strip()
        if not line:
            continue

        try:
            body = json.loads(line)
        except json.JSONDecodeError:
            _write(stdout, jsonrpc_error(None, PARSE_ERROR, "Parse error"))
            continue

        response = await dispatcher.handle_payload(body)
        if response is not None:
            _write(stdout, response)


async def run(config: Settings = settings) -> None:
    """Build the initial index, then serve stdin/stdout."""
    manager = create_index_manager(config)
    logger.info(f"Starting {config.server_name} v{__version__} (stdio) from {manager.source_root}")
    try:
        await asyncio.to_thread(manager.rebuild)
    except (DocsIndexError, OSError) as e:
        # Keep serving: tools report not-ready until a reindex succeeds
        logger.error(f"Initial index build failed: {e}")

    await serve(ToolDispatcher(manager, config))


def main() -> None:
    setup_logging()
    try:
        asyncio.run(run())
    except DocsRootNotFoundError as e:
        logger.error(f"Cannot start: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


if __name__ == "__main__":
    main()
