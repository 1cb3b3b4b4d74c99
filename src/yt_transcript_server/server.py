"""YouTube Transcript MCP Server."""

import asyncio
import logging
import os
import signal
import sys
from enum import Enum
from typing import Any

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from yt_transcript_server.config import Settings
from yt_transcript_server.errors import MissingArgumentError
from yt_transcript_server.fetcher import TranscriptFetcher
from yt_transcript_server.providers import create_provider

# Logging to stderr (MCP convention)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("yt-transcript-server")

SERVER_NAME = "youtube-transcript-server"
SERVER_VERSION = "0.0.1"
TOOL_NAME = "get_youtube_transcript"

TRANSCRIPT_TOOL = types.Tool(
    name=TOOL_NAME,
    description="Get the transcript of a youtube video",
    inputSchema={
        "type": "object",
        "properties": {
            "videoUrl": {
                "type": "string",
                "description": "The url of the youtube video",
            },
            "lang": {
                "type": "string",
                "description": "Preferred caption language code (e.g. en, de, es). Defaults to the server setting.",
            },
        },
        "required": ["videoUrl"],
    },
    annotations=types.ToolAnnotations(
        readOnlyHint=True,
        destructiveHint=False,
        openWorldHint=True,
    ),
)


class ServerState(str, Enum):
    IDLE = "idle"
    CONNECTED = "connected"
    SHUTTING_DOWN = "shutting_down"


def _unknown_tool(name: str) -> McpError:
    return McpError(
        types.ErrorData(
            code=types.METHOD_NOT_FOUND,
            message=f"Unknown tool: {name}",
        )
    )


class YoutubeTranscriptServer:
    """Exposes ``get_youtube_transcript`` through the MCP list/call tool handlers.

    Lifecycle: constructed ``IDLE``, ``serve()`` attaches the stdio transport
    (``CONNECTED``), and every way out of ``serve()`` (``stop()``, SIGINT,
    client disconnect, cancellation) ends in ``SHUTTING_DOWN``.
    """

    def __init__(
        self,
        fetcher: TranscriptFetcher,
        name: str = SERVER_NAME,
        version: str = SERVER_VERSION,
    ):
        self.fetcher = fetcher
        self.server = Server(name, version=version)
        self.state = ServerState.IDLE
        self._transport_task: asyncio.Task | None = None
        self._stop_event = asyncio.Event()
        self._signal_installed = False
        self._setup_handlers()

    def _setup_handlers(self) -> None:
        self.server.list_tools()(self.list_tools)
        self.server.call_tool()(self._handle_call_tool)

        # The SDK's call_tool wrapper turns every exception into an error
        # result, so unknown names are rejected before it runs.
        call_tool_handler = self.server.request_handlers[types.CallToolRequest]

        async def dispatch_call_tool(req: types.CallToolRequest):
            if req.params.name != TOOL_NAME:
                error = _unknown_tool(req.params.name)
                logger.error(f"[MCP Error] {error.error.code}: {error.error.message}")
                raise error
            return await call_tool_handler(req)

        self.server.request_handlers[types.CallToolRequest] = dispatch_call_tool

    async def list_tools(self) -> list[types.Tool]:
        return [TRANSCRIPT_TOOL]

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None
    ) -> list[types.TextContent]:
        if name != TOOL_NAME:
            raise _unknown_tool(name)

        arguments = arguments or {}
        if arguments.get("videoUrl") is None:
            raise MissingArgumentError("videoUrl argument is required")

        url = str(arguments["videoUrl"])
        lang = arguments.get("lang")
        logger.info(f"{TOOL_NAME}: {url}")
        text = await self.fetcher.fetch_transcript(
            url, [str(lang)] if lang else None
        )
        return [types.TextContent(type="text", text=text)]

    async def _handle_call_tool(
        self, name: str, arguments: dict[str, Any] | None
    ) -> list[types.TextContent]:
        try:
            return await self.call_tool(name, arguments)
        except McpError as e:
            logger.error(f"[MCP Error] {e.error.code}: {e.error.message}")
            raise
        except Exception as e:
            logger.error(f"[MCP Error] {name} failed: {e}")
            raise

    async def serve(self) -> None:
        """Run on the stdio transport until the client disconnects or ``stop()``.

        After ``stop()`` this returns without waiting for the transport task,
        whose stdin reader thread stays blocked until a line or EOF arrives.
        """
        self._transport_task = asyncio.create_task(self._serve_stdio())
        stop_waiter = asyncio.create_task(self._stop_event.wait())
        self._install_signal_handler()
        try:
            await asyncio.wait(
                {self._transport_task, stop_waiter},
                return_when=asyncio.FIRST_COMPLETED,
            )
        except asyncio.CancelledError:
            self._transport_task.cancel()
            raise
        finally:
            stop_waiter.cancel()
            self._remove_signal_handler()
            self.state = ServerState.SHUTTING_DOWN
            await self.fetcher.close()

        if self._stop_event.is_set():
            logger.info("Server stopped")
        else:
            # Raises if the transport failed
            self._transport_task.result()
            logger.info("Client disconnected")

    async def _serve_stdio(self) -> None:
        async with stdio_server() as (read_stream, write_stream):
            self.state = ServerState.CONNECTED
            logger.info("Youtube Transcript MCP server running on stdio")
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )

    def stop(self) -> None:
        """Cancel the transport and release ``serve()``. Only the first call has an effect."""
        if self._stop_event.is_set():
            return
        logger.info("Shutting down")
        self.state = ServerState.SHUTTING_DOWN
        if self._transport_task is not None and not self._transport_task.done():
            self._transport_task.cancel()
        self._stop_event.set()

    def _install_signal_handler(self) -> None:
        try:
            asyncio.get_running_loop().add_signal_handler(signal.SIGINT, self.stop)
            self._signal_installed = True
        except NotImplementedError:
            # Windows loops: SIGINT arrives as KeyboardInterrupt in main()
            logger.debug("Signal handlers not supported on this event loop")

    def _remove_signal_handler(self) -> None:
        if self._signal_installed:
            asyncio.get_running_loop().remove_signal_handler(signal.SIGINT)
            self._signal_installed = False


def create_server(settings: Settings | None = None) -> YoutubeTranscriptServer:
    settings = settings or Settings()
    fetcher = TranscriptFetcher(create_provider(settings), settings.languages)
    return YoutubeTranscriptServer(fetcher)


def _exit(code: int) -> None:
    # The SDK's stdin reader thread cannot be interrupted, so skip the
    # interpreter's thread join and event loop teardown.
    logging.shutdown()
    sys.stdout.flush()
    sys.stderr.flush()
    os._exit(code)


def main():
    settings = Settings()
    logging.getLogger().setLevel(settings.log_level.upper())
    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(create_server(settings).serve())
    except KeyboardInterrupt:
        logger.info("Stopped by user")
    except Exception:
        logger.exception("Server failed")
        _exit(1)
    _exit(0)


if __name__ == "__main__":
    main()
