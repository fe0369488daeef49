#!/usr/bin/env python3
"""
WooCommerce MCP Streamable HTTP Server
FastAPI application serving one MCP session per client at ``/mcp``
"""

import json
from contextlib import asynccontextmanager
from typing import Any, Callable, Optional, Tuple

import anyio
from anyio.abc import TaskGroup
from fastapi import FastAPI
from mcp.server.fastmcp import FastMCP
from mcp.server.streamable_http import MCP_SESSION_ID_HEADER, StreamableHTTPServerTransport
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.types import Message, Receive, Scope, Send

from ..config import config
from ..mcp_server_fastmcp import create_server
from ..models.credentials import Credentials
from ..protocol.errors import InvalidSession, is_initialize_request
from ..services.session_service import SessionRegistry
from ..utils.logger import get_logger

logger = get_logger(__name__)

CREDENTIAL_HEADERS = ("X-WC-URL", "X-WC-KEY", "X-WC-SECRET")
MISSING_HEADER_CREDENTIALS = (
    "Missing WooCommerce credentials in request headers (X-WC-URL, X-WC-KEY, X-WC-SECRET)"
)


def _replay_receive(body: bytes, receive: Receive) -> Receive:
    """Hand the already-read body to the transport once, then defer to ``receive``"""
    sent = False

    async def replay() -> Message:
        nonlocal sent
        if not sent:
            sent = True
            return {"type": "http.request", "body": body, "more_body": False}
        return await receive()

    return replay


class StreamableHTTPSessionHandler:
    """ASGI endpoint routing MCP requests to per-session transports

    A POST without ``mcp-session-id`` carrying an ``initialize`` request
    opens a new session bound to its own credentials. Requests bearing the
    id of an active session are routed to it. Anything else is rejected
    before reaching a tool.
    """

    def __init__(
        self,
        registry: SessionRegistry[StreamableHTTPServerTransport],
        credentials_source: str = "payload",
        json_response: bool = True,
        server_factory: Callable[..., FastMCP] = create_server
    ):
        self.registry = registry
        self.credentials_source = credentials_source
        self.json_response = json_response
        self._server_factory = server_factory
        self._task_group: Optional[TaskGroup] = None

    @asynccontextmanager
    async def run(self):
        """Own the task group that runs every session's server loop"""
        async with anyio.create_task_group() as tg:
            self._task_group = tg
            try:
                yield
            finally:
                tg.cancel_scope.cancel()
                self._task_group = None

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        session_id = request.headers.get(MCP_SESSION_ID_HEADER)

        if request.method == "POST":
            await self._handle_post(request, session_id, scope, receive, send)
            return

        transport = self._active_transport(session_id)
        if transport is None:
            response = PlainTextResponse("Invalid or missing session ID", status_code=400)
            await response(scope, receive, send)
            return
        await transport.handle_request(scope, receive, send)

        if request.method == "DELETE" and transport.is_terminated:
            self.registry.remove(session_id)

    def _active_transport(self, session_id: Optional[str]) -> Optional[StreamableHTTPServerTransport]:
        """Transport of an active session; terminated sessions count as absent"""
        transport = self.registry.get(session_id)
        if transport is not None and transport.is_terminated:
            self.registry.remove(session_id)
            return None
        return transport

    async def _handle_post(self, request: Request, session_id: Optional[str],
                           scope: Scope, receive: Receive, send: Send) -> None:
        raw_body = await request.body()
        try:
            body: Any = json.loads(raw_body) if raw_body else {}
        except ValueError:
            body = {}
        replay = _replay_receive(raw_body, receive)

        transport = self._active_transport(session_id)
        if transport is not None:
            await transport.handle_request(scope, replay, send)
            return

        if not session_id and is_initialize_request(body):
            credentials = self._extract_credentials(request, body)
            if credentials is None:
                response = PlainTextResponse(MISSING_HEADER_CREDENTIALS, status_code=400)
                await response(scope, receive, send)
                return
            await self._initialize_session(credentials, scope, replay, send)
            return

        logger.warning(f"Rejected request without a valid session (session id: {session_id})")
        response = JSONResponse(InvalidSession().to_response(None), status_code=400)
        await response(scope, receive, send)

    def _extract_credentials(self, request: Request, body: dict) -> Optional[Credentials]:
        """Credentials for a new session, or None when required headers are missing"""
        if self.credentials_source == "headers":
            url, key, secret = (request.headers.get(name, "") for name in CREDENTIAL_HEADERS)
            credentials = Credentials(url=url, key=key, secret=secret)
            return credentials if credentials.is_complete else None

        params = body.get("params") or {}
        return Credentials.from_mapping(params.get("credentials") if isinstance(params, dict) else None)

    async def _initialize_session(self, credentials: Credentials, scope: Scope,
                                  receive: Receive, send: Send) -> None:
        """Run the initialize handshake on a fresh transport

        The session is registered only when the transport answers the
        handshake with a 2xx status; otherwise it is torn down.
        """
        session_id, transport, cancel_scope = await self._start_session(credentials)

        async def send_and_register(message: Message) -> None:
            if message["type"] == "http.response.start" and 200 <= message["status"] < 300:
                self.registry.register(session_id, transport)
            await send(message)

        try:
            await transport.handle_request(scope, receive, send_and_register)
        finally:
            if session_id not in self.registry:
                logger.warning(f"Initialize handshake failed, discarding session {session_id}")
                await transport.terminate()
                cancel_scope.cancel()

    async def _start_session(
        self, credentials: Credentials
    ) -> Tuple[str, StreamableHTTPServerTransport, anyio.CancelScope]:
        """Start a session's server loop; the caller decides whether to register it"""
        if self._task_group is None:
            raise RuntimeError("Session handler is not running; use it inside run()")

        session_id = self.registry.new_session_id()
        transport = StreamableHTTPServerTransport(
            mcp_session_id=session_id,
            is_json_response_enabled=self.json_response
        )
        server = self._server_factory(credentials, session_id=session_id)._mcp_server
        cancel_scope = anyio.CancelScope()

        async def run_session(*, task_status=anyio.TASK_STATUS_IGNORED):
            with cancel_scope:
                try:
                    async with transport.connect() as (read_stream, write_stream):
                        task_status.started()
                        await server.run(read_stream, write_stream, server.create_initialization_options())
                except Exception as e:
                    logger.error(f"Session {session_id} crashed: {e}", exc_info=True)
                finally:
                    self.registry.remove(session_id)

        await self._task_group.start(run_session)
        return session_id, transport, cancel_scope


def create_app(registry: Optional[SessionRegistry] = None,
               credentials_source: Optional[str] = None,
               json_response: Optional[bool] = None,
               server_factory: Callable[..., FastMCP] = create_server) -> FastAPI:
    """Build the FastAPI application serving ``/mcp`` and ``/health``"""
    registry = registry if registry is not None else SessionRegistry()
    handler = StreamableHTTPSessionHandler(
        registry,
        credentials_source=credentials_source or config.server.credentials_source,
        json_response=config.server.json_response if json_response is None else json_response,
        server_factory=server_factory
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with handler.run():
            logger.info(f"WooCommerce MCP server ready (credentials from {handler.credentials_source})")
            yield
        logger.info("WooCommerce MCP server stopped")

    app = FastAPI(title="WooCommerce MCP Server", version=config.server.version, lifespan=lifespan)
    app.state.sessions = registry
    app.add_route("/mcp", handler, methods=["GET", "POST", "DELETE"])

    @app.get("/health")
    async def health():
        return {"status": "ok", "active_sessions": len(registry)}

    return app


def run_http_server():
    import uvicorn

    logger.info(f"WooCommerce MCP server running on http://{config.server.host}:{config.server.port}/mcp")
    uvicorn.run(
        create_app(),
        host=config.server.host,
        port=config.server.port,
        log_level=config.logging.level.lower()
    )


if __name__ == "__main__":
    run_http_server()
