"""Porchlight application class.

Mutable during setup (route registration, lifespan hooks).
Frozen at runtime when start(), handle() or __call__() is first invoked.
"""

import inspect
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass

from porchlight._internal.asgi import Receive, Scope, Send
from porchlight._internal.types import Handler, Hook
from porchlight.config import ServerConfig
from porchlight.errors import HTTPError
from porchlight.http.request import Request
from porchlight.http.response import Response
from porchlight.resolvers.protocol import Resolver, resolve
from porchlight.resolvers.routes import RouteResolver
from porchlight.resolvers.static import StaticResolver
from porchlight.routing.route import Route
from porchlight.routing.router import Router
from porchlight.server.errors import handle_http_error, handle_internal_error
from porchlight.server.handler import handle_request

logger = logging.getLogger("porchlight.server")


@dataclass(slots=True)
class _PendingRoute:
    """A route waiting to be compiled."""

    path: str
    handler: Handler
    methods: list[str] | None
    name: str | None


class App:
    """The porchlight application: a static content server.

    Every request is answered by an ordered resolver chain, built once
    at freeze time:

    1. static assets under ``config.asset_dir`` (so a file can shadow a route)
    2. the explicit route table
    3. an empty 404

    Thread safety:
        Setup is single-threaded. The freeze transition uses a Lock +
        double-check so exactly one thread compiles the app. After the
        freeze nothing is mutated, so worker threads share it freely.
    """

    __slots__ = (
        "_address",
        "_freeze_lock",
        "_frozen",
        "_pending_routes",
        "_resolvers",
        "_router",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
    )

    def __init__(self, config: ServerConfig | None = None) -> None:
        self.config: ServerConfig = config or ServerConfig()
        self._pending_routes: list[_PendingRoute] = []
        self._startup_hooks: list[Hook] = []
        self._shutdown_hooks: list[Hook] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state, set during _freeze()
        self._router: Router | None = None
        self._resolvers: tuple[Resolver, ...] = ()

        # Set by start() once the address is known to be bindable
        self._address: tuple[str, int] | None = None

    # -- Route registration --

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
        name: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Args:
            path: URL path pattern. Use ``{param}`` for path parameters.
            methods: HTTP methods. Defaults to ``["GET"]``.
            name: Optional route name, shown by ``porchlight routes``.
        """

        def decorator(func: Handler) -> Handler:
            self._check_not_frozen()
            self._pending_routes.append(_PendingRoute(path, func, methods, name))
            return func

        return decorator

    # -- Lifespan hooks --

    def on_startup(self, func: Hook) -> Hook:
        """Register a function to run once when the server starts."""
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Hook) -> Hook:
        """Register a function to run once when the server stops."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Introspection --

    @property
    def router(self) -> Router:
        """The compiled route table (freezes the app)."""
        self._ensure_frozen()
        assert self._router is not None
        return self._router

    @property
    def resolvers(self) -> tuple[Resolver, ...]:
        """The resolver chain, in evaluation order (freezes the app)."""
        self._ensure_frozen()
        return self._resolvers

    @property
    def port(self) -> int:
        """The port this app is (or will be) listening on."""
        if self._address is not None:
            return self._address[1]
        return self.config.port

    # -- Request handling --

    def handle(self, request: Request) -> Response:
        """Answer one request. Never raises.

        A pure function of the request and the files on disk: no state
        is mutated, so the same request yields the same response.
        """
        self._ensure_frozen()
        try:
            return resolve(self._resolvers, request)
        except HTTPError as exc:
            return handle_http_error(exc, request)
        except Exception as exc:
            return handle_internal_error(exc, request)

    # -- Serving --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Bind and serve until interrupted.

        Raises ``BindError`` if the address cannot be bound.
        """
        from porchlight.server.listener import start

        start(self, host, port).run()

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles the lifespan scope directly, then delegates HTTP scopes
        to the request handler.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        self._ensure_frozen()
        await handle_request(scope, receive, send, handle=self.handle)

    async def _handle_lifespan(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
    ) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app before the first HTTP request, then runs startup
        and shutdown and signals completion back to the server.
        """
        self._ensure_frozen()

        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    await self._startup()
                except Exception as exc:
                    logger.exception("startup hook failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await self._shutdown()
                await send({"type": "lifespan.shutdown.complete"})
                return

    async def _startup(self) -> None:
        """Run startup hooks, then announce the listening port (once)."""
        for hook in self._startup_hooks:
            result = hook()
            if inspect.isawaitable(result):
                await result
        logger.info("Example app listening on port %d", self.port)

    async def _shutdown(self) -> None:
        for hook in self._shutdown_hooks:
            result = hook()
            if inspect.isawaitable(result):
                await result

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        router = Router()
        for pending in self._pending_routes:
            methods = frozenset(m.upper() for m in (pending.methods or ["GET"]))
            router.add(
                Route(
                    path=pending.path,
                    handler=pending.handler,
                    methods=methods,
                    name=pending.name,
                )
            )
        router.compile()
        self._router = router

        # Order is the contract: assets first, then routes, then 404.
        static = StaticResolver(
            self.config.asset_root(),
            index=self.config.index,
            cache_control=self.config.cache_control,
        )
        self._resolvers = (static, RouteResolver(router))
        self._frozen = True

        if not static.directory.is_dir():
            logger.warning("asset directory %s does not exist; serving routes only", static.directory)

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes and hooks before calling start()."
            )
            raise RuntimeError(msg)
