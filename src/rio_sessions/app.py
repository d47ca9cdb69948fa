"""FastAPI service issuing per-request sessions from rio tokens."""

from __future__ import annotations

import argparse
import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager

from fastapi import FastAPI

from rio_sessions.application.register_session import RegisterSession
from rio_sessions.application.session_factory import SessionFactory
from rio_sessions.config.settings import Settings
from rio_sessions.infrastructure.http.middleware import request_logging_middleware
from rio_sessions.infrastructure.http.routes import SessionRouteDeps, add_session_routes
from rio_sessions.infrastructure.state.session_store import InMemorySessionStore
from rio_sessions.observability.logging import configure_logging

logger = logging.getLogger("rio_sessions")


def build_dependencies(settings: Settings) -> SessionRouteDeps:
    store = InMemorySessionStore(table=settings.sessions_table)
    return SessionRouteDeps(register_session=RegisterSession(SessionFactory(), store))


def create_app(deps: SessionRouteDeps | None = None, *, settings: Settings | None = None) -> FastAPI:
    if deps is None:
        deps = build_dependencies(settings or Settings.load())
    resolved_deps = deps

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        del app
        logger.info("rio-sessions starting up")
        yield
        logger.info("rio-sessions shutting down")

    app = FastAPI(title="Rio Sessions", version="0.1.0", lifespan=lifespan)
    app.middleware("http")(request_logging_middleware)
    add_session_routes(app, lambda: resolved_deps)

    @app.get("/healthz", tags=["health"], description="Session service health check.")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


def main(argv: Sequence[str] | None = None) -> None:
    settings = Settings.load()
    parser = argparse.ArgumentParser(description="Rio session service.")
    parser.add_argument("--serve", action="store_true", help="Run the FastAPI app with uvicorn.")
    parser.add_argument("--host", default=settings.host, help="Host interface when serving the app.")
    parser.add_argument("--port", type=int, default=settings.port, help="Port when serving the app.")
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.serve:
        import uvicorn

        configure_logging()
        logger.info("starting uvicorn on %s:%s", args.host, args.port)
        uvicorn.run(create_app(settings=settings), host=args.host, port=args.port, log_config=None)
    else:
        parser.print_help()


if __name__ == "__main__":  # pragma: no cover
    main()
