from __future__ import annotations
from typing import Any, Optional

import socketio
import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .config import Settings
from .errors import (
    LanguageNotSupported,
    LevelNotFound,
    LevelRestricted,
    LexiplayError,
    StepNotApplicable,
)
from .loader import GameStores, load_stores
from .logging_utils import configure_logging
from .routers import games, languages
from .schemas import ErrorResponse, PlayRequest

logger = structlog.get_logger(__name__)

ERROR_STATUS = {
    LanguageNotSupported: 404,
    LevelNotFound: 404,
    StepNotApplicable: 404,
    LevelRestricted: 401,
}

def error_payload(exc: LexiplayError) -> dict[str, Any]:
    return ErrorResponse(error=exc.message, type=type(exc).__name__, data=exc.details()).model_dump()

def build_api(stores: GameStores, settings: Settings) -> FastAPI:
    app = FastAPI(title="Lexiplay Server", version="0.1.0")
    app.state.stores = stores
    app.state.settings = settings

    # CORS for REST
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    @app.exception_handler(LexiplayError)
    async def lexiplay_error(request: Request, exc: LexiplayError):
        status = ERROR_STATUS.get(type(exc), 400)
        logger.info('request_failed', path=request.url.path, error=type(exc).__name__, status=status)
        return JSONResponse(status_code=status, content=error_payload(exc))

    app.include_router(languages.router)
    app.include_router(games.router)
    return app

async def handle_play(sio: socketio.AsyncServer, stores: GameStores, sid: str, payload: Any) -> None:
    """Score a `game:play` payload and answer the sender only."""
    try:
        req = PlayRequest.model_validate(payload)
    except ValidationError as e:
        data = [{ 'field': '.'.join(str(p) for p in err['loc']), 'message': err['msg'] } for err in e.errors()]
        await sio.emit('game:error', { 'ok': False, 'error': 'Invalid play payload', 'type': 'ValidationError', 'data': data }, to=sid)
        return
    try:
        result = stores.engine.score(req.lang, req.level, req.words)
    except LexiplayError as e:
        logger.info('play_failed', sid=sid, error=type(e).__name__)
        await sio.emit('game:error', error_payload(e), to=sid)
        return
    await sio.emit('game:scored', result.model_dump(), to=sid)

def build_socket_server(stores: GameStores, settings: Settings) -> socketio.AsyncServer:
    sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins=settings.cors_allowed_origins)

    @sio.on('game:play')
    async def on_play(sid, payload):
        await handle_play(sio, stores, sid, payload)

    return sio

def create_app(settings: Optional[Settings] = None) -> socketio.ASGIApp:
    settings = settings or Settings()
    configure_logging(settings)
    # Everything is loaded before the app exists, requests only ever read the stores
    stores = load_stores(settings)
    api = build_api(stores, settings)
    sio = build_socket_server(stores, settings)
    return socketio.ASGIApp(sio, other_asgi_app=api)

# For local running: uvicorn lexiplay.main:create_app --factory --reload --host 0.0.0.0 --port 8000
