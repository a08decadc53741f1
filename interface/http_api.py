"""FastAPI routes exposing the todo store as a small REST API."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from application.todo_manager import TodoManager
from config import get_cors_origins, get_public_dir
from core import StoreCorruptedError, parse_todo_id
from interface.serializers import todo_to_dict, todos_to_list

logger = logging.getLogger("todo.http")

NOT_FOUND_BODY = {"error": "Todo not found"}


def _not_found() -> JSONResponse:
    return JSONResponse(status_code=404, content=NOT_FOUND_BODY)


def create_app(manager: Optional[TodoManager] = None, public_dir: Optional[Path] = None) -> FastAPI:
    app = FastAPI(title="todo", version="1.0.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.manager = manager or TodoManager()
    static_dir = Path(public_dir) if public_dir is not None else get_public_dir()

    @app.exception_handler(StoreCorruptedError)
    async def store_corrupted(_request: Request, exc: StoreCorruptedError):
        logger.error("%s", exc)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.get("/healthz")
    async def health_check():
        return {"status": "ok"}

    @app.get("/favicon.ico")
    async def favicon():
        return Response(status_code=204)

    @app.get("/api/todos")
    async def list_todos(request: Request, pending: bool = False):
        todos = request.app.state.manager.list(not pending)
        return todos_to_list(todos)

    @app.post("/api/todos")
    async def create_todo(request: Request):
        try:
            body: Any = await request.json()
        except ValueError:
            body = None
        text = body.get("text") if isinstance(body, dict) else None
        if not text or not isinstance(text, str):
            return JSONResponse(status_code=400, content={"error": "Text is required"})
        todo = request.app.state.manager.add(text)
        return JSONResponse(status_code=201, content=todo_to_dict(todo))

    @app.delete("/api/todos/completed/clear")
    async def clear_completed(request: Request):
        count = request.app.state.manager.clear_completed()
        return {"deleted": count}

    @app.patch("/api/todos/{todo_id}/complete")
    async def complete_todo(todo_id: str, request: Request):
        parsed = parse_todo_id(todo_id)
        todo = request.app.state.manager.complete(parsed) if parsed is not None else None
        return todo_to_dict(todo) if todo is not None else _not_found()

    @app.patch("/api/todos/{todo_id}/uncomplete")
    async def uncomplete_todo(todo_id: str, request: Request):
        parsed = parse_todo_id(todo_id)
        todo = request.app.state.manager.uncomplete(parsed) if parsed is not None else None
        return todo_to_dict(todo) if todo is not None else _not_found()

    @app.delete("/api/todos/{todo_id}")
    async def delete_todo(todo_id: str, request: Request):
        parsed = parse_todo_id(todo_id)
        todo = request.app.state.manager.delete(parsed) if parsed is not None else None
        return todo_to_dict(todo) if todo is not None else _not_found()

    @app.get("/")
    async def index():
        index_file = static_dir / "index.html"
        if not index_file.is_file():
            return JSONResponse(status_code=404, content={"error": "index.html not found"})
        return FileResponse(index_file)

    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir), name="static")
    else:
        logger.warning("Static directory %s not found; serving API only", static_dir)

    return app
