"""HTTP and WebSocket routes for the water server."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, WebSocket, WebSocketDisconnect
from fastapi.websockets import WebSocketState

from ..mesh.assets import AssetNotFoundError
from .app import WaterServer
from .schemas import CameraUpdateRequest, WaterUpdateRequest

router = APIRouter(prefix="/api", tags=["water"])
logger = logging.getLogger(__name__)


def get_server(request: Request) -> WaterServer:
    return request.app.state.server


@router.get("/meshes")
def list_meshes(server: WaterServer = Depends(get_server)):
    return {"meshes": server.assets.list_meshes()}


@router.get("/meshes/{name}")
def get_mesh(name: str, server: WaterServer = Depends(get_server)):
    try:
        mesh = server.assets.get_mesh(name)
    except AssetNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return mesh.to_dict()


@router.get("/textures")
def list_textures(server: WaterServer = Depends(get_server)):
    return {"textures": server.assets.list_textures()}


@router.get("/state")
def get_state(server: WaterServer = Depends(get_server)):
    return server.store.snapshot().to_dict()


@router.post("/state/water")
def update_water(body: WaterUpdateRequest, server: WaterServer = Depends(get_server)):
    server.store.dispatch_all(body.to_messages())
    return {"status": "updated"}


@router.post("/state/camera")
def update_camera(body: CameraUpdateRequest, server: WaterServer = Depends(get_server)):
    server.store.dispatch_all(body.to_messages())
    return {"status": "updated"}


async def state_socket(websocket: WebSocket):
    server: WaterServer = websocket.app.state.server
    await websocket.accept()
    server.broadcaster.subscribe(websocket)
    try:
        if not await server.broadcaster.send(websocket, server.store.snapshot().to_message()):
            return
        # Clients drive state over HTTP; incoming frames are read and discarded.
        # A subscriber dropped by the broadcaster is already closed server-side.
        while websocket.application_state == WebSocketState.CONNECTED:
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.debug("State socket closed by client")
    finally:
        server.broadcaster.unsubscribe(websocket)


def create_app(server: WaterServer) -> FastAPI:
    """Build the FastAPI app around an already-constructed WaterServer."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await server.startup()
        try:
            yield
        finally:
            await server.shutdown()

    app = FastAPI(title="webwater", lifespan=lifespan)
    app.state.server = server
    app.include_router(router)
    app.add_api_websocket_route("/ws", state_socket)
    return app
