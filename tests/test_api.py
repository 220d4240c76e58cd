import pytest
from fastapi.testclient import TestClient

from webwater.server import ServerConfig, WaterServer, create_app


@pytest.fixture
def server():
    return WaterServer(ServerConfig(tick_interval=0.01))

@pytest.fixture
def client(server):
    return TestClient(create_app(server))


def test_list_meshes(client):
    response = client.get("/api/meshes")
    assert response.status_code == 200
    assert response.json() == {"meshes": ["terrain", "water_plane"]}

def test_get_mesh(client):
    body = client.get("/api/meshes/water_plane").json()

    assert body["name"] == "water_plane"
    assert body["vertexCount"] == 65 * 65
    assert body["triangleCount"] == 2 * 64 * 64
    assert len(body["indices"]) == 3 * body["triangleCount"]
    assert len(body["normals"]) == 3 * body["vertexCount"]

def test_unknown_mesh_is_404(client):
    response = client.get("/api/meshes/ocean")
    assert response.status_code == 404
    assert "ocean" in response.json()["detail"]

def test_list_textures(client):
    assert client.get("/api/textures").json() == {"textures": ["dudvmap", "normalmap", "stone"]}

def test_get_state(client):
    body = client.get("/api/state").json()

    assert body["clock"] == 0.0
    assert body["scenery"] is True
    assert len(body["camera"]["viewMatrix"]) == 16
    assert body["water"]["reflectivity"] == 0.6
    assert "type" not in body

def test_update_water(client, server):
    response = client.post("/api/state/water", json={
        "reflectivity": 0.8,
        "waveSpeed": 0.1,
        "useRefraction": False,
        "showScenery": False,
    })

    assert response.status_code == 200
    assert response.json() == {"status": "updated"}

    water = server.store.water()
    assert water.reflectivity == 0.8
    assert water.wave_speed == 0.1
    assert water.use_refraction is False
    # untouched fields keep their values
    assert water.fresnel_strength == 2.0
    assert water.use_reflection is True
    assert server.store.scenery() is False

def test_update_water_rejects_bad_body(client, server):
    response = client.post("/api/state/water", json={"reflectivity": "shiny"})
    assert response.status_code == 422
    assert server.store.water().reflectivity == 0.6

    response = client.post("/api/state/water", content=b"{not json", headers={"content-type": "application/json"})
    assert response.status_code == 422

def test_camera_drag(client, server):
    response = client.post("/api/state/camera", json={"mouseDown": {"x": 100, "y": 100}})
    assert response.json() == {"status": "updated"}

    client.post("/api/state/camera", json={"mouseMove": {"x": 50, "y": 100}})
    assert server.store.camera().yaw == pytest.approx(1.0)

    client.post("/api/state/camera", json={"mouseUp": True})
    client.post("/api/state/camera", json={"mouseMove": {"x": 0, "y": 100}})
    assert server.store.camera().yaw == pytest.approx(1.0)

def test_camera_fields_apply_in_order(client, server):
    # down, up, move: the move comes after the release and does nothing
    client.post("/api/state/camera", json={
        "mouseMove": {"x": 0, "y": 0},
        "mouseDown": {"x": 200, "y": 200},
        "mouseUp": True,
        "zoom": -3.0,
    })

    camera = server.store.camera()
    assert camera.yaw == 0.0
    assert camera.distance == 12.0

def test_websocket_receives_state(server):
    with TestClient(create_app(server)) as client:
        with client.websocket_connect("/ws") as ws:
            first = ws.receive_json()
            assert first["type"] == "state_update"
            assert set(first) == {"type", "clock", "scenery", "camera", "water"}

            client.post("/api/state/water", json={"reflectivity": 0.1})
            for _ in range(50):
                update = ws.receive_json()
                if update["water"]["reflectivity"] == 0.1:
                    break
            assert update["water"]["reflectivity"] == 0.1

        assert server.ticker.running
    assert not server.ticker.running

def test_dropped_socket_ends_quietly():
    server = WaterServer(ServerConfig(tick_interval=30.0))

    async def refuse(payload):
        raise ConnectionError("gone")

    with TestClient(create_app(server)) as client:
        with client.websocket_connect("/ws") as ws:
            assert ws.receive_json()["type"] == "state_update"
            assert len(server.broadcaster) == 1

            (subscriber,) = server.broadcaster._subscribers
            subscriber.send_json = refuse
            assert client.portal.call(server.broadcaster.broadcast, {"type": "state_update"}) == 0
            assert len(server.broadcaster) == 0

            # frames after the drop must not raise inside the endpoint
            ws.send_text("ping")
            ws.send_text("ping")

    assert len(server.broadcaster) == 0
