from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_read_root():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"

def test_router_mounted_under_api_v1():
    response = client.get("/api/v1/results/processpro")
    assert response.status_code == 200
    assert response.json()["result_type"] == "ProcessPro"
