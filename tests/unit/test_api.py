from fastapi.testclient import TestClient
import pytest

from agro_registry.infrastructure.repositories.memory_store import InMemoryStore
from agro_registry.presentation.api.dependencies import get_services
from agro_registry.presentation.api.main import app
from agro_registry.presentation.container import build_services
from tests.unit._fakes_store import TickingClock


@pytest.fixture
def client():
    services = build_services(InMemoryStore(clock=TickingClock()))
    app.dependency_overrides[get_services] = lambda: services
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def _producer(client, document="123.456.789-01"):
    resp = client.post("/producers", json={"name": "João", "document": document, "document_type": "CPF"})
    assert resp.status_code == 201
    return resp.json()


def _farm(client, producer_id, **overrides):
    body = {
        "name": "Fazenda São João",
        "city": "Ribeirão Preto",
        "state": "SP",
        "total_area": 100,
        "arable_area": 60,
        "vegetation_area": 40,
        "producer_id": producer_id,
    }
    body.update(overrides)
    return client.post("/farms", json=body)


def test_health(client):
    body = client.get("/health").json()
    assert body["status"] == "ok"
    assert body["store"] in {"memory", "sqlite"}


def test_create_producer_normalizes_document(client):
    data = _producer(client)
    assert data["document"] == "12345678901"
    assert data["document_type"] == "CPF"


def test_duplicate_document_is_409(client):
    _producer(client)
    resp = client.post("/producers", json={"name": "X", "document": "12345678901", "document_type": "CPF"})
    assert resp.status_code == 409
    assert resp.json()["code"] == "CONFLICT"


def test_missing_producer_is_404(client):
    resp = client.get("/producers/nope")
    assert resp.status_code == 404
    assert resp.json() == {
        "code": "NOT_FOUND",
        "message": "Producer not found",
        "details": {"entity": "Producer", "id": "nope"},
    }


def test_farm_area_violation_is_400(client):
    producer = _producer(client)
    resp = _farm(client, producer["id"], arable_area=70, vegetation_area=50)
    assert resp.status_code == 400
    body = resp.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["message"] == "the sum of arable and vegetation area cannot exceed total area"
    assert body["details"] == {"field": "total_area"}


def test_malformed_body_is_400(client):
    resp = client.post("/producers", json={"name": "João", "document_type": "RG"})
    assert resp.status_code == 400
    body = resp.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"] == {"field": "document"}


def test_negative_area_is_400_on_that_field(client):
    producer = _producer(client)
    resp = _farm(client, producer["id"], arable_area=-5)
    assert resp.status_code == 400
    assert resp.json()["details"] == {"field": "arable_area"}

    farm = _farm(client, producer["id"]).json()
    resp = client.patch(f"/farms/{farm['id']}", json={"vegetation_area": -1})
    assert resp.status_code == 400
    assert resp.json()["code"] == "VALIDATION_ERROR"
    assert resp.json()["details"] == {"field": "vegetation_area"}
    assert client.get(f"/farms/{farm['id']}").json()["vegetation_area"] == 40


def test_document_without_digits_is_400(client):
    resp = client.post("/producers", json={"name": "X", "document": "---", "document_type": "CPF"})
    assert resp.status_code == 400
    assert resp.json()["details"] == {"field": "document"}
    assert client.get("/producers").json() == []


def test_partial_farm_update_checks_merged_areas(client):
    producer = _producer(client)
    farm = _farm(client, producer["id"]).json()
    resp = client.patch(f"/farms/{farm['id']}", json={"arable_area": 70})
    assert resp.status_code == 400
    resp = client.patch(f"/farms/{farm['id']}", json={"arable_area": 50})
    assert resp.status_code == 200
    assert resp.json()["arable_area"] == 50


def test_nested_reads(client):
    producer = _producer(client)
    farm = _farm(client, producer["id"]).json()
    harvest = client.post("/harvests", json={"year": 2024, "season": "Safra", "farm_id": farm["id"]}).json()
    crop = client.post("/crops", json={"name": "Soja", "area": 50, "harvest_id": harvest["id"]})
    assert crop.status_code == 201

    tree = client.get(f"/producers/{producer['id']}").json()
    assert tree["farms"][0]["harvests"][0]["crops"][0]["name"] == "Soja"

    farm_view = client.get(f"/farms/{farm['id']}").json()
    assert farm_view["producer"]["id"] == producer["id"]

    harvest_view = client.get(f"/harvests/{harvest['id']}").json()
    assert harvest_view["farm"]["producer"]["document"] == "12345678901"

    crops = client.get("/crops").json()
    assert crops[0]["harvest"]["farm"]["id"] == farm["id"]


def test_delete_cascades_and_returns_204(client):
    producer = _producer(client)
    farm = _farm(client, producer["id"]).json()
    resp = client.delete(f"/producers/{producer['id']}")
    assert resp.status_code == 204
    assert client.get(f"/farms/{farm['id']}").status_code == 404
    assert client.delete(f"/producers/{producer['id']}").status_code == 404


def test_dashboard(client):
    producer = _producer(client)
    _farm(client, producer["id"])
    assert client.get("/dashboard/stats").json() == {
        "total_farms": 1,
        "total_hectares": 100,
        "total_producers": 1,
        "total_crops": 0,
    }
    assert client.get("/dashboard/farms-by-state").json() == [{"state": "SP", "count": 1}]
    assert client.get("/dashboard/crops-by-type").json() == []
    assert client.get("/dashboard/land-use").json() == [
        {"type": "Arable area", "area": 60},
        {"type": "Vegetation", "area": 40},
    ]


def test_metrics_count_domain_errors(client):
    client.get("/crops/missing")
    body = client.get("/metrics").text
    assert 'agro_registry_domain_errors_total{code="NOT_FOUND"}' in body
