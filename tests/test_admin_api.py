from datetime import date

import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.v1.endpoints.admin_affairs import get_affair_admin_service
from transparence.config import AppConfig, settings
from transparence.models.affair import (
    AffairCategory,
    AffairRecord,
    AffairStatus,
    MergeResult,
)
from transparence.services import (
    AffairNotFoundError,
    InvalidMergeError,
    PoliticianNotFoundError,
    detect_duplicate_affairs,
)

ADMIN_KEY = "test-admin-key"
HEADERS = {"X-Admin-Key": ADMIN_KEY}


class FakeAffairAdminService:
    """In-memory stand-in for ``AffairAdminService``."""

    def __init__(self, affairs_by_politician):
        self.affairs_by_politician = affairs_by_politician
        self.deleted = []

    async def detect_duplicates(self, politician_id):
        if politician_id not in self.affairs_by_politician:
            raise PoliticianNotFoundError(f"Politician {politician_id} not found")
        affairs = self.affairs_by_politician[politician_id]
        return detect_duplicate_affairs(affairs), len(affairs)

    async def merge(self, primary_id, secondary_id):
        if primary_id == secondary_id:
            raise InvalidMergeError("Cannot merge an affair into itself")
        if secondary_id == 404:
            raise AffairNotFoundError([secondary_id])
        return MergeResult(
            primary_id=primary_id,
            deleted_id=secondary_id,
            sources_moved=2,
            events_moved=1,
            identifiers_merged=["ecli"],
        )

    async def delete(self, affair_id):
        if affair_id == 500:
            raise RuntimeError("connection refused for postgresql://admin:secret@db")
        if affair_id == 404:
            raise AffairNotFoundError([affair_id])
        self.deleted.append(affair_id)


def _make_affair(affair_id: int, title: str, **overrides) -> AffairRecord:
    data = {
        "id": affair_id,
        "title": title,
        "status": AffairStatus.MISE_EN_EXAMEN,
        "category": AffairCategory.EMPLOI_FICTIF,
    }
    data.update(overrides)
    return AffairRecord(**data)


@pytest.fixture
def fake_service():
    return FakeAffairAdminService({
        1: [
            _make_affair(10, "Emplois fictifs à l'Assemblée", ecli="ECLI:FR:CCASS:2022:CR00042",
                         facts_date=date(2012, 5, 1)),
            _make_affair(11, "Emplois fictifs de collaborateurs", ecli="ECLI:FR:CCASS:2022:CR00042"),
            _make_affair(12, "Injure publique", category=AffairCategory.INJURE),
        ],
        2: [_make_affair(20, "Fraude fiscale", category=AffairCategory.FRAUDE_FISCALE)],
    })


@pytest.fixture
def client(fake_service, monkeypatch):
    monkeypatch.setattr(settings.app, "admin_api_key", ADMIN_KEY)
    monkeypatch.setattr(settings.app, "require_admin_key", True)
    app.dependency_overrides[get_affair_admin_service] = lambda: fake_service
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_admin_routes_require_key(client) -> None:
    assert client.get("/api/v1/admin/politicians/1/duplicates").status_code == 401
    response = client.get(
        "/api/v1/admin/politicians/1/duplicates",
        headers={"X-Admin-Key": "wrong"},
    )
    assert response.status_code == 401


def test_admin_routes_unavailable_without_configured_key(client, monkeypatch) -> None:
    monkeypatch.setattr(settings.app, "admin_api_key", None)
    response = client.get("/api/v1/admin/politicians/1/duplicates", headers=HEADERS)
    assert response.status_code == 503


def test_detect_duplicates_returns_groups(client) -> None:
    response = client.get("/api/v1/admin/politicians/1/duplicates", headers=HEADERS)

    assert response.status_code == 200
    body = response.json()
    assert body["politician_id"] == 1
    assert body["total"] == 3
    assert len(body["groups"]) == 1
    group = body["groups"][0]
    assert group["score"] == 100
    assert group["reasons"] == ["same legal reference (ECLI)"]
    assert {affair["id"] for affair in group["affairs"]} == {10, 11}
    assert group["affairs"][0]["facts_date"] == "2012-05-01"


def test_detect_duplicates_with_single_affair_is_empty(client) -> None:
    response = client.get("/api/v1/admin/politicians/2/duplicates", headers=HEADERS)
    assert response.status_code == 200
    assert response.json()["groups"] == []
    assert response.json()["total"] == 1


def test_detect_duplicates_unknown_politician(client) -> None:
    response = client.get("/api/v1/admin/politicians/99/duplicates", headers=HEADERS)
    assert response.status_code == 404


def test_merge_affairs(client) -> None:
    response = client.post(
        "/api/v1/admin/affairs/merge",
        json={"primary_id": 10, "secondary_id": 11},
        headers=HEADERS,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["deleted_id"] == 11
    assert body["sources_moved"] == 2
    assert body["identifiers_merged"] == ["ecli"]


def test_merge_rejects_same_affair(client) -> None:
    response = client.post(
        "/api/v1/admin/affairs/merge",
        json={"primary_id": 10, "secondary_id": 10},
        headers=HEADERS,
    )
    assert response.status_code == 400


def test_merge_missing_affair(client) -> None:
    response = client.post(
        "/api/v1/admin/affairs/merge",
        json={"primary_id": 10, "secondary_id": 404},
        headers=HEADERS,
    )
    assert response.status_code == 404


def test_delete_affair(client, fake_service) -> None:
    response = client.delete("/api/v1/admin/affairs/12", headers=HEADERS)

    assert response.status_code == 200
    assert response.json() == {"success": True, "deleted_id": 12}
    assert fake_service.deleted == [12]

    assert client.delete("/api/v1/admin/affairs/404", headers=HEADERS).status_code == 404


def test_press_classify_is_public(client) -> None:
    response = client.post(
        "/api/v1/press/classify",
        json={"title": "Politicien X mis en examen", "description": None},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["tier"] == "high-precision"
    assert body["matched_keyword"] == "mis en examen"
    assert body["analysis_model"] == settings.press.high_precision_model


def test_press_classify_low_precision(client) -> None:
    response = client.post("/api/v1/press/classify", json={"title": "Le processus législatif continue"})
    assert response.json()["tier"] == "low-precision"
    assert response.json()["matched_keyword"] is None


def test_debug_is_off_by_default(monkeypatch) -> None:
    monkeypatch.delenv("APP_DEBUG", raising=False)
    assert AppConfig(_env_file=None).debug is False


def test_unhandled_errors_hide_details_outside_debug(fake_service, monkeypatch) -> None:
    monkeypatch.setattr(settings.app, "admin_api_key", ADMIN_KEY)
    monkeypatch.setattr(settings.app, "debug", False)
    app.dependency_overrides[get_affair_admin_service] = lambda: fake_service
    try:
        client = TestClient(app, raise_server_exceptions=False)
        response = client.delete("/api/v1/admin/affairs/500", headers=HEADERS)
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json()["detail"] == "An unexpected error occurred"
    assert "secret" not in response.text


def test_cors_preflight_allows_admin_key_header(client) -> None:
    response = client.options(
        "/api/v1/admin/affairs/12",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "DELETE",
            "Access-Control-Request-Headers": "X-Admin-Key",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert "x-admin-key" in response.headers["access-control-allow-headers"].lower()
