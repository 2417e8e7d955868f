"""
Приёмочные тесты роутера /projects.

Проверяют: 400 при создании без name, 201 + чтение по id при создании с name,
204 при удалении (в том числе несуществующего), 404 при чтении несуществующего,
сохранение через PUT и 422 при расхождении id в теле и в пути.
"""
from datetime import date
from http import HTTPStatus

from projects_api.api.deps import get_publisher
from projects_api.events.projects import ProjectCreatedEvent
from projects_api.events.publisher import EventPublisher


def _create(client, name="Project 1", **extra):
    payload = {"name": name, **extra}
    resp = client.post("/projects", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_create_without_name_returns_400(client):
    """POST без name -> 400 и тело HttpErrorInfo."""
    resp = client.post("/projects", json={})
    assert resp.status_code == 400
    body = resp.json()
    assert body["status"] == 400
    assert body["path"] == "/projects"
    assert body["message"] == "Project name must not be null"


def test_create_with_explicit_null_name_returns_400(client):
    resp = client.post("/projects", json={"name": None, "date_created": "2020-01-01"})
    assert resp.status_code == 400


def test_create_with_name_returns_201_and_is_retrievable(client):
    """POST с name -> 201, затем GET /projects/{id} возвращает тот же name."""
    created = _create(client, "Alpha")
    assert created["id"] is not None
    assert created["name"] == "Alpha"
    assert created["date_created"] == date.today().isoformat()

    resp = client.get(f"/projects/{created['id']}")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Alpha"


def test_create_keeps_given_date(client):
    created = _create(client, "Dated", date_created="2019-05-17")
    assert created["date_created"] == "2019-05-17"


def test_create_with_empty_name_is_accepted(client):
    """Проверяется только None; пустая строка: валидное имя."""
    created = _create(client, "")
    assert created["name"] == ""


def test_get_missing_returns_404(client):
    resp = client.get("/projects/9999")
    assert resp.status_code == 404
    body = resp.json()
    assert body["status"] == 404
    assert body["error"] == HTTPStatus.NOT_FOUND.phrase
    assert body["path"] == "/projects/9999"
    assert body["message"] == "Project 9999 not found"
    assert "timestamp" in body


def test_get_with_non_integer_id_returns_validation_error(client):
    resp = client.get("/projects/abc")
    assert resp.status_code == 422
    assert "detail" in resp.json()


def test_find_all_returns_every_project_in_id_order(client):
    assert client.get("/projects").json() == []
    first = _create(client, "First")
    second = _create(client, "Second")

    resp = client.get("/projects")
    assert resp.status_code == 200
    assert [p["id"] for p in resp.json()] == [first["id"], second["id"]]
    assert [p["name"] for p in resp.json()] == ["First", "Second"]


def test_delete_existing_returns_204_and_removes(client):
    created = _create(client, "Doomed")
    resp = client.delete(f"/projects/{created['id']}")
    assert resp.status_code == 204
    assert resp.content == b""
    assert client.get(f"/projects/{created['id']}").status_code == 404


def test_delete_missing_returns_204(client):
    """Удаление несуществующего проекта: тоже 204."""
    resp = client.delete("/projects/4242")
    assert resp.status_code == 204


def test_update_existing_project(client):
    created = _create(client, "Old name", date_created="2020-02-02")
    resp = client.put(f"/projects/{created['id']}", json={"name": "New name"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == created["id"]
    assert body["name"] == "New name"
    # дата не передана -> остаётся прежней
    assert body["date_created"] == "2020-02-02"
    assert client.get(f"/projects/{created['id']}").json()["name"] == "New name"


def test_update_with_matching_body_id(client):
    created = _create(client, "Same id")
    resp = client.put(
        f"/projects/{created['id']}",
        json={"id": created["id"], "name": "Renamed", "date_created": "2021-03-03"},
    )
    assert resp.status_code == 200
    assert resp.json()["date_created"] == "2021-03-03"


def test_update_with_mismatched_body_id_returns_422(client):
    created = _create(client, "Mismatch")
    resp = client.put(f"/projects/{created['id']}", json={"id": created["id"] + 100, "name": "x"})
    assert resp.status_code == 422
    body = resp.json()
    assert body["status"] == 422
    assert body["path"] == f"/projects/{created['id']}"
    assert str(created["id"] + 100) in body["message"]
    assert client.get(f"/projects/{created['id']}").json()["name"] == "Mismatch"


def test_update_missing_project_inserts_new_row(client):
    """PUT на несуществующий id сохраняет новый проект; id назначает БД."""
    resp = client.put("/projects/777", json={"name": "Upserted"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Upserted"
    assert client.get(f"/projects/{body['id']}").json()["name"] == "Upserted"


def test_create_publishes_project_created_event(client):
    """Событие публикуется только для валидного запроса и несёт имя проекта."""
    received = []
    publisher = EventPublisher()
    publisher.subscribe(ProjectCreatedEvent, received.append)
    client.app.dependency_overrides[get_publisher] = lambda: publisher

    client.post("/projects", json={})
    assert received == []

    _create(client, "Evented")
    assert received == [ProjectCreatedEvent("Evented")]


def test_app_publisher_has_default_listener(client):
    listeners = client.app.state.publisher.listeners_for(ProjectCreatedEvent)
    assert len(listeners) == 1


def test_create_without_body_returns_400(client):
    """POST без тела и с телом null -> 400, как и без name."""
    resp = client.post("/projects")
    assert resp.status_code == 400
    assert resp.json()["message"] == "Project name must not be null"

    resp = client.post(
        "/projects", content="null", headers={"Content-Type": "application/json"}
    )
    assert resp.status_code == 400


HUGE_ID = 99999999999999999999  # больше BIGINT


def test_get_id_beyond_column_range_returns_404(client):
    resp = client.get(f"/projects/{HUGE_ID}")
    assert resp.status_code == 404
    assert resp.json()["path"] == f"/projects/{HUGE_ID}"

    resp = client.get(f"/projects/{2 ** 31}")
    assert resp.status_code == 404


def test_delete_id_beyond_column_range_returns_204(client):
    resp = client.delete(f"/projects/{HUGE_ID}")
    assert resp.status_code == 204
    resp = client.delete(f"/projects/-{HUGE_ID}")
    assert resp.status_code == 204


def test_update_id_beyond_column_range_inserts_new_row(client):
    resp = client.put(f"/projects/{HUGE_ID}", json={"name": "Big"})
    assert resp.status_code == 200
    assert client.get(f"/projects/{resp.json()['id']}").json()["name"] == "Big"
