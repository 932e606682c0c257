"""API tests: the form page, form posts and the JSON records endpoints."""

import asyncio
import time

import httpx
import pytest
from fastapi.testclient import TestClient

from contactbook.infrastructure import InMemoryRecordCollection
from web.config import Settings
from web.main import create_app
from web.render import NO_ITEMS_HTML


def _seed() -> list[dict]:
    return [
        {"name": "Acer.com", "email": "acer@acer.com", "contacts": "Jon Smith"},
        {"name": "Sprint.com", "email": "alice@sprint.com", "contacts": "Virginie Charter"},
    ]


@pytest.fixture
def client():
    return TestClient(create_app(InMemoryRecordCollection(_seed())))


def _ids(client) -> list[str]:
    return [r["id"] for r in client.get("/api/records").json()]


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_index_renders_form_and_list(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "text/html" in r.headers["content-type"]
    assert 'name="itemForm"' in r.text
    assert "Acer.com" in r.text and "alice@sprint.com" in r.text
    assert '<span class="action-type">Add</span>' in r.text


def test_list_records(client):
    r = client.get("/api/records")
    assert r.status_code == 200
    body = r.json()
    assert [b["name"] for b in body] == ["Acer.com", "Sprint.com"]
    assert body[0]["contacts"] == ["Jon Smith"]


def test_get_record_and_missing(client):
    record_id = _ids(client)[0]
    r = client.get(f"/api/records/{record_id}")
    assert r.status_code == 200
    assert r.json()["name"] == "Acer.com"
    assert client.get("/api/records/nonexistent-uuid").status_code == 404


def test_submit_adds_record(client):
    r = client.post(
        "/records",
        data={"id": "", "name": "Marker.com", "email": "mary@marker.com", "contacts": "x, y"},
        follow_redirects=False,
    )
    assert r.status_code == 303
    assert r.headers["location"] == "/"
    records = client.get("/api/records").json()
    assert [b["name"] for b in records] == ["Acer.com", "Sprint.com", "Marker.com"]
    assert records[-1]["contacts"] == ["x", "y"]


def test_edit_then_submit_updates_record(client):
    record_id = _ids(client)[1]
    r = client.post(f"/records/{record_id}/edit", follow_redirects=False)
    assert r.status_code == 303

    page = client.get("/").text
    assert f'<input type="hidden" name="id" value="{record_id}">' in page
    assert '<span class="action-type">Update</span>' in page

    client.post(
        "/records",
        data={"id": record_id, "name": "Sprint.net", "email": "alice@sprint.net", "contacts": "Virginie Charter"},
    )
    record = client.get(f"/api/records/{record_id}").json()
    assert record["name"] == "Sprint.net"
    assert _ids(client)[1] == record_id
    assert '<span class="action-type">Add</span>' in client.get("/").text


def test_edit_unknown_record_is_404(client):
    assert client.post("/records/nonexistent-uuid/edit").status_code == 404


def test_submit_update_for_unknown_id_is_404(client):
    r = client.post("/records", data={"id": "nonexistent-uuid", "name": "X"})
    assert r.status_code == 404


def test_delete_until_empty_shows_placeholder(client):
    for record_id in _ids(client):
        r = client.post(f"/records/{record_id}/delete", follow_redirects=False)
        assert r.status_code == 303
    assert client.get("/api/records").json() == []
    assert NO_ITEMS_HTML in client.get("/").text


def test_create_app_loads_seed_from_settings(tmp_path):
    seed = tmp_path / "seed.yaml"
    seed.write_text("- name: Only.com\n  email: only@only.com\n")
    app = create_app(settings=Settings(seed_path=seed))
    client = TestClient(app)
    assert [b["name"] for b in client.get("/api/records").json()] == ["Only.com"]


class _SlowLookupCollection(InMemoryRecordCollection):
    """Pauses between finding a record and acting on it."""

    def _find(self, record_id: str) -> int:
        index = super()._find(record_id)
        time.sleep(0.05)
        return index


def test_concurrent_deletes_remove_the_requested_records():
    collection = _SlowLookupCollection([{"name": "A"}, {"name": "B"}, {"name": "C"}])
    a, b, _ = collection.get_all()
    app = create_app(collection)

    async def delete_both():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
            return await asyncio.gather(
                ac.post(f"/records/{a.id}/delete"),
                ac.post(f"/records/{b.id}/delete"),
            )

    responses = asyncio.run(delete_both())
    assert [r.status_code for r in responses] == [303, 303]
    assert [r.name for r in collection.get_all()] == ["C"]
    assert [e.name for e in app.state.controller.mount.entries] == ["C"]
