"""Customer Routes — end-to-end HTTP behavior over a real SQLite file.

Invariants:
    - Success bodies are {"data": ...}; error bodies are plain text
    - POST returns 200, not 201
    - Missing id: GET → 404, PUT → 500
    - Bad id or bad JSON → 400, and nothing is written
    - Listing defaults to page 1 / limit 10; total_pages is floor division
"""

from datetime import datetime, timedelta

import pytest

from customer_api.api.dependencies import get_customer_repository
from customer_api.core.errors import DatabaseError
from customer_api.main import app
from customer_api.schemas.customer import CustomerDetails

ADA = {
    "name": "Ada Lovelace",
    "dob": "1815-12-10",
    "email": "ada@example.com",
    "contact": "555-0100",
}


async def _create(client, body=None) -> dict:
    res = await client.post("/customers", json=body or ADA)
    assert res.status_code == 200
    return res.json()["data"]


@pytest.fixture
async def seed_customers(store):
    """Insert 25 customers directly through the store."""
    for i in range(25):
        await store.create(CustomerDetails(name=f"Customer {i}"))


# ─── POST /customers ────────────────────────────────────────────

async def test_create_returns_200_with_envelope(client):
    res = await client.post("/customers", json=ADA)
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/json")
    body = res.json()
    assert set(body) == {"data"}
    customer = body["data"]
    assert customer["id"] >= 1
    assert customer["name"] == "Ada Lovelace"
    assert customer["dob"] == "1815-12-10"
    assert customer["email"] == "ada@example.com"
    assert customer["contact"] == "555-0100"
    assert customer["created_at"]
    assert customer["created_at"] == customer["updated_at"]


async def test_create_accepts_date_of_birth_key(client):
    customer = await _create(client, {"name": "Grace", "date_of_birth": "1906-12-09"})
    assert customer["dob"] == "1906-12-09"


async def test_create_with_missing_fields_stores_empty_strings(client):
    customer = await _create(client, {"name": "Only name"})
    assert customer["email"] == ""
    assert customer["dob"] == ""
    assert customer["contact"] == ""


async def test_create_with_empty_object_is_allowed(client):
    res = await client.post("/customers", json={})
    assert res.status_code == 200
    assert res.json()["data"]["name"] == ""


async def test_create_with_malformed_json_returns_400_and_creates_nothing(client, store):
    res = await client.post(
        "/customers",
        content=b'{"name": "Ada",',
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.headers["content-type"].startswith("text/plain")
    assert res.text.startswith("Invalid JSON body")
    assert await store.count() == 0


async def test_create_without_body_returns_400(client):
    res = await client.post("/customers")
    assert res.status_code == 400


async def test_create_with_non_object_body_returns_400(client):
    res = await client.post("/customers", json=["Ada"])
    assert res.status_code == 400


async def test_create_with_non_string_field_returns_400(client, store):
    res = await client.post("/customers", json={"name": 42})
    assert res.status_code == 400
    assert await store.count() == 0


@pytest.mark.parametrize("headers", [{}, {"content-type": "text/plain"}])
async def test_create_decodes_json_regardless_of_content_type(client, headers):
    res = await client.post(
        "/customers", content=b'{"name": "Ada", "email": "ada@example.com"}',
        headers=headers,
    )
    assert res.status_code == 200
    customer = res.json()["data"]
    assert customer["name"] == "Ada"
    assert customer["email"] == "ada@example.com"


async def test_update_decodes_json_without_content_type(client):
    created = await _create(client)
    res = await client.put(f"/customers/{created['id']}", content=b'{"name": "Augusta"}')
    assert res.status_code == 200
    assert res.json()["data"]["name"] == "Augusta"


async def test_timestamps_are_marked_utc(client):
    customer = await _create(client)
    assert customer["created_at"].endswith("Z")
    assert customer["updated_at"].endswith("Z")
    assert datetime.fromisoformat(customer["created_at"]).utcoffset() == timedelta(0)


async def test_ids_strictly_increase_across_requests(client):
    first = await _create(client)
    second = await _create(client)
    assert second["id"] > first["id"]


# ─── GET /customers/{id} ────────────────────────────────────────

async def test_get_returns_created_customer(client):
    created = await _create(client)
    res = await client.get(f"/customers/{created['id']}")
    assert res.status_code == 200
    fetched = res.json()["data"]
    assert fetched == created
    assert fetched["created_at"] == fetched["updated_at"]


async def test_get_never_issued_id_returns_404(client):
    res = await client.get("/customers/999999")
    assert res.status_code == 404
    assert res.text == "Customer not found"


INVALID_IDS = ["abc", "1.5", "1.0", "1_0", "%201", "1e0", "9223372036854775808"]


@pytest.mark.parametrize("bad_id", INVALID_IDS)
async def test_get_invalid_id_returns_400(client, bad_id):
    res = await client.get(f"/customers/{bad_id}")
    assert res.status_code == 400
    assert res.text == "Invalid id"


async def test_get_accepts_explicit_plus_sign(client):
    created = await _create(client)
    res = await client.get(f"/customers/%2B{created['id']}")
    assert res.status_code == 200
    assert res.json()["data"]["id"] == created["id"]


# ─── PUT /customers/{id} ────────────────────────────────────────

async def test_update_changes_fields_and_keeps_identity(client):
    created = await _create(client)
    res = await client.put(
        f"/customers/{created['id']}",
        json={
            "name": "Augusta Ada King",
            "dob": "1815-12-10",
            "email": "countess@example.com",
            "contact": "555-0199",
        },
    )
    assert res.status_code == 200
    updated = res.json()["data"]
    assert updated["id"] == created["id"]
    assert updated["created_at"] == created["created_at"]
    assert updated["name"] == "Augusta Ada King"
    assert updated["email"] == "countess@example.com"
    assert updated["contact"] == "555-0199"
    assert datetime.fromisoformat(updated["updated_at"]) >= datetime.fromisoformat(
        created["updated_at"],
    )

    fetched = (await client.get(f"/customers/{created['id']}")).json()["data"]
    assert fetched == updated


async def test_update_never_issued_id_returns_500(client, store):
    res = await client.put("/customers/424242", json=ADA)
    assert res.status_code == 500
    assert res.text == "Customer not found"
    assert await store.count() == 0


@pytest.mark.parametrize("bad_id", ["not-a-number", *INVALID_IDS])
async def test_update_invalid_id_returns_400(client, store, bad_id):
    res = await client.put(f"/customers/{bad_id}", json=ADA)
    assert res.status_code == 400
    assert res.text == "Invalid id"
    assert await store.count() == 0


async def test_update_invalid_id_is_reported_before_bad_body(client):
    res = await client.put("/customers/abc", content=b"{not json")
    assert res.status_code == 400
    assert res.text == "Invalid id"


@pytest.mark.parametrize("method", ["GET", "PUT"])
async def test_empty_id_segment_returns_400_not_redirect(client, method):
    res = await client.request(method, "/customers/", json=ADA if method == "PUT" else None)
    assert res.status_code == 400
    assert res.text == "Invalid id"


async def test_update_with_malformed_json_returns_400(client):
    created = await _create(client)
    res = await client.put(
        f"/customers/{created['id']}",
        content=b"not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400

    fetched = (await client.get(f"/customers/{created['id']}")).json()["data"]
    assert fetched["name"] == ADA["name"]


# ─── GET /customers ─────────────────────────────────────────────

async def test_list_first_page_of_25(client, seed_customers):
    res = await client.get("/customers", params={"page": 1, "limit": 10})
    assert res.status_code == 200
    payload = res.json()["data"]
    assert len(payload["data"]) == 10
    assert payload["total_pages"] == 2


async def test_list_partial_last_page(client, seed_customers):
    res = await client.get("/customers", params={"page": 3, "limit": 10})
    payload = res.json()["data"]
    assert len(payload["data"]) == 5
    assert payload["total_pages"] == 2


async def test_list_defaults_to_page_one_limit_ten(client, seed_customers):
    default = (await client.get("/customers")).json()["data"]
    explicit = (await client.get("/customers?page=1&limit=10")).json()["data"]
    assert len(default["data"]) == 10
    assert default == explicit


async def test_list_invalid_params_fall_back_to_defaults(client, seed_customers):
    res = await client.get("/customers", params={"page": "abc", "limit": "-4"})
    assert res.status_code == 200
    payload = res.json()["data"]
    assert len(payload["data"]) == 10
    assert payload["total_pages"] == 2


async def test_list_pages_do_not_overlap(client, seed_customers):
    first = (await client.get("/customers?page=1&limit=10")).json()["data"]["data"]
    second = (await client.get("/customers?page=2&limit=10")).json()["data"]["data"]
    assert not {c["id"] for c in first} & {c["id"] for c in second}


async def test_list_empty_table(client):
    res = await client.get("/customers")
    assert res.status_code == 200
    assert res.json() == {"data": {"data": [], "total_pages": 0}}


# ─── Store failures ─────────────────────────────────────────────

class _FailingStore:
    """CustomerRepository whose every call fails like a broken database."""

    async def _fail(self, *args, **kwargs):
        raise DatabaseError("Connection or operational error", "execute")

    create = update = get = list_page = count = _fail


@pytest.fixture
def failing_store(client):
    app.dependency_overrides[get_customer_repository] = lambda: _FailingStore()


@pytest.mark.parametrize("method, path, body", [
    ("POST", "/customers", ADA),
    ("PUT", "/customers/1", ADA),
    ("GET", "/customers/1", None),
    ("GET", "/customers", None),
])
async def test_store_failure_returns_500_plain_text(
    client, failing_store, method, path, body,
):
    res = await client.request(method, path, json=body)
    assert res.status_code == 500
    assert res.headers["content-type"].startswith("text/plain")
    assert res.text == "Database execute failed: Connection or operational error"
