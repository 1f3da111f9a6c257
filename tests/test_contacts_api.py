"""Tests for the contacts endpoints."""

import pytest

BASE = "/api/v1/contacts"


async def test_index_with_letter_lists_matching_contacts(client, contact_factory):
    smith = await contact_factory(lastname="Smith")
    await contact_factory(lastname="Jones")

    response = await client.get(BASE, params={"letter": "S"})

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert [c["id"] for c in body["contacts"]] == [smith.id]


async def test_index_without_letter_lists_all_contacts(client, contact_factory):
    smith = await contact_factory(lastname="Smith")
    jones = await contact_factory(lastname="Jones")

    response = await client.get(BASE)

    assert response.status_code == 200
    assert [c["id"] for c in response.json()["contacts"]] == [jones.id, smith.id]


async def test_index_is_empty_without_contacts(client):
    response = await client.get(BASE)

    assert response.json() == {"contacts": [], "total": 0}


async def test_show_returns_contact_with_phones(client, contact_factory):
    contact = await contact_factory(firstname="Jane", lastname="Smith")

    response = await client.get(f"{BASE}/{contact.id}")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == contact.id
    assert body["name"] == "Jane Smith"
    assert [p["phone_type"] for p in body["phones"]] == ["home", "office", "mobile"]


async def test_show_missing_contact_is_404(client):
    response = await client.get(f"{BASE}/999")

    assert response.status_code == 404
    assert response.json() == {"detail": "Contact not found"}


async def test_new_returns_blank_template(client, auth_headers):
    response = await client.get(f"{BASE}/new", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["id"] is None
    assert [(p["id"], p["phone"], p["phone_type"]) for p in body["phones"]] == [
        (None, None, "home"),
        (None, None, "office"),
        (None, None, "mobile"),
    ]


async def test_edit_returns_contact(client, auth_headers, contact_factory):
    contact = await contact_factory()

    response = await client.get(f"{BASE}/{contact.id}/edit", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["email"] == contact.email


async def test_edit_missing_contact_is_404(client, auth_headers):
    response = await client.get(f"{BASE}/999/edit", headers=auth_headers)

    assert response.status_code == 404


async def test_create_saves_contact_and_points_to_it(client, auth_headers, contact_service):
    payload = {
        "firstname": "Aaron",
        "lastname": "Sumner",
        "email": "aaron@example.com",
        "phones_attributes": [
            {"phone": "555-0100", "phone_type": "home"},
            {"phone": "555-0101", "phone_type": "office"},
            {"phone": "555-0102", "phone_type": "mobile"},
        ],
    }

    response = await client.post(BASE, json=payload, headers=auth_headers)

    assert response.status_code == 201
    body = response.json()
    assert response.headers["location"].endswith(f"{BASE}/{body['id']}")
    assert body["name"] == "Aaron Sumner"
    assert len(body["phones"]) == 3
    assert len(await contact_service.list_all()) == 1


async def test_create_ignores_fields_outside_allow_list(client, auth_headers, contact_service):
    payload = {
        "firstname": "Aaron",
        "lastname": "Sumner",
        "email": "aaron@example.com",
        "id": 4242,
        "hidden": True,
        "phones": [{"phone": "555-0100", "phone_type": "home", "contact_id": 7}],
    }

    response = await client.post(BASE, json=payload, headers=auth_headers)

    assert response.status_code == 201
    contact = await contact_service.find(response.json()["id"])
    assert contact.id != 4242
    assert not hasattr(contact, "hidden")
    assert contact.phones[0].contact_id == contact.id


async def test_create_invalid_returns_errors_and_attempt(client, auth_headers, contact_service):
    payload = {
        "firstname": "Aaron",
        "email": "aaron@example.com",
        "phones": [{"phone": "555-0100", "phone_type": "home"}],
    }

    response = await client.post(BASE, json=payload, headers=auth_headers)

    assert response.status_code == 422
    body = response.json()
    assert body["errors"] == {"lastname": ["can't be blank"]}
    assert body["details"] == [
        {"field": "lastname", "reason": "blank", "message": "can't be blank"}
    ]
    assert body["contact"]["id"] is None
    assert body["contact"]["firstname"] == "Aaron"
    assert body["contact"]["phones"] == [{"id": None, "phone": "555-0100", "phone_type": "home"}]
    assert await contact_service.list_all() == []


async def test_update_changes_contact(client, auth_headers, contact_factory):
    contact = await contact_factory(firstname="Lawrence", lastname="Smith")

    response = await client.patch(
        f"{BASE}/{contact.id}", json={"firstname": "Larry"}, headers=auth_headers
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Larry Smith"
    assert response.headers["location"].endswith(f"{BASE}/{contact.id}")


async def test_put_is_accepted_for_update(client, auth_headers, contact_factory):
    contact = await contact_factory(lastname="Smith")

    response = await client.put(
        f"{BASE}/{contact.id}", json={"lastname": "Smythe"}, headers=auth_headers
    )

    assert response.status_code == 200
    assert response.json()["lastname"] == "Smythe"


async def test_update_invalid_keeps_stored_contact(client, auth_headers, contact_factory):
    contact = await contact_factory(firstname="Lawrence", lastname="Smith")

    response = await client.patch(
        f"{BASE}/{contact.id}",
        json={"firstname": "Larry", "lastname": None},
        headers=auth_headers,
    )

    assert response.status_code == 422
    body = response.json()
    assert body["errors"] == {"lastname": ["can't be blank"]}
    assert body["contact"]["firstname"] == "Larry"

    stored = (await client.get(f"{BASE}/{contact.id}")).json()
    assert (stored["firstname"], stored["lastname"]) == ("Lawrence", "Smith")


async def test_update_with_unknown_phone_id_is_404(client, auth_headers, contact_factory):
    contact = await contact_factory()

    response = await client.patch(
        f"{BASE}/{contact.id}",
        json={"phones": [{"id": 999, "phone": "555-0000"}]},
        headers=auth_headers,
    )

    assert response.status_code == 404
    assert response.json() == {"detail": "Phone not found"}


async def test_update_missing_contact_is_404(client, auth_headers):
    response = await client.patch(f"{BASE}/999", json={"firstname": "X"}, headers=auth_headers)

    assert response.status_code == 404


async def test_destroy_deletes_contact(client, auth_headers, contact_factory, contact_service):
    contact = await contact_factory()

    response = await client.delete(f"{BASE}/{contact.id}", headers=auth_headers)

    assert response.status_code == 204
    assert response.content == b""
    assert await contact_service.list_all() == []


async def test_destroy_missing_contact_is_404(client, auth_headers):
    response = await client.delete(f"{BASE}/999", headers=auth_headers)

    assert response.status_code == 404


@pytest.mark.parametrize(
    "method, path",
    [
        ("GET", f"{BASE}/new"),
        ("GET", f"{BASE}/1/edit"),
        ("POST", BASE),
        ("PATCH", f"{BASE}/1"),
        ("PUT", f"{BASE}/1"),
        ("DELETE", f"{BASE}/1"),
    ],
)
async def test_mutating_actions_require_authentication(client, contact_factory, method, path):
    await contact_factory()

    response = await client.request(method, path, json={"firstname": "X"})

    assert response.status_code in (401, 403)


async def test_invalid_token_is_rejected(client):
    response = await client.get(f"{BASE}/new", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401


async def test_index_and_show_are_public(client, contact_factory):
    contact = await contact_factory()

    assert (await client.get(BASE)).status_code == 200
    assert (await client.get(f"{BASE}/{contact.id}")).status_code == 200


async def test_request_id_is_echoed(client):
    response = await client.get(BASE, headers={"X-Request-Id": "abc123"})

    assert response.headers["x-request-id"] == "abc123"


@pytest.mark.parametrize(
    "payload",
    [
        {"firstname": "Aaron", "lastname": "S" * 256, "email": "aaron@example.com"},
        {
            "firstname": "Aaron",
            "lastname": "Sumner",
            "email": "aaron@example.com",
            "phones": [{"phone": "5" * 51, "phone_type": "home"}],
        },
    ],
)
async def test_create_rejects_values_longer_than_columns(client, auth_headers, contact_service, payload):
    response = await client.post(BASE, json=payload, headers=auth_headers)

    assert response.status_code == 422
    assert await contact_service.list_all() == []


async def test_update_rejects_values_longer_than_columns(client, auth_headers, contact_factory):
    contact = await contact_factory(firstname="Lawrence")

    response = await client.patch(
        f"{BASE}/{contact.id}", json={"firstname": "L" * 256}, headers=auth_headers
    )

    assert response.status_code == 422
    stored = (await client.get(f"{BASE}/{contact.id}")).json()
    assert stored["firstname"] == "Lawrence"
