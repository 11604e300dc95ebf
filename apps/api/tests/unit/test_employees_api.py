from __future__ import annotations

import uuid

import pytest

from app.models.employee import Role
from tests.conftest import auth_headers, employee_payload


def _login(client, email: str) -> dict[str, str]:
    response = client.post("/auth/login", json={"email": email, "password": "P@ssw0rd!"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


def _update_body(client, headers, employee_id, **changes) -> dict:
    current = client.get(f"/employees/{employee_id}", headers=headers).json()
    body = {
        "firstName": current["firstName"],
        "lastName": current["lastName"],
        "email": current["email"],
        "docNumber": current["docNumber"],
        "dateOfBirth": current["dateOfBirth"],
        "role": current["role"],
        "managerId": current["managerId"],
        "phones": [p["number"] for p in current["phones"]],
    }
    body.update(changes)
    return body


def test_list_returns_summaries_with_manager_name(client, seeded):
    headers = auth_headers(seeded[Role.director])
    response = client.get("/employees", headers=headers)
    assert response.status_code == 200
    by_email = {e["email"]: e for e in response.json()}
    erica = by_email["employee@demo.com"]
    assert erica["role"] == "employee"
    assert erica["managerId"] == str(seeded[Role.leader])
    assert erica["managerName"] == "Liam Leader"
    assert len(erica["phones"]) == 2
    assert by_email["director@demo.com"]["managerId"] is None
    assert by_email["director@demo.com"]["managerName"] is None


def test_list_search(client, seeded):
    response = client.get("/employees", params={"q": "Diana"}, headers=auth_headers(seeded[Role.director]))
    assert [e["firstName"] for e in response.json()] == ["Diana"]


@pytest.mark.parametrize("wildcard", ["_", "%"])
def test_list_search_treats_wildcards_literally(client, seeded, wildcard):
    response = client.get("/employees", params={"q": wildcard}, headers=auth_headers(seeded[Role.director]))
    assert response.status_code == 200
    assert response.json() == []


def test_get_single_and_404(client, seeded):
    headers = auth_headers(seeded[Role.employee], role="employee")
    assert client.get(f"/employees/{seeded[Role.leader]}", headers=headers).status_code == 200
    response = client.get(f"/employees/{uuid.uuid4()}", headers=headers)
    assert response.status_code == 404
    assert response.json()["code"] == "not_found"


def test_create_returns_201_with_location(client, seeded):
    headers = auth_headers(seeded[Role.leader], role="leader")
    response = client.post(
        "/employees",
        json=employee_payload(managerId=str(seeded[Role.leader]), role=2),
        headers=headers,
    )
    assert response.status_code == 201
    body = response.json()
    assert body["role"] == "leader"
    assert body["managerName"] == "Liam Leader"
    assert response.headers["Location"] == f"/employees/{body['id']}"
    assert "password" not in body and "passwordHash" not in body


def test_created_employee_can_log_in(client, seeded):
    client.post("/employees", json=employee_payload(), headers=auth_headers(seeded[Role.director]))
    response = client.post("/auth/login", json={"email": "nora@demo.com", "password": "S3cret!pass"})
    assert response.status_code == 200


def test_create_forbidden_for_higher_role(client, seeded):
    response = client.post(
        "/employees", json=employee_payload(role="director"), headers=auth_headers(seeded[Role.leader], role="leader")
    )
    assert response.status_code == 403
    assert response.json()["code"] == "forbidden"


def test_create_validation_failures_are_400(client, seeded):
    headers = auth_headers(seeded[Role.director])
    too_few = client.post("/employees", json=employee_payload(phones=["+1 555 0001"]), headers=headers)
    assert too_few.status_code == 400
    assert too_few.json()["code"] == "validation_failed"
    assert "phone" in too_few.json()["detail"]

    dup_doc = client.post("/employees", json=employee_payload(docNumber="EMP-001"), headers=headers)
    assert dup_doc.status_code == 400
    assert dup_doc.json()["detail"] == "DocNumber already exists."


def test_malformed_body_is_400(client, seeded):
    response = client.post(
        "/employees", json=employee_payload(email="not-an-email"), headers=auth_headers(seeded[Role.director])
    )
    assert response.status_code == 400
    assert response.json()["code"] == "validation_failed"
    assert any(err["field"] == "email" for err in response.json()["errors"])


def test_blank_password_is_400(client, seeded):
    response = client.post(
        "/employees", json=employee_payload(password="   "), headers=auth_headers(seeded[Role.director])
    )
    assert response.status_code == 400
    assert response.json()["code"] == "validation_failed"
    assert any(err["field"] == "password" for err in response.json()["errors"])


def test_update_to_another_document_is_400_not_409(client, seeded):
    headers = auth_headers(seeded[Role.director])
    body = _update_body(client, headers, seeded[Role.employee], docNumber="LED-001")
    response = client.put(f"/employees/{seeded[Role.employee]}", json=body, headers=headers)
    assert response.status_code == 400


def test_update_self_manager_is_400(client, seeded):
    headers = auth_headers(seeded[Role.director])
    erica = seeded[Role.employee]
    body = _update_body(client, headers, erica, managerId=str(erica))
    response = client.put(f"/employees/{erica}", json=body, headers=headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "An employee cannot be their own manager."


def test_update_missing_is_404(client, seeded):
    headers = auth_headers(seeded[Role.director])
    body = _update_body(client, headers, seeded[Role.employee])
    response = client.put(f"/employees/{uuid.uuid4()}", json=body, headers=headers)
    assert response.status_code == 404


def test_update_with_stale_version_is_409(client, seeded):
    headers = auth_headers(seeded[Role.director])
    erica = seeded[Role.employee]
    body = _update_body(client, headers, erica, lastName="First")
    current_version = client.get(f"/employees/{erica}", headers=headers).json()["version"]
    body["version"] = current_version
    assert client.put(f"/employees/{erica}", json=body, headers=headers).status_code == 200

    body["lastName"] = "Second"
    response = client.put(f"/employees/{erica}", json=body, headers=headers)
    assert response.status_code == 409
    assert response.json()["code"] == "conflict"


def test_leader_end_to_end_scenario(client, seeded):
    headers = _login(client, "leader@demo.com")
    erica = seeded[Role.employee]

    to_director = _update_body(client, headers, erica, role="director")
    response = client.put(f"/employees/{erica}", json=to_director, headers=headers)
    assert response.status_code == 403

    to_leader = _update_body(client, headers, erica, role="leader")
    response = client.put(f"/employees/{erica}", json=to_leader, headers=headers)
    assert response.status_code == 200
    assert response.json()["role"] == "leader"
    assert response.json()["managerId"] == str(seeded[Role.leader])


def test_leader_cannot_edit_director_unrelated_field(client, seeded):
    headers = _login(client, "leader@demo.com")
    diana = seeded[Role.director]
    body = _update_body(client, headers, diana, lastName="Renamed")
    response = client.put(f"/employees/{diana}", json=body, headers=headers)
    assert response.status_code == 403


def test_delete_flow(client, seeded):
    headers = auth_headers(seeded[Role.director])
    created = client.post("/employees", json=employee_payload(), headers=headers).json()

    assert client.delete(f"/employees/{created['id']}", headers=headers).status_code == 204
    assert client.get(f"/employees/{created['id']}", headers=headers).status_code == 404
    assert client.delete(f"/employees/{created['id']}", headers=headers).status_code == 404


def test_delete_forbidden_for_lower_rank(client, seeded):
    response = client.delete(
        f"/employees/{seeded[Role.director]}", headers=auth_headers(seeded[Role.leader], role="leader")
    )
    assert response.status_code == 403
