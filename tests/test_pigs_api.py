"""
End-to-end tests for the pig collection.
"""

from fastapi.testclient import TestClient

from tests.payloads import WILBUR


PIG_ERROR = (
    "Invalid input: Ensure 'name', 'breed', 'birthDate', 'weight', and "
    "'healthStatus' are provided and are of the correct types."
)


def test_create_pig(client: TestClient) -> None:
    resp = client.post("/pigs", json=WILBUR)
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Pig created successfully"
    pig = body["pig"]
    assert pig["id"]
    assert pig["createdAt"]
    assert pig["name"] == "Wilbur"
    assert pig["breed"] == "Yorkshire"
    assert pig["birthDate"] == "2023-01-01T00:00:00Z"
    assert pig["weight"] == 50
    assert pig["healthStatus"] == "healthy"


def test_create_pig_missing_fields(client: TestClient) -> None:
    resp = client.post("/pigs", json={"breed": "Yorkshire"})
    assert resp.status_code == 400
    assert resp.json() == {"error": PIG_ERROR}


def test_rejected_pig_is_not_stored(client: TestClient) -> None:
    bad_payloads = [
        {**WILBUR, "name": ""},
        {**WILBUR, "name": 42},
        {**WILBUR, "weight": "50"},
        {**WILBUR, "weight": True},
        {**WILBUR, "birthDate": "not-a-date"},
        {**WILBUR, "birthDate": "2023-02-30"},
        {**WILBUR, "birthDate": 20230101},
        {k: v for k, v in WILBUR.items() if k != "healthStatus"},
    ]
    for payload in bad_payloads:
        resp = client.post("/pigs", json=payload)
        assert resp.status_code == 400, payload
        assert resp.json()["error"] == PIG_ERROR

    listed = client.get("/pigs").json()
    assert listed["pigs"] == []


def test_list_pigs(client: TestClient) -> None:
    created = []
    for name in ["Wilbur", "Babe", "Napoleon"]:
        resp = client.post("/pigs", json={**WILBUR, "name": name})
        assert resp.status_code == 201
        created.append(resp.json()["pig"])

    resp = client.get("/pigs")
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Pigs retrieved successfully"
    assert len(body["pigs"]) == 3
    assert sorted(body["pigs"], key=lambda p: p["id"]) == sorted(created, key=lambda p: p["id"])


def test_pigs_listed_in_identifier_order(client: TestClient) -> None:
    for i in range(5):
        client.post("/pigs", json={**WILBUR, "name": f"pig {i}"})
    ids = [pig["id"] for pig in client.get("/pigs").json()["pigs"]]
    assert ids == sorted(ids)


def test_list_is_idempotent(client: TestClient) -> None:
    client.post("/pigs", json=WILBUR)
    first = client.get("/pigs").json()
    second = client.get("/pigs").json()
    assert first == second


def test_identifiers_are_unique(client: TestClient) -> None:
    ids = {client.post("/pigs", json=WILBUR).json()["pig"]["id"] for _ in range(20)}
    assert len(ids) == 20


def test_client_supplied_id_and_extra_fields_ignored(client: TestClient) -> None:
    resp = client.post("/pigs", json={**WILBUR, "id": "mine", "createdAt": "1999-01-01", "colour": "pink"})
    assert resp.status_code == 201
    pig = resp.json()["pig"]
    assert pig["id"] != "mine"
    assert not pig["createdAt"].startswith("1999")
    assert "colour" not in pig


def test_zero_and_float_weights_accepted(client: TestClient) -> None:
    assert client.post("/pigs", json={**WILBUR, "weight": 0}).json()["pig"]["weight"] == 0
    assert client.post("/pigs", json={**WILBUR, "weight": 51.5}).json()["pig"]["weight"] == 51.5


def test_birth_date_with_offset_is_normalised_to_utc(client: TestClient) -> None:
    resp = client.post("/pigs", json={**WILBUR, "birthDate": "2023-01-01T02:00:00+02:00"})
    assert resp.status_code == 201
    assert resp.json()["pig"]["birthDate"] == "2023-01-01T00:00:00Z"


def test_birth_date_out_of_range_in_utc_is_rejected(client: TestClient) -> None:
    resp = client.post("/pigs", json={**WILBUR, "birthDate": "0001-01-01T00:00:00+05:00"})
    assert resp.status_code == 400
    assert resp.json() == {"error": PIG_ERROR}
    assert client.get("/pigs").json()["pigs"] == []


def test_snake_case_spelling_does_not_fill_required_fields(client: TestClient) -> None:
    payload = {
        "name": "W",
        "breed": "Y",
        "birth_date": "2023-01-01",
        "weight": 50,
        "health_status": "ok",
    }
    resp = client.post("/pigs", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"error": PIG_ERROR}
