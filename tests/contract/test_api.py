"""
Contract tests for the HTTP API.

Tests verify:
- Request/response schemas and status codes for the record endpoints
- Annotated Path / Query constraints
- The generic validation, parse and reference endpoints
- The onboarding workflow endpoints and their error responses
"""

import pytest
from fastapi.testclient import TestClient

from validation_playbook.api import create_app
from validation_playbook.models import Config
from validation_playbook.runner import OnboardingRunner


@pytest.fixture
def client():
    app = create_app(settings=Config(app_name="Playbook Test"), runner=OnboardingRunner())
    with TestClient(app) as c:
        yield c


# ============================================================================
# HEALTH & CONFIG
# ============================================================================


def test_ping(client):
    response = client.get("/ping")
    assert response.status_code == 200
    assert response.json() == {"message": "pong"}


def test_config(client):
    body = client.get("/config").json()
    assert body["app_name"] == "Playbook Test"
    assert body["max_correction_attempts"] == 3


# ============================================================================
# USERS
# ============================================================================


class TestUsers:

    def test_create_coerces_and_assigns_id(self, client):
        response = client.post("/users", json={"name": "Alice", "email": "alice@example.com", "age": "42"})
        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["age"] == 42
        assert body["is_active"] is True
        assert "created_at" in body

    def test_invalid_body_is_422(self, client):
        response = client.post("/users", json={"name": "Alice", "email": "nope"})
        assert response.status_code == 422
        assert response.json()["detail"][0]["loc"] == ["body", "email"]

    def test_path_id_must_be_positive(self, client):
        assert client.get("/users/0").status_code == 422

    def test_unknown_user(self, client):
        response = client.get("/users/99")
        assert response.status_code == 404
        assert response.json()["detail"] == "User 99 not found"

    def test_filter_active(self, client):
        client.post("/users", json={"name": "Alice", "email": "alice@example.com"})
        client.post("/users", json={"name": "Bob", "email": "bob@example.com", "is_active": False})
        names = [u["name"] for u in client.get("/users", params={"active": "false"}).json()]
        assert names == ["Bob"]
        assert len(client.get("/users").json()) == 2


# ============================================================================
# PRODUCTS
# ============================================================================


class TestProducts:

    @pytest.fixture(autouse=True)
    def catalog(self, client):
        client.post("/products", json={"name": "Laptop", "price": 1000, "discount": 10, "tags": ["Electronics"]})
        client.post("/products", json={"name": "Mug", "price": 8, "quantity": 3, "tags": ["kitchen"]})

    def test_computed_fields_in_response(self, client):
        body = client.get("/products/1").json()
        assert body["final_price"] == 900.0
        assert body["in_stock"] is False
        assert body["tags"] == ["electronics"]

    def test_price_range(self, client):
        names = [p["name"] for p in client.get("/products", params={"min_price": 5, "max_price": 10}).json()]
        assert names == ["Mug"]

    def test_inverted_range_is_400(self, client):
        assert client.get("/products", params={"min_price": 10, "max_price": 5}).status_code == 400

    def test_negative_min_price_is_422(self, client):
        assert client.get("/products", params={"min_price": -1}).status_code == 422

    def test_tag_filter_is_case_insensitive(self, client):
        names = [p["name"] for p in client.get("/products", params={"tag": "ELECTRONICS"}).json()]
        assert names == ["Laptop"]

    def test_unknown_product(self, client):
        assert client.get("/products/42").status_code == 404


# ============================================================================
# EMPLOYEES
# ============================================================================


class TestEmployees:

    def test_nested_address(self, client, valid_employee):
        response = client.post("/employees", json=valid_employee)
        assert response.status_code == 201
        assert response.json()["address"]["country"] == "US"

    def test_nested_error_location(self, client, valid_employee):
        valid_employee["address"]["zip_code"] = "!"
        response = client.post("/employees", json=valid_employee)
        assert response.status_code == 422
        assert response.json()["detail"][0]["loc"] == ["body", "address", "zip_code"]

    def test_department_filter(self, client, valid_employee):
        client.post("/employees", json=valid_employee)
        client.post("/employees", json={**valid_employee, "department": "Sales"})
        names = [e["department"] for e in client.get("/employees", params={"department": "Sales"}).json()]
        assert names == ["Sales"]


# ============================================================================
# VALIDATION & REFERENCE
# ============================================================================


class TestValidation:

    def test_models(self, client):
        assert client.get("/models").json() == {"models": ["user", "product", "employee", "address", "config"]}

    def test_invalid_payload_is_still_200(self, client):
        response = client.post("/validate/product", json={"name": "Mug", "price": "free"})
        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is False
        assert body["model"] == "ProductCreate"
        assert body["errors"][0]["loc"] == "price"
        assert body["errors"][0]["error_type"] == "float_parsing"

    def test_valid_payload(self, client):
        body = client.post("/validate/Address", json={"street": "a", "city": "b", "zip_code": "12345"}).json()
        assert body["valid"] is True
        assert body["data"]["country"] == "US"

    def test_non_object_payload(self, client):
        body = client.post("/validate/user", json=[1, 2]).json()
        assert body["valid"] is False
        assert body["errors"][0]["loc"] == "__root__"

    def test_unknown_model(self, client):
        response = client.post("/validate/invoice", json={})
        assert response.status_code == 404
        assert response.json()["detail"] == "Unknown model 'invoice'"

    def test_parse_returns_record(self, client):
        response = client.post("/parse/product", json={"name": "Mug", "price": 10, "discount": 25})
        assert response.status_code == 200
        assert response.json()["final_price"] == 7.5

    def test_parse_failure_is_422_with_flattened_errors(self, client, valid_employee):
        valid_employee["address"]["zip_code"] = "!"
        response = client.post("/parse/employee", json=valid_employee)
        assert response.status_code == 422
        body = response.json()
        assert set(body) == {"model", "errors"}
        assert body["model"] == "EmployeeCreate"
        assert body["errors"][0]["loc"] == "address.zip_code"
        assert body["errors"][0]["error_type"] == "string_pattern_mismatch"

    def test_reference_is_markdown(self, client):
        response = client.get("/reference/employee")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/markdown")
        assert response.text.startswith("## EmployeeCreate")


# ============================================================================
# ONBOARDING
# ============================================================================


class TestOnboarding:

    def test_full_flow_with_correction(self, client, valid_employee):
        response = client.post("/onboarding", json={**valid_employee, "salary": "lots"})
        assert response.status_code == 202
        status = response.json()
        thread_id = status["thread_id"]
        assert status["stage"] == "correction_request"
        assert status["validation_errors"][0]["loc"] == "salary"

        status = client.post(
            f"/onboarding/{thread_id}/corrections",
            json={"raw_payload": valid_employee, "note": "salary fixed"},
        ).json()
        assert status["stage"] == "reviewer"
        assert status["prompt"]["profile"]["seniority"] == "mid"

        status = client.post(f"/onboarding/{thread_id}/review", json={"decision": "approve"}).json()
        assert status["stage"] == "completed"
        assert status["outcome"] == "registered"

        employees = client.get("/employees").json()
        assert [e["id"] for e in employees] == [status["employee_id"]]

    def test_status(self, client, valid_employee):
        thread_id = client.post("/onboarding", json=valid_employee).json()["thread_id"]
        status = client.get(f"/onboarding/{thread_id}").json()
        assert status["stage"] == "reviewer"
        assert status["audit_log"] == ["intake: payload valid", "enrich: seniority=mid"]

    def test_wrong_stage_is_409(self, client, valid_employee):
        thread_id = client.post("/onboarding", json=valid_employee).json()["thread_id"]
        response = client.post(f"/onboarding/{thread_id}/corrections", json={"raw_payload": valid_employee})
        assert response.status_code == 409
        assert response.json()["expected"] == "correction_request"
        assert response.json()["actual"] == "reviewer"

    def test_invalid_decision_is_422(self, client, valid_employee):
        thread_id = client.post("/onboarding", json=valid_employee).json()["thread_id"]
        response = client.post(f"/onboarding/{thread_id}/review", json={"decision": "maybe"})
        assert response.status_code == 422

    def test_unknown_thread_is_404(self, client):
        assert client.get("/onboarding/missing").status_code == 404
        assert client.post("/onboarding/missing/review", json={"decision": "approve"}).status_code == 404

    def test_non_object_payload_is_422(self, client):
        assert client.post("/onboarding", json=["not", "an", "object"]).status_code == 422
