"""Tests for the account types HTTP routes."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from src.adapters.api import account_types as account_types_module
from src.adapters.api import app as app_module
from src.adapters.api.dependencies import get_account_types_use_case
from src.application.use_cases.account_types import AccountTypesUseCase


@pytest.fixture
def use_case(account_types_repository) -> AccountTypesUseCase:
    return AccountTypesUseCase(account_types_repository, logger=MagicMock())


@pytest.fixture
def client(monkeypatch, use_case) -> TestClient:
    """Provide a TestClient wired to an in-memory SQLite repository."""
    monkeypatch.setattr(
        account_types_module,
        "get_usage_logger",
        lambda: MagicMock(),
    )
    monkeypatch.setattr(app_module, "get_app_logger", lambda: MagicMock())
    app = app_module.create_app()
    app.dependency_overrides[get_account_types_use_case] = lambda: use_case
    return TestClient(app)


def _create(client: TestClient, type_label: str) -> int:
    response = client.post("/accounts/types", json={"type": type_label})
    return response.json()["id"]

def test_create_returns_201_with_generated_id(client: TestClient) -> None:
    response = client.post("/accounts/types", json={"type": "Asset"})

    assert response.status_code == 201
    assert isinstance(response.json()["id"], int)


def test_create_ignores_id_and_translation_key(client: TestClient) -> None:
    """Caller ids are discarded and translation keys start empty."""
    response = client.post(
        "/accounts/types",
        json={"id": 999, "type": "Income", "translation_key": "X"},
    )
    created_id = response.json()["id"]

    assert created_id != 999
    listing = client.get("/accounts/types").json()
    assert listing == [
        {"id": created_id, "type": "Income", "translationKey": ""},
    ]


def test_list_returns_all_account_types(client: TestClient) -> None:
    client.post("/accounts/types", json={"type": "Asset"})
    client.post("/accounts/types", json={"type": "Liability"})

    response = client.get("/accounts/types")

    assert response.status_code == 200
    assert [row["type"] for row in response.json()] == ["Asset", "Liability"]
    assert all(row["translationKey"] == "" for row in response.json())


def test_detail_returns_id_and_type(client: TestClient) -> None:
    created_id = _create(client, "Equity")

    response = client.get(f"/accounts/types/{created_id}")

    assert response.status_code == 200
    assert response.json() == {"id": created_id, "type": "Equity"}


def test_update_changes_fields_but_not_id(client: TestClient) -> None:
    created_id = _create(client, "Income")

    response = client.put(
        f"/accounts/types/{created_id}",
        json={"id": created_id + 100, "type": "Revenue"},
    )

    assert response.status_code == 200
    assert response.json() == {"id": created_id, "type": "Revenue"}
    assert client.get(f"/accounts/types/{created_id}").json() == {
        "id": created_id,
        "type": "Revenue",
    }
    assert client.get(f"/accounts/types/{created_id + 100}").status_code == 404


def test_remove_returns_204_with_empty_body(client: TestClient) -> None:
    created_id = _create(client, "Cash")

    response = client.delete(f"/accounts/types/{created_id}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get(f"/accounts/types/{created_id}").status_code == 404


@pytest.mark.parametrize(
    ("method", "kwargs"),
    [
        ("get", {}),
        ("put", {"json": {"type": "Ghost"}}),
        ("delete", {}),
    ],
)
def test_unknown_id_returns_404(client: TestClient, method, kwargs) -> None:
    response = getattr(client, method)("/accounts/types/4242", **kwargs)

    assert response.status_code == 404
    assert response.json() == {
        "detail": "Could not find an account type with id 4242.",
    }


def test_storage_errors_are_not_translated(monkeypatch) -> None:
    """Storage failures reach the server error boundary unchanged."""
    monkeypatch.setattr(
        account_types_module,
        "get_usage_logger",
        lambda: MagicMock(),
    )
    failing = MagicMock()
    failing.list.side_effect = OperationalError("SELECT", {}, Exception("down"))
    app = app_module.create_app()
    app.dependency_overrides[get_account_types_use_case] = lambda: failing

    response = TestClient(app, raise_server_exceptions=False).get(
        "/accounts/types"
    )

    assert response.status_code == 500
