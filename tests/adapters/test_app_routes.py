"""Ensure the HTTP application exposes the account type routes."""

from src.adapters.api.app import create_app
from src.domain.errors import NotFoundError


def test_create_app_registers_account_type_routes() -> None:
    app = create_app()

    routes = {
        (route.path, method)
        for route in app.routes
        if hasattr(route, "methods")
        for method in route.methods
    }

    assert {
        ("/accounts/types", "GET"),
        ("/accounts/types", "POST"),
        ("/accounts/types/{account_type_id}", "GET"),
        ("/accounts/types/{account_type_id}", "PUT"),
        ("/accounts/types/{account_type_id}", "DELETE"),
    } <= routes


def test_create_app_handles_not_found_errors() -> None:
    app = create_app()

    assert NotFoundError in app.exception_handlers
