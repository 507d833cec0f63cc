"""Account types router.

Routes:
    GET    /accounts/types
    GET    /accounts/types/{id}
    POST   /accounts/types
    PUT    /accounts/types/{id}
    DELETE /accounts/types/{id}

Unknown ids raise ``AccountTypeNotFoundError``, turned into 404 responses by
the application exception handler. Storage errors are not caught here.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, Response, status

from src.adapters.api.dependencies import get_account_types_use_case
from src.adapters.api.schemas import (
    AccountTypeCreated,
    AccountTypeDetailOut,
    AccountTypeOut,
)
from src.application.use_cases.account_types import AccountTypesUseCase
from src.infrastructure.logging.logger import get_usage_logger

router = APIRouter(prefix="/accounts/types", tags=["Account types"])


@router.get("", response_model=List[AccountTypeOut])
def list_account_types(
    use_case: AccountTypesUseCase = Depends(get_account_types_use_case),
):
    """List every account type."""
    get_usage_logger().info("GET /accounts/types")
    return [AccountTypeOut.from_dto(dto) for dto in use_case.list()]


@router.get("/{account_type_id}", response_model=AccountTypeDetailOut)
def get_account_type(
    account_type_id: int,
    use_case: AccountTypesUseCase = Depends(get_account_types_use_case),
):
    """Return a single account type."""
    get_usage_logger().info(f"GET /accounts/types/{account_type_id}")
    return AccountTypeDetailOut.from_detail(use_case.detail(account_type_id))


@router.post(
    "",
    response_model=AccountTypeCreated,
    status_code=status.HTTP_201_CREATED,
)
def create_account_type(
    payload: dict[str, Any] = Body(...),
    use_case: AccountTypesUseCase = Depends(get_account_types_use_case),
):
    """Create an account type; any ``id`` in the body is ignored."""
    get_usage_logger().info("POST /accounts/types")
    return AccountTypeCreated(id=use_case.create(payload))


@router.put("/{account_type_id}", response_model=AccountTypeDetailOut)
def update_account_type(
    account_type_id: int,
    payload: dict[str, Any] = Body(...),
    use_case: AccountTypesUseCase = Depends(get_account_types_use_case),
):
    """Update an account type's properties."""
    get_usage_logger().info(f"PUT /accounts/types/{account_type_id}")
    updated = use_case.update(account_type_id, payload)
    return AccountTypeDetailOut.from_detail(updated)


@router.delete(
    "/{account_type_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_account_type(
    account_type_id: int,
    use_case: AccountTypesUseCase = Depends(get_account_types_use_case),
):
    """Delete an account type."""
    get_usage_logger().info(f"DELETE /accounts/types/{account_type_id}")
    use_case.remove(account_type_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
