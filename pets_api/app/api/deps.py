"""
Shared dependencies for API routes.

``get_provider`` hands routes the provider created in ``create_app``.
``raise_for_failure`` converts a provider failure into an HTTP error
with a stable ``code`` so clients can tell failures apart.
"""

from typing import Any, Dict, Type

from fastapi import HTTPException, Request, status

from pets_api.app.core.errors import (
    Failure,
    InvalidFieldValue,
    MalformedIdentifier,
    MissingRequiredField,
    StorageWriteFailed,
    UnsupportedOperation,
    UnsupportedResource,
)
from pets_api.app.services.pet_provider import PetProvider

FAILURE_STATUS: Dict[Type[Failure], int] = {
    UnsupportedResource: status.HTTP_404_NOT_FOUND,
    MalformedIdentifier: status.HTTP_400_BAD_REQUEST,
    MissingRequiredField: status.HTTP_400_BAD_REQUEST,
    InvalidFieldValue: status.HTTP_400_BAD_REQUEST,
    UnsupportedOperation: status.HTTP_405_METHOD_NOT_ALLOWED,
    StorageWriteFailed: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_provider(request: Request) -> PetProvider:
    return request.app.state.provider


def raise_for_failure(result: Any) -> None:
    if isinstance(result, Failure):
        raise HTTPException(
            status_code=FAILURE_STATUS.get(type(result), status.HTTP_400_BAD_REQUEST),
            detail={"code": result.code, "message": result.message},
        )
