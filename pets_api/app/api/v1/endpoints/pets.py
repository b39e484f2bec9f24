"""
Pet endpoints for API v1.

These routes are the HTTP face of the pets content provider: the
catalog (list, insert a sample pet, delete everything) and the editor
(read, create, update and delete a single pet).  Every route turns its
path into a content URI and lets the provider do the routing and
validation; provider failures are mapped to HTTP errors by
``raise_for_failure``.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from pets_api.app.api.deps import get_provider, raise_for_failure
from pets_api.app.core import contract
from pets_api.app.schemas.pet import DeleteResult, PetRead, PetValues, UpdateResult
from pets_api.app.services import catalog_service
from pets_api.app.services.pet_provider import PetProvider

router = APIRouter()


def _item_uri(pet_id: str) -> str:
    return f"{contract.CONTENT_URI}/{pet_id}"


def _public_row(row: Dict[str, Any]) -> Dict[str, Any]:
    """Rename ``_id`` to ``id`` and attach the item URI when the id is known."""
    out = dict(row)
    if contract.COLUMN_ID in out:
        pet_id = out.pop(contract.COLUMN_ID)
        out["id"] = pet_id
        out["uri"] = contract.item_uri(pet_id)
    return out


def _parse_columns(columns: Optional[str]) -> Optional[List[str]]:
    if not columns:
        return None
    requested = [c.strip() for c in columns.split(",") if c.strip()]
    requested = [contract.COLUMN_ID if c == "id" else c for c in requested]
    unknown = [c for c in requested if c not in contract.ALL_COLUMNS]
    if unknown:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown column(s): {', '.join(unknown)}",
        )
    return requested


def _parse_sort(sort: Optional[str]) -> Optional[str]:
    # Unknown columns or directions are ignored, falling back to storage order.
    if not sort:
        return None
    parts = sort.split()
    if not parts:
        return None
    column = contract.COLUMN_ID if parts[0] == "id" else parts[0]
    if column not in contract.ALL_COLUMNS or len(parts) > 2:
        return None
    direction = parts[1].upper() if len(parts) == 2 else "ASC"
    if direction not in {"ASC", "DESC"}:
        return None
    return f"{column} {direction}"


def _read_pet(provider: PetProvider, uri: str) -> PetRead:
    rows = provider.read(uri)
    raise_for_failure(rows)
    if not rows:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pet not found")
    return PetRead.from_row(rows[0])


@router.get("/", response_model=List[Dict[str, Any]])
def list_pets(
    columns: Optional[str] = Query(None, description="Comma separated column names"),
    breed: Optional[str] = Query(None),
    gender: Optional[int] = Query(None),
    sort: Optional[str] = Query(None, description="Column name, optionally followed by asc/desc"),
    provider: PetProvider = Depends(get_provider),
) -> List[Dict[str, Any]]:
    """Return the pets in the catalog, optionally filtered by breed or gender."""
    where_clauses: List[str] = []
    params: List[Any] = []
    if breed is not None:
        where_clauses.append(f"{contract.COLUMN_PET_BREED} = ?")
        params.append(breed)
    if gender is not None:
        where_clauses.append(f"{contract.COLUMN_PET_GENDER} = ?")
        params.append(gender)
    rows = provider.read(
        contract.CONTENT_URI,
        projection=_parse_columns(columns),
        selection=" AND ".join(where_clauses) or None,
        selection_args=params,
        sort_order=_parse_sort(sort),
    )
    raise_for_failure(rows)
    return [_public_row(row) for row in rows]


@router.post("/", response_model=PetRead, status_code=status.HTTP_201_CREATED)
def create_pet(
    pet_in: PetValues,
    provider: PetProvider = Depends(get_provider),
) -> PetRead:
    """Create a pet.  ``name`` and ``gender`` are required."""
    new_uri = provider.insert(contract.CONTENT_URI, pet_in)
    raise_for_failure(new_uri)
    return _read_pet(provider, new_uri)


@router.post("/dummy", response_model=PetRead, status_code=status.HTTP_201_CREATED)
def insert_dummy_pet(provider: PetProvider = Depends(get_provider)) -> PetRead:
    """Insert the sample pet (Toto, a male terrier)."""
    new_uri = catalog_service.insert_dummy_pet(provider)
    raise_for_failure(new_uri)
    return _read_pet(provider, new_uri)


@router.delete("/", response_model=DeleteResult)
def delete_all_pets(provider: PetProvider = Depends(get_provider)) -> DeleteResult:
    deleted = catalog_service.delete_all_pets(provider)
    raise_for_failure(deleted)
    return DeleteResult(uri=contract.CONTENT_URI, deleted=deleted)


@router.get("/{pet_id}", response_model=PetRead)
def get_pet(pet_id: str, provider: PetProvider = Depends(get_provider)) -> PetRead:
    """Retrieve a single pet.  Returns HTTP 404 if it does not exist."""
    return _read_pet(provider, _item_uri(pet_id))


@router.patch("/{pet_id}", response_model=UpdateResult)
def update_pet(
    pet_id: str,
    pet_in: PetValues,
    provider: PetProvider = Depends(get_provider),
) -> UpdateResult:
    """Update the supplied fields of a pet.

    Fields left out of the body are not touched.  ``updated`` is 0
    when the pet does not exist or the body is empty.
    """
    uri = _item_uri(pet_id)
    updated = provider.update(uri, pet_in)
    raise_for_failure(updated)
    return UpdateResult(uri=uri, updated=updated)


@router.delete("/{pet_id}", response_model=DeleteResult)
def delete_pet(pet_id: str, provider: PetProvider = Depends(get_provider)) -> DeleteResult:
    uri = _item_uri(pet_id)
    deleted = provider.delete(uri)
    raise_for_failure(deleted)
    return DeleteResult(uri=uri, deleted=deleted)
