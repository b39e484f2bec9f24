"""
Content URI endpoint for API v1.

Resolves any content URI the way the provider sees it: whether it
addresses the pets collection or a single pet, which id it carries and
the MIME type of the data behind it.
"""

from fastapi import APIRouter, Depends, Query

from pets_api.app.api.deps import get_provider, raise_for_failure
from pets_api.app.schemas.pet import ContentInfo
from pets_api.app.services.pet_provider import PetProvider

router = APIRouter()


@router.get("/", response_model=ContentInfo)
def resolve_uri(
    uri: str = Query(..., description="Content URI, e.g. content://com.example.android.pets/pets/3"),
    provider: PetProvider = Depends(get_provider),
) -> ContentInfo:
    match = provider.resolve(uri)
    raise_for_failure(match)
    mime_type = provider.type_of(uri)
    raise_for_failure(mime_type)
    return ContentInfo(uri=uri, kind=match.kind.value, id=match.pet_id, type=mime_type)
