"""
Catalog operations built on the pets content provider.

These are the actions offered by the pet catalog: listing every pet
with the columns the list shows, inserting a sample pet and deleting
all entries.  They go through ``PetProvider`` like any other caller.
"""

from typing import Any, Dict, List, Union

from pets_api.app.core import contract
from pets_api.app.core.errors import Failure
from pets_api.app.services.pet_provider import PetProvider

CATALOG_PROJECTION = (
    contract.COLUMN_ID,
    contract.COLUMN_PET_NAME,
    contract.COLUMN_PET_BREED,
)

DUMMY_PET = {
    contract.COLUMN_PET_NAME: "Toto",
    contract.COLUMN_PET_BREED: "Terrier",
    contract.COLUMN_PET_GENDER: contract.Gender.MALE,
    contract.COLUMN_PET_WEIGHT: 7,
}


def list_catalog(provider: PetProvider) -> Union[List[Dict[str, Any]], Failure]:
    return provider.read(contract.CONTENT_URI, projection=CATALOG_PROJECTION)


def insert_dummy_pet(provider: PetProvider) -> Union[str, Failure]:
    """Insert Toto, the sample terrier, and return its content URI."""
    return provider.insert(contract.CONTENT_URI, dict(DUMMY_PET))


def delete_all_pets(provider: PetProvider) -> Union[int, Failure]:
    return provider.delete(contract.CONTENT_URI)
