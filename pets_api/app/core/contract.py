"""
Contract for the pets content provider.

Holds every name shared between the provider, the storage layer and
its callers: the content authority, the collection path, the table and
column names, the gender enumerants and the MIME descriptors returned
by ``PetProvider.type_of``.
"""

from enum import IntEnum

CONTENT_SCHEME = "content"
CONTENT_AUTHORITY = "com.example.android.pets"
BASE_CONTENT_URI = f"{CONTENT_SCHEME}://{CONTENT_AUTHORITY}"
PATH_PETS = "pets"

# content://com.example.android.pets/pets
CONTENT_URI = f"{BASE_CONTENT_URI}/{PATH_PETS}"

CURSOR_DIR_BASE_TYPE = "vnd.android.cursor.dir"
CURSOR_ITEM_BASE_TYPE = "vnd.android.cursor.item"

# MIME type for a list of pets.
CONTENT_LIST_TYPE = f"{CURSOR_DIR_BASE_TYPE}/{CONTENT_AUTHORITY}/{PATH_PETS}"
# MIME type for a single pet.
CONTENT_ITEM_TYPE = f"{CURSOR_ITEM_BASE_TYPE}/{CONTENT_AUTHORITY}/{PATH_PETS}"

TABLE_NAME = "pets"

COLUMN_ID = "_id"
COLUMN_PET_NAME = "name"
COLUMN_PET_BREED = "breed"
COLUMN_PET_GENDER = "gender"
COLUMN_PET_WEIGHT = "weight"

# Largest value an SQLite INTEGER column can hold.
MAX_INTEGER = 2**63 - 1

ALL_COLUMNS = (
    COLUMN_ID,
    COLUMN_PET_NAME,
    COLUMN_PET_BREED,
    COLUMN_PET_GENDER,
    COLUMN_PET_WEIGHT,
)


class Gender(IntEnum):
    """Possible values for the gender of a pet."""

    UNKNOWN = 0
    MALE = 1
    FEMALE = 2


def is_valid_gender(value) -> bool:
    """Return ``True`` if ``value`` is one of the stored gender codes."""
    if value is None or isinstance(value, bool):
        return False
    return value in {g.value for g in Gender}


def item_uri(pet_id: int) -> str:
    """Build the content URI addressing the pet with ``pet_id``."""
    return f"{CONTENT_URI}/{pet_id}"
