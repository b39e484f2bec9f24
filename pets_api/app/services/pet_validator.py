"""
Field validation for pet writes.

Inserts must carry a complete record: a name and a valid gender.
Updates are partial, so only the fields present in the field set are
checked.  Checks run in the order name, gender, weight and the first
violation is returned.  Weights must fit an SQLite INTEGER and may not
be negative.

A weight that is present but ``None`` is not checked, on inserts or on
updates; the column stores ``NULL`` in that case.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pets_api.app.core import contract
from pets_api.app.core.errors import Failure, InvalidFieldValue, MissingRequiredField
from pets_api.app.schemas.pet import PetValues


class WriteKind(str, Enum):
    INSERT = "insert"
    UPDATE = "update"


def _check_name(values: PetValues) -> Optional[Failure]:
    name = values.name
    if name is None or not name.strip():
        return MissingRequiredField(field=contract.COLUMN_PET_NAME)
    return None


def _check_gender(values: PetValues) -> Optional[Failure]:
    if not contract.is_valid_gender(values.gender):
        return InvalidFieldValue(field=contract.COLUMN_PET_GENDER, value=values.gender)
    return None


def _check_weight(values: PetValues) -> Optional[Failure]:
    weight = values.weight
    if weight is not None and not 0 <= weight <= contract.MAX_INTEGER:
        return InvalidFieldValue(field=contract.COLUMN_PET_WEIGHT, value=weight)
    return None


_CHECKS = (
    (contract.COLUMN_PET_NAME, _check_name),
    (contract.COLUMN_PET_GENDER, _check_gender),
    (contract.COLUMN_PET_WEIGHT, _check_weight),
)


def validate_pet(values: PetValues, kind: WriteKind) -> Optional[Failure]:
    """Return the first constraint violation in ``values`` or ``None``."""
    for field, check in _CHECKS:
        if kind is WriteKind.UPDATE and not values.is_present(field):
            continue
        failure = check(values)
        if failure is not None:
            return failure
    return None
