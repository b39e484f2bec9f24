import pytest
from pydantic import ValidationError

from pets_api.app.core.contract import MAX_INTEGER, Gender
from pets_api.app.core.errors import InvalidFieldValue, MissingRequiredField
from pets_api.app.schemas.pet import PetValues
from pets_api.app.services.pet_validator import WriteKind, validate_pet


def test_complete_insert_passes():
    values = PetValues(name="Toto", breed="Terrier", gender=Gender.MALE, weight=7)
    assert validate_pet(values, WriteKind.INSERT) is None


def test_insert_without_breed_and_weight_passes():
    assert validate_pet(PetValues(name="Rex", gender=Gender.UNKNOWN), WriteKind.INSERT) is None


@pytest.mark.parametrize("values", [{"gender": 1}, {"name": None, "gender": 1}, {"name": "  ", "gender": 1}])
def test_insert_requires_name(values):
    failure = validate_pet(PetValues(**values), WriteKind.INSERT)
    assert failure == MissingRequiredField(field="name")


@pytest.mark.parametrize("values", [{"name": "Rex"}, {"name": "Rex", "gender": None}, {"name": "Rex", "gender": 3}])
def test_insert_requires_valid_gender(values):
    failure = validate_pet(PetValues(**values), WriteKind.INSERT)
    assert isinstance(failure, InvalidFieldValue)
    assert failure.field == "gender"


@pytest.mark.parametrize("kind", [WriteKind.INSERT, WriteKind.UPDATE])
def test_weight_boundary(kind):
    assert validate_pet(PetValues(name="Rex", gender=0, weight=0), kind) is None
    failure = validate_pet(PetValues(name="Rex", gender=0, weight=-1), kind)
    assert failure == InvalidFieldValue(field="weight", value=-1)


@pytest.mark.parametrize("kind", [WriteKind.INSERT, WriteKind.UPDATE])
def test_null_weight_is_not_checked(kind):
    assert validate_pet(PetValues(name="Rex", gender=2, weight=None), kind) is None


def test_update_only_checks_present_fields():
    assert validate_pet(PetValues(), WriteKind.UPDATE) is None
    assert validate_pet(PetValues(breed=None), WriteKind.UPDATE) is None
    assert validate_pet(PetValues(weight=3), WriteKind.UPDATE) is None


def test_update_rejects_present_null_name():
    assert validate_pet(PetValues(name=None), WriteKind.UPDATE) == MissingRequiredField(field="name")


def test_update_rejects_present_invalid_gender():
    failure = validate_pet(PetValues(gender=7), WriteKind.UPDATE)
    assert failure == InvalidFieldValue(field="gender", value=7)


def test_name_is_checked_before_gender():
    failure = validate_pet(PetValues(gender=9), WriteKind.INSERT)
    assert isinstance(failure, MissingRequiredField)


@pytest.mark.parametrize("kind", list(WriteKind))
def test_weight_upper_bound(kind):
    largest = PetValues(name="Rex", gender=0, weight=MAX_INTEGER)
    assert validate_pet(largest, kind) is None
    failure = validate_pet(PetValues(name="Rex", gender=0, weight=MAX_INTEGER + 1), kind)
    assert failure == InvalidFieldValue(field="weight", value=MAX_INTEGER + 1)


@pytest.mark.parametrize("value", [True, False, "1", 1.0])
def test_integer_fields_are_not_coerced(value):
    with pytest.raises(ValidationError):
        PetValues(name="Rex", gender=value)
    with pytest.raises(ValidationError):
        PetValues(name="Rex", gender=0, weight=value)


def test_gender_enum_members_are_stored_as_plain_ints():
    values = PetValues(name="Luna", gender=Gender.FEMALE)
    assert type(values.gender) is int
    assert values.gender == 2
