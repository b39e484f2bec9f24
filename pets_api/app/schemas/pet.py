"""
Pydantic schemas for pets.

``PetValues`` is the field set handed to the provider for inserts and
updates.  Every field is optional at the schema level; whether a field
was supplied at all is tracked by pydantic (``model_fields_set``), which
gives the three states a partial update needs: absent, explicitly
``null`` and a value.  Domain rules (required name, valid gender,
weight range) are enforced by the provider's validator, not
here, so that violations come back as typed failures.  The integer
fields refuse booleans and other non-integers instead of coercing them.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pets_api.app.core import contract


class PetValues(BaseModel):
    """Field set for inserting or updating a pet."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(None, description="Name of the pet")
    breed: Optional[str] = Field(None, description="Breed of the pet")
    gender: Optional[int] = Field(
        None, description="Gender code: 0 unknown, 1 male, 2 female"
    )
    weight: Optional[int] = Field(None, description="Weight of the pet in kg")

    @field_validator("gender", "weight", mode="before")
    @classmethod
    def integers_only(cls, value):
        if value is None:
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("must be an integer")
        return int(value)

    def present(self) -> Dict[str, Any]:
        """Return only the fields that were supplied, keyed by column name."""
        return self.model_dump(exclude_unset=True)

    def is_present(self, field: str) -> bool:
        return field in self.model_fields_set


class PetRead(BaseModel):
    """Schema for reading a pet."""

    id: int
    name: str
    breed: Optional[str] = None
    gender: int
    weight: Optional[int] = None
    uri: str

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "PetRead":
        pet_id = row[contract.COLUMN_ID]
        return cls(
            id=pet_id,
            name=row[contract.COLUMN_PET_NAME],
            breed=row.get(contract.COLUMN_PET_BREED),
            gender=row[contract.COLUMN_PET_GENDER],
            weight=row.get(contract.COLUMN_PET_WEIGHT),
            uri=contract.item_uri(pet_id),
        )


class UpdateResult(BaseModel):
    """Outcome of an update issued through the API."""

    uri: str
    updated: int


class DeleteResult(BaseModel):
    uri: str
    deleted: int


class ContentInfo(BaseModel):
    """How the provider resolves a content URI."""

    uri: str
    kind: str
    id: Optional[int] = None
    type: str
