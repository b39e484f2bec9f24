"""
Content provider for the pets table.

``PetProvider`` is the only way the rest of the application reads or
writes pets.  Every operation takes a content URI, classifies it with
the ``UriMatcher``, validates field sets for writes and only then
delegates to the storage adapter.

Operations never raise for bad input.  They return either their
result (rows, a new item URI, an affected-row count, a MIME type) or a
``Failure`` from ``pets_api.app.core.errors``.  Engine errors raised by
reads, updates and deletes are not translated and propagate to the
caller; a failed insert is reported as ``StorageWriteFailed``.

When a URI addresses a single pet, the caller's selection is replaced
by ``_id = ?`` with the id taken from the URI.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import urlsplit, urlunsplit

from pydantic import ValidationError

from pets_api.app.core import contract
from pets_api.app.core.errors import (
    Failure,
    InvalidFieldValue,
    StorageWriteFailed,
    UnsupportedOperation,
)
from pets_api.app.core.storage import SQLiteStorage
from pets_api.app.schemas.pet import PetValues
from pets_api.app.services.pet_validator import WriteKind, validate_pet
from pets_api.app.services.uri_matcher import MatchKind, UriMatch, UriMatcher, build_pet_matcher

logger = logging.getLogger(__name__)

ValuesLike = Union[PetValues, Mapping[str, Any], None]


def _id_selection(pet_id: int) -> Tuple[str, Tuple[int]]:
    return f"{contract.COLUMN_ID} = ?", (pet_id,)


def _with_appended_id(uri: str, row_id: int) -> str:
    parts = urlsplit(uri)
    path = f"{parts.path.rstrip('/')}/{row_id}"
    return urlunsplit((parts.scheme, parts.netloc, path, "", ""))


def _coerce_values(values: ValuesLike) -> Union[PetValues, Failure]:
    """Turn a mapping into ``PetValues``; type errors become ``InvalidFieldValue``."""
    if isinstance(values, PetValues):
        return values
    try:
        return PetValues.model_validate(dict(values or {}))
    except ValidationError as exc:
        error = exc.errors()[0]
        loc = error.get("loc") or ("values",)
        return InvalidFieldValue(field=str(loc[0]), value=error.get("input"))


class PetProvider:
    """Routes, validates and dispatches CRUD operations on pets."""

    def __init__(
        self,
        matcher: Optional[UriMatcher] = None,
        storage: Optional[SQLiteStorage] = None,
    ) -> None:
        self.matcher = matcher or build_pet_matcher()
        self.storage = storage or SQLiteStorage()

    def resolve(self, uri: str) -> Union[UriMatch, Failure]:
        """Classify ``uri`` as the pets collection or a single pet."""
        return self._match(uri)

    def read(
        self,
        uri: str,
        projection: Optional[Sequence[str]] = None,
        selection: Optional[str] = None,
        selection_args: Optional[Sequence[Any]] = None,
        sort_order: Optional[str] = None,
    ) -> Union[List[Dict[str, Any]], Failure]:
        """Query pets.

        For the collection URI the selection, its arguments and the
        sort order are passed to storage unchanged.  For an item URI
        the result holds zero or one row.
        """
        match = self._match(uri)
        if isinstance(match, Failure):
            return match
        if match.kind is MatchKind.ITEM:
            selection, selection_args = _id_selection(match.pet_id)
        return self.storage.query_rows(
            contract.TABLE_NAME, projection, selection, selection_args, sort_order
        )

    def insert(self, uri: str, values: ValuesLike) -> Union[str, Failure]:
        """Insert a pet and return the content URI of the new row.

        Only the collection URI accepts inserts.  ``values`` must hold
        a name and a valid gender; breed and weight are optional and
        fall back to the column defaults when absent.
        """
        match = self._match(uri)
        if isinstance(match, Failure):
            return match
        if match.kind is not MatchKind.COLLECTION:
            return self._reject(UnsupportedOperation(operation="insert", uri=uri))
        return self._insert_pet(uri, values)

    def _insert_pet(self, uri: str, values: ValuesLike) -> Union[str, Failure]:
        fields = _coerce_values(values)
        if isinstance(fields, Failure):
            return self._reject(fields)
        failure = validate_pet(fields, WriteKind.INSERT)
        if failure is not None:
            return self._reject(failure)

        new_id = self.storage.insert_row(contract.TABLE_NAME, fields.present())
        if new_id is None or new_id < 0:
            return self._reject(StorageWriteFailed(uri=uri))
        logger.info("Inserted pet %s", new_id)
        return _with_appended_id(uri, new_id)

    def update(
        self,
        uri: str,
        values: ValuesLike,
        selection: Optional[str] = None,
        selection_args: Optional[Sequence[Any]] = None,
    ) -> Union[int, Failure]:
        """Update pets and return the number of rows changed.

        Only the fields present in ``values`` are checked and written.
        An empty field set is a no-op that returns 0 without touching
        storage.
        """
        match = self._match(uri)
        if isinstance(match, Failure):
            return match
        if match.kind is MatchKind.ITEM:
            selection, selection_args = _id_selection(match.pet_id)
        return self._update_pets(values, selection, selection_args)

    def _update_pets(
        self,
        values: ValuesLike,
        selection: Optional[str],
        selection_args: Optional[Sequence[Any]],
    ) -> Union[int, Failure]:
        fields = _coerce_values(values)
        if isinstance(fields, Failure):
            return self._reject(fields)
        failure = validate_pet(fields, WriteKind.UPDATE)
        if failure is not None:
            return self._reject(failure)

        present = fields.present()
        if not present:
            return 0
        rows_updated = self.storage.update_rows(
            contract.TABLE_NAME, present, selection, selection_args
        )
        logger.info("Updated %s pet(s)", rows_updated)
        return rows_updated

    def delete(
        self,
        uri: str,
        selection: Optional[str] = None,
        selection_args: Optional[Sequence[Any]] = None,
    ) -> Union[int, Failure]:
        """Delete pets and return the number of rows removed."""
        match = self._match(uri)
        if isinstance(match, Failure):
            return match
        if match.kind is MatchKind.ITEM:
            selection, selection_args = _id_selection(match.pet_id)
        rows_deleted = self.storage.delete_rows(
            contract.TABLE_NAME, selection, selection_args
        )
        logger.info("Deleted %s pet(s)", rows_deleted)
        return rows_deleted

    def type_of(self, uri: str) -> Union[str, Failure]:
        """Return the MIME type of the data behind ``uri``."""
        match = self._match(uri)
        if isinstance(match, Failure):
            return match
        if match.kind is MatchKind.ITEM:
            return contract.CONTENT_ITEM_TYPE
        return contract.CONTENT_LIST_TYPE

    def _match(self, uri: str) -> Union[UriMatch, Failure]:
        match = self.matcher.match(uri)
        if isinstance(match, Failure):
            return self._reject(match)
        return match

    @staticmethod
    def _reject(failure: Failure) -> Failure:
        logger.warning("Rejected pets request: %s", failure.message)
        return failure
