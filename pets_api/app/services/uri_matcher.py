"""
Content URI routing.

A ``UriMatcher`` is built once from a list of ``(authority, path,
code)`` patterns and never changes afterwards.  A ``#`` path segment
stands for a numeric row id, so ``("com.example.android.pets",
"pets/#", PET_ID)`` matches ``content://com.example.android.pets/pets/3``
and captures ``3``.  The URI scheme is not part of matching.

``match`` returns a ``UriMatch`` or a typed failure:

* ``UnsupportedResource`` when no pattern fits the URI;
* ``MalformedIdentifier`` when the URI has the shape of an id pattern
  but the id segment is not a non‑negative 64‑bit integer.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple, Union
from urllib.parse import urlsplit

from pets_api.app.core import contract
from pets_api.app.core.errors import Failure, MalformedIdentifier, UnsupportedResource

# Codes for the pets table patterns.
PETS = 100
PET_ID = 101

ID_WILDCARD = "#"
MAX_ROW_ID = contract.MAX_INTEGER

_DIGITS = re.compile(r"[0-9]+")


class MatchKind(str, Enum):
    COLLECTION = "collection"
    ITEM = "item"


@dataclass(frozen=True)
class UriPattern:
    authority: str
    segments: Tuple[str, ...]
    code: int

    @property
    def kind(self) -> MatchKind:
        if ID_WILDCARD in self.segments:
            return MatchKind.ITEM
        return MatchKind.COLLECTION


@dataclass(frozen=True)
class UriMatch:
    """Result of a successful match."""

    uri: str
    code: int
    kind: MatchKind
    pet_id: Optional[int] = None


def _split_path(path: str) -> Tuple[str, ...]:
    return tuple(segment for segment in path.split("/") if segment)


def parse_row_id(segment: str) -> Optional[int]:
    """Parse a row id segment, returning ``None`` if it is not a valid id."""
    if not _DIGITS.fullmatch(segment):
        return None
    value = int(segment)
    if value > MAX_ROW_ID:
        return None
    return value


class UriMatcher:
    """Immutable table of content URI patterns."""

    def __init__(self, patterns: Iterable[Tuple[str, str, int]]) -> None:
        self._patterns: Tuple[UriPattern, ...] = tuple(
            UriPattern(authority, _split_path(path), code)
            for authority, path, code in patterns
        )

    @property
    def patterns(self) -> Tuple[UriPattern, ...]:
        return self._patterns

    def match(self, uri: str) -> Union[UriMatch, Failure]:
        try:
            parts = urlsplit(uri)
        except ValueError:
            return UnsupportedResource(uri=str(uri))
        segments = _split_path(parts.path)

        malformed: Optional[MalformedIdentifier] = None
        for pattern in self._patterns:
            if pattern.authority != parts.netloc or len(pattern.segments) != len(segments):
                continue
            pet_id: Optional[int] = None
            bad_segment: Optional[str] = None
            matched = True
            for expected, actual in zip(pattern.segments, segments):
                if expected == ID_WILDCARD:
                    pet_id = parse_row_id(actual)
                    if pet_id is None:
                        bad_segment = actual
                elif expected != actual:
                    matched = False
                    break
            if not matched:
                continue
            if bad_segment is not None:
                # Keep looking; a literal pattern may still claim this URI.
                malformed = malformed or MalformedIdentifier(uri=uri, segment=bad_segment)
                continue
            return UriMatch(uri=uri, code=pattern.code, kind=pattern.kind, pet_id=pet_id)

        if malformed is not None:
            return malformed
        return UnsupportedResource(uri=uri)


def build_pet_matcher(authority: str = contract.CONTENT_AUTHORITY) -> UriMatcher:
    """Build the routing table for the pets provider.

    ``content://<authority>/pets`` addresses the whole table and
    ``content://<authority>/pets/<id>`` addresses a single row.
    """
    return UriMatcher(
        [
            (authority, contract.PATH_PETS, PETS),
            (authority, f"{contract.PATH_PETS}/{ID_WILDCARD}", PET_ID),
        ]
    )
