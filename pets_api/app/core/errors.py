"""
Typed failures returned by the pets content provider.

Provider operations return one of these values instead of raising, so
that every caller decides at the call site what a rejected request
means for it (an HTTP status, a CLI exit code, a client error tuple).
Test a result with ``isinstance(result, Failure)``.

Routing and validation failures are always produced before storage is
touched.  ``StorageWriteFailed`` is the only failure reported after the
engine has attempted the write.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True)
class Failure:
    """Base class for all provider failures."""

    code: ClassVar[str] = "failure"

    @property
    def message(self) -> str:
        return self.code


@dataclass(frozen=True)
class UnsupportedResource(Failure):
    """The URI matches no registered pattern."""

    uri: str
    code: ClassVar[str] = "unsupported_resource"

    @property
    def message(self) -> str:
        return f"Unknown URI {self.uri}"


@dataclass(frozen=True)
class MalformedIdentifier(Failure):
    """The URI has the item shape but its id segment is not a valid id."""

    uri: str
    segment: str
    code: ClassVar[str] = "malformed_identifier"

    @property
    def message(self) -> str:
        return f"Invalid pet id {self.segment!r} in URI {self.uri}"


@dataclass(frozen=True)
class MissingRequiredField(Failure):
    field: str
    code: ClassVar[str] = "missing_required_field"

    @property
    def message(self) -> str:
        return f"Pet requires a {self.field}"


@dataclass(frozen=True)
class InvalidFieldValue(Failure):
    field: str
    value: Any = None
    code: ClassVar[str] = "invalid_field_value"

    @property
    def message(self) -> str:
        return f"Pet requires a valid {self.field} (got {self.value!r})"


@dataclass(frozen=True)
class UnsupportedOperation(Failure):
    """The operation is not defined for the addressed resource kind."""

    operation: str
    uri: str
    code: ClassVar[str] = "unsupported_operation"

    @property
    def message(self) -> str:
        return f"{self.operation.capitalize()} is not supported for {self.uri}"


@dataclass(frozen=True)
class StorageWriteFailed(Failure):
    uri: str
    code: ClassVar[str] = "storage_write_failed"

    @property
    def message(self) -> str:
        return f"Failed to insert row for {self.uri}"
