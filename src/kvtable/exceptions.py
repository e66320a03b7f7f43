"""Custom exceptions for the kvtable package."""

from __future__ import annotations


class TableError(Exception):
    """Base exception for all table-related errors."""


class InvalidOperationError(TableError):
    """Raised when an operation would corrupt a table's internal state."""

    def __init__(self, table_name: str, message: str) -> None:
        self.table_name = table_name
        super().__init__(f"Invalid operation on table '{table_name}': {message}")


class InvalidArgumentError(TableError):
    """Raised when an argument has an unsupported value."""


class CodecError(TableError):
    """Base for failures converting values to and from their stored text."""


class SerializationError(CodecError):
    """Raised when a value cannot be encoded for storage."""


class DeserializationError(CodecError):
    """Raised when stored text cannot be decoded back into a value."""

    def __init__(self, key: str, detail: str = "") -> None:
        self.key = key
        msg = f"Cannot decode value stored under '{key}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class StoreError(TableError):
    """Raised when a store cannot be created or used."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        msg = f"Store error during '{operation}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
