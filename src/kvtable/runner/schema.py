# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for runner input/output.

These Pydantic models define the JSON documents the runner reads from
stdin and writes to stdout.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from kvtable.config import StoreConfig

OperationName = Literal["create", "read", "update", "delete", "count", "truncate", "slot"]


class OperationSchema(BaseModel):
    """Single table operation.

    Attributes:
        op: Operation to run
        pkey: Primary key (read, update, delete)
        data: Record value (create, update)
        offset: First row to return (slot)
        count: Maximum number of rows to return (slot)
        order: Primary key order (slot)
    """

    op: OperationName
    pkey: int | str | None = None
    data: Any = None
    offset: int = 0
    count: int | None = None
    order: Literal["asc", "desc"] = "asc"


class RunnerInput(BaseModel):
    """Complete input read from stdin.

    Attributes:
        store: Store configuration
        table: Name of the table every operation targets
        operations: Operations to run, in order
    """

    store: StoreConfig = Field(default_factory=StoreConfig)
    table: str
    operations: list[OperationSchema] = Field(default_factory=list)


class RunnerOutput(BaseModel):
    """Complete output written to stdout.

    The runner always outputs valid JSON matching this schema,
    even on errors.  On failure, ``results`` holds the results of the
    operations that completed before the failing one.

    Attributes:
        success: Whether every operation completed
        results: One result per completed operation
        error: Error message (on failure)
        error_type: Error class name (on failure)
    """

    success: bool
    results: list[Any] = Field(default_factory=list)
    error: str = ""
    error_type: str = ""
