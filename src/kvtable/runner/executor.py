# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Executor for running a batch of table operations.

Orchestrates the full execution flow:
1. Create store from configuration
2. Look the table up in a TableRegistry
3. Run each operation in order
4. Return structured result
"""

from __future__ import annotations

import logging
from typing import Any

from kvtable.config import create_store
from kvtable.exceptions import TableError
from kvtable.registry import TableRegistry
from kvtable.stores import Store
from kvtable.table import Table

from .schema import OperationSchema, RunnerInput, RunnerOutput

logger = logging.getLogger(__name__)


class ExecutionError(Exception):
    """Raised when an operation is missing a required field."""

    pass


class Executor:
    """Executes table operations described by a :class:`RunnerInput`.

    The executor is designed for dependency injection to support testing.
    Pass a custom store to the constructor to override store creation.

    Example:
        executor = Executor()
        output = await executor.execute(input_data)

        # For testing with a shared store:
        store = InMemoryStore()
        executor = Executor(store=store)
    """

    def __init__(self, store: Store | None = None) -> None:
        """Initialize executor with optional injected store.

        Args:
            store: Optional store to use instead of creating from config.
                   Useful for testing.
        """
        self._injected_store = store

    async def execute(self, input_data: RunnerInput) -> RunnerOutput:
        """Run every operation and report the results.

        Args:
            input_data: Complete runner input

        Returns:
            RunnerOutput with success/failure and results/error details

        Note:
            This method catches all exceptions and returns them as
            RunnerOutput errors, ensuring valid JSON is always returned.
        """
        results: list[Any] = []
        try:
            await self._execute_internal(input_data, results)
        except (TableError, ExecutionError) as e:
            return RunnerOutput(
                success=False,
                results=results,
                error=str(e),
                error_type=type(e).__name__,
            )
        except Exception as e:
            logger.exception("Unexpected failure while running operations")
            return RunnerOutput(
                success=False,
                results=results,
                error=str(e),
                error_type=type(e).__name__,
            )
        return RunnerOutput(success=True, results=results)

    async def _execute_internal(self, input_data: RunnerInput, results: list[Any]) -> None:
        """Internal execution logic.

        Separated from execute() to allow exception propagation
        for testing while execute() catches all errors.
        """
        # 1. Create store (use injected or create from config)
        store = (
            self._injected_store
            if self._injected_store is not None
            else create_store(input_data.store)
        )
        owns_store = self._injected_store is None  # We need to close it if we created it

        registry = TableRegistry(store)
        try:
            # 2. Look up the table
            table = await registry.get_or_create(input_data.table)

            # 3. Run operations in order
            for operation in input_data.operations:
                results.append(await self._run_operation(table, operation))
        finally:
            if owns_store:
                await registry.close()

    async def _run_operation(self, table: Table[Any], operation: OperationSchema) -> Any:
        """Run one operation against *table* and return its JSON-ready result.

        Raises:
            ExecutionError: If a required field is missing
            TableError: If the table rejects the operation
        """
        op = operation.op
        if op == "create":
            return await table.create(operation.data)
        if op == "count":
            return await table.count()
        if op == "truncate":
            await table.truncate()
            return None
        if op == "slot":
            if operation.count is None:
                raise ExecutionError("Operation 'slot' requires 'count'")
            rows = await table.slot(operation.offset, operation.count, operation.order)
            return [row.to_dict() for row in rows]

        if operation.pkey is None:
            raise ExecutionError(f"Operation '{op}' requires 'pkey'")
        if op == "delete":
            await table.delete(operation.pkey)
            return None
        if isinstance(operation.pkey, str):
            raise ExecutionError(f"Operation '{op}' requires an integer 'pkey'")
        if op == "read":
            return await table.read(operation.pkey)
        # update
        await table.update(operation.pkey, operation.data)
        return None
